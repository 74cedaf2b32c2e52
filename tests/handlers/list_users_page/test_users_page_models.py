import pytest

from handlers.list_users_page.models import ListUsersPageRequest


class TestListUsersPageRequest:
    def test_defaults(self) -> None:
        request = ListUsersPageRequest.from_query(None)

        assert request.page == 1
        assert request.limit == 20

    def test_numeric_strings_are_parsed(self) -> None:
        request = ListUsersPageRequest.from_query({"page": "7", "limit": "50"})

        assert request.page == 7
        assert request.limit == 50

    def test_surrounding_whitespace_is_ignored(self) -> None:
        request = ListUsersPageRequest.from_query({"page": " 4 "})

        assert request.page == 4

    @pytest.mark.parametrize("raw", ["abc", "0", "-3", "2.5", "", "NaN"])
    def test_invalid_page_falls_back_to_first_page(self, raw: str) -> None:
        assert ListUsersPageRequest.from_query({"page": raw}).page == 1

    @pytest.mark.parametrize("raw", ["xyz", "0", "-1", "1e3"])
    def test_invalid_limit_falls_back_to_default(self, raw: str) -> None:
        assert ListUsersPageRequest.from_query({"limit": raw}).limit == 20

    def test_limit_above_maximum_is_clamped(self) -> None:
        assert ListUsersPageRequest.from_query({"limit": "500"}).limit == 100

    def test_unrelated_params_are_ignored(self) -> None:
        request = ListUsersPageRequest.from_query({"page": "2", "sort": "name"})

        assert request.model_dump() == {"page": 2, "limit": 20}

    def test_boolean_is_not_a_page_number(self) -> None:
        assert ListUsersPageRequest(page=True).page == 1
