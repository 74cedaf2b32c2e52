"""
Server-side HTML rendering of the users page.

Rendering is a pure function of a PageResult plus the request's query
string: the same inputs always produce the same document.
"""

from collections.abc import Mapping
from html import escape
from urllib.parse import urlencode

from core.models.page_result import PageResult
from core.models.user import UserRecord
from core.utils.constants import (
    BOOTSTRAP_CSS_URL,
    DEFAULT_LIMIT,
    PAGE_DESCRIPTION,
    PAGE_TITLE,
    USER_TABLE_COLUMNS,
)
from core.views.pagination_control import PaginationControl


def render_document(body: str, *, title: str = PAGE_TITLE) -> str:
    """Wrap body markup in a complete HTML document."""
    return (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8">'
        f"<title>{escape(title)}</title>"
        f'<meta name="description" content="{escape(PAGE_DESCRIPTION)}">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f'<link rel="stylesheet" href="{BOOTSTRAP_CSS_URL}">'
        "</head>"
        f"<body>{body}</body>"
        "</html>"
    )


def render_error_alert(status_code: int) -> str:
    """Render the single alert shown in place of the page on failure."""
    return (
        '<div class="alert alert-danger" role="alert">'
        f"Error {status_code} while loading data"
        "</div>"
    )


def render_error_page(status_code: int) -> str:
    return render_document(render_error_alert(status_code))


class UsersPageView:
    """Render a PageResult as the users page.

    Args:
        result: Outcome of loading the page
        limit: Page size used for navigation links
        query: Incoming query parameters; unrelated ones are kept in links
    """

    def __init__(
        self,
        result: PageResult,
        *,
        limit: int = DEFAULT_LIMIT,
        query: Mapping[str, str] | None = None,
    ) -> None:
        self.result = result
        self.limit = limit
        self.query = {key: value for key, value in (query or {}).items() if value is not None}

    def navigate_to(self, page: int) -> str | None:
        """Return the URL that loads ``page``, or None when there is nothing to do.

        Selecting the current page is a no-op, and non-positive targets
        (only possible when the upstream reports zero pages) are refused.
        """
        pagination = self.result.pagination
        if pagination is None or page < 1 or page == pagination.current_page:
            return None

        params = {**self.query, "page": str(page), "limit": str(self.limit)}
        return "?" + urlencode(params)

    def render(self) -> str:
        if not self.result.is_success:
            return render_error_page(self.result.status_code)

        parts = [
            '<main class="container">',
            f'<h1 class="mb-5">{escape(PAGE_TITLE)}</h1>',
            self._render_table(),
        ]

        pagination = self.result.pagination
        if pagination is not None:
            control = PaginationControl(
                current_page=pagination.current_page,
                total_pages=pagination.total_pages,
                on_page_change=self.navigate_to,
            )
            parts.append(f'<nav aria-label="Users pages">{control.render()}</nav>')

        parts.append("</main>")
        return render_document("".join(parts))

    def _render_table(self) -> str:
        header = "".join(f"<th>{escape(title)}</th>" for _, title in USER_TABLE_COLUMNS)
        rows = "".join(self._render_row(user) for user in self.result.users)

        return (
            '<table class="table table-striped table-bordered table-hover">'
            f"<thead><tr>{header}</tr></thead>"
            f"<tbody>{rows}</tbody>"
            "</table>"
        )

    @staticmethod
    def _render_row(user: UserRecord) -> str:
        cells = "".join(
            f"<td>{escape(str(getattr(user, field)))}</td>" for field, _ in USER_TABLE_COLUMNS
        )
        return f'<tr data-user-id="{user.id}">{cells}</tr>'
