"""
Pytest configuration and fixtures for user directory page tests.
Provides upstream users API stubs and sample payloads.
"""

import os
from collections.abc import Callable
from typing import Any

import pytest
import responses

os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "UserDirectoryTests")

USERS_API_BASE_URL = "http://users-api.test"
USERS_PAGES_URL = f"{USERS_API_BASE_URL}/users/pages"


@pytest.fixture(autouse=True)
def users_api_env(monkeypatch):
    """Point every test at the stubbed users API."""
    monkeypatch.setenv("USERS_API_BASE_URL", USERS_API_BASE_URL)
    monkeypatch.delenv("USERS_API_TIMEOUT_SECONDS", raising=False)


@pytest.fixture
def mocked_responses():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Single user as sent by the users API."""
    return {
        "id": 1,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
        "phone": "+44 20 7946 0001",
        "updatedAt": "2024-01-01T10:00:00.000Z",
    }


@pytest.fixture
def multiple_users() -> list[dict[str, Any]]:
    """Users for list rendering, one of them using lowercase keys."""
    return [
        {
            "id": 2,
            "firstName": "Alan",
            "lastName": "Turing",
            "email": "alan@example.com",
            "phone": "+44 20 7946 0002",
            "updatedAt": "2024-01-02T10:00:00.000Z",
        },
        {
            "id": 3,
            "firstname": "Grace",
            "lastname": "Hopper",
            "email": "grace@example.com",
            "phone": "+1 202 555 0103",
            "updatedAt": "2024-01-03T10:00:00.000Z",
        },
        {
            "id": 4,
            "firstName": "Edsger",
            "lastName": "Dijkstra",
            "email": "edsger@example.com",
            "phone": "+31 20 555 0104",
            "updatedAt": "2024-01-04T10:00:00.000Z",
        },
    ]


@pytest.fixture
def users_page_payload(multiple_users) -> Callable[..., dict[str, Any]]:
    """
    Helper to build a ``/users/pages`` response body.

    Usage:
        body = users_page_payload(total_pages=5)
    """

    def _build(*, users: list[dict[str, Any]] | None = None, total_pages: int = 5) -> dict[str, Any]:
        return {
            "usersData": multiple_users if users is None else users,
            "totalPages": total_pages,
        }

    return _build
