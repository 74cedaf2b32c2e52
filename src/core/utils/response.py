"""
Centralized HTML response builder for AWS Lambda / API Gateway.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from core.utils.constants import ALLOWED_METHODS, CACHE_CONTROL, HTML_CONTENT_TYPE
from core.views.page_view import render_error_page

JsonDict = dict[str, Any]


class ResponseBuilder:
    """Factory for API Gateway-compatible HTML responses."""

    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": HTML_CONTENT_TYPE,
        "Cache-Control": CACHE_CONTROL,
    }

    @staticmethod
    def _build_headers(
        request_id: str | None = None,
        extra: dict[str, str] | None = None,
    ) -> dict[str, str]:
        headers: dict[str, str] = dict(ResponseBuilder.DEFAULT_HEADERS)

        if request_id:
            headers["X-Request-Id"] = request_id

        if extra:
            headers.update(extra)

        return headers

    @staticmethod
    def html(
        body: str,
        *,
        status: int = HTTPStatus.OK,
        request_id: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JsonDict:
        return {
            "statusCode": int(status),
            "headers": ResponseBuilder._build_headers(request_id, headers),
            "body": body,
        }

    @staticmethod
    def error_page(
        status: int,
        *,
        request_id: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> JsonDict:
        """Alert page naming the status code, served with that status."""
        return ResponseBuilder.html(
            render_error_page(int(status)),
            status=status,
            request_id=request_id,
            headers=headers,
        )

    @staticmethod
    def method_not_allowed(*, request_id: str | None = None) -> JsonDict:
        return ResponseBuilder.error_page(
            HTTPStatus.METHOD_NOT_ALLOWED,
            request_id=request_id,
            headers={"Allow": ", ".join(ALLOWED_METHODS)},
        )

    @staticmethod
    def head(response: JsonDict) -> JsonDict:
        """Strip the body for HEAD requests, keeping status and headers."""
        return {**response, "body": ""}
