from http import HTTPStatus
from types import SimpleNamespace
from typing import Any

import pytest

from core.models.errors import ConfigurationError
from core.utils.decorators import html_page_handler
from core.utils.response import JsonDict, ResponseBuilder


def make_handler(exc: Exception | None = None):
    @html_page_handler
    def handler(event: Any, context: Any) -> JsonDict:
        if exc is not None:
            raise exc
        return ResponseBuilder.html("<p>ok</p>", request_id=context.aws_request_id)

    return handler


CONTEXT = SimpleNamespace(aws_request_id="req-ok")


def test_handler_success() -> None:
    """Successful handler execution returns response unchanged."""
    resp = make_handler()({"httpMethod": "GET"}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.OK
    assert resp["body"] == "<p>ok</p>"


def test_missing_method_treated_as_get() -> None:
    resp = make_handler()({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.OK


@pytest.mark.parametrize("method", ["POST", "PUT", "DELETE", "OPTIONS"])
def test_other_methods_rejected(method: str) -> None:
    resp = make_handler()({"httpMethod": method}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.METHOD_NOT_ALLOWED
    assert resp["headers"]["Allow"] == "GET, HEAD"


def test_head_has_empty_body() -> None:
    resp = make_handler()({"httpMethod": "HEAD"}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.OK
    assert resp["body"] == ""


@pytest.mark.parametrize(
    "exc,status",
    [
        (ValueError("bad"), HTTPStatus.BAD_REQUEST),
        (KeyError("missing"), HTTPStatus.BAD_REQUEST),
        (LookupError("gone"), HTTPStatus.NOT_FOUND),
        (TimeoutError("slow"), HTTPStatus.GATEWAY_TIMEOUT),
        (ConnectionError("down"), HTTPStatus.SERVICE_UNAVAILABLE),
        (ConfigurationError(message="bad url"), HTTPStatus.INTERNAL_SERVER_ERROR),
        (RuntimeError("boom"), HTTPStatus.INTERNAL_SERVER_ERROR),
    ],
)
def test_exceptions_render_error_page(exc: Exception, status: HTTPStatus) -> None:
    resp = make_handler(exc)({"httpMethod": "GET"}, CONTEXT)

    assert resp["statusCode"] == status
    assert resp["body"].count('role="alert"') == 1
    assert str(status.value) in resp["body"]
    assert resp["headers"]["X-Request-Id"] == "req-ok"
