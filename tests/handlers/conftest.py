from types import SimpleNamespace
from typing import Any

import pytest


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def users_page_event() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/",
        "queryStringParameters": {
            "page": "3",
            "limit": "20",
        },
        "headers": {"Accept": "text/html"},
    }


@pytest.fixture
def users_page_event_without_query() -> dict[str, Any]:
    return {
        "httpMethod": "GET",
        "path": "/",
        "queryStringParameters": None,
        "headers": {"Accept": "text/html"},
    }
