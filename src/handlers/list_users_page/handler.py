"""
Lambda handler serving the server-rendered users page.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import METRICS_NAMESPACE, SERVICE_NAME
from core.utils.decorators import html_page_handler
from core.utils.response import ResponseBuilder
from core.views.page_view import UsersPageView

from .models import ListUsersPageRequest
from .service import UsersPageLoader

logger = Logger(utc=True)
tracer = Tracer()
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


@html_page_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Render one page of the users table.

    Reads ``page`` and ``limit`` from the query string, loads that page
    from the users API and renders either the table with its pagination
    control or the error alert.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTML response whose status matches the load outcome
    """
    logger.info(
        "Received users page request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    params = event.get("queryStringParameters") or {}
    request = ListUsersPageRequest.from_query(params)

    result = UsersPageLoader().load(page=request.page, limit=request.limit)

    if result.is_success:
        metrics.add_metric(name="UsersPageRendered", unit=MetricUnit.Count, value=1)
    else:
        metrics.add_metric(name="UsersPageUpstreamFailure", unit=MetricUnit.Count, value=1)

    body = UsersPageView(result, limit=request.limit, query=params).render()

    return ResponseBuilder.html(
        body,
        status=result.status_code,
        request_id=getattr(context, "aws_request_id", None),
    )
