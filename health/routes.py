"""
HTTP route handlers for the health endpoint.
"""

import logging
import azure.functions as func
from shared.constants import ApiRoutes, ApiStatusCodes
from shared.models import HealthCheckResponse
from shared.responses import json_response, error_response
from .service import HealthEvaluator

logger = logging.getLogger(__name__)

HEALTH_CHECK_FAILED = "HealthCheckFailed"


def status_code_for(report: HealthCheckResponse) -> int:
    """Healthy maps to 200, anything else to 503."""
    if report.is_healthy:
        return ApiStatusCodes.Success.OK
    return ApiStatusCodes.ServerError.SERVICE_UNAVAILABLE


async def http_health_check(
    req: func.HttpRequest,
    health_service: HealthEvaluator
) -> func.HttpResponse:
    """
    GET /api/v1/health
    Evaluate every registered check and report the aggregate.
    """
    logger.info("Health check request received")
    try:
        report = await health_service.check_health()
    except Exception as e:
        logger.error(f"Error evaluating health checks: {str(e)}")
        return error_response(
            HEALTH_CHECK_FAILED,
            "Health checks could not be evaluated.",
            status_code=ApiStatusCodes.ServerError.SERVICE_UNAVAILABLE
        )

    if not report.is_healthy:
        logger.warning(f"Health check reported {report.status.value}")

    return json_response(report, status_code=status_code_for(report))


def register_health_routes(app: func.FunctionApp, health_service: HealthEvaluator):
    """Register the health route with the function app."""

    @app.function_name(name="HealthCheck")
    @app.route(route=ApiRoutes.Health.CHECK, methods=["GET"])
    async def health_check(req: func.HttpRequest) -> func.HttpResponse:
        return await http_health_check(req, health_service)
