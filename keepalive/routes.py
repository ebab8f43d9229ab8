"""
Keep-alive endpoints that stop the function app from going cold.

The HTTP ping can be called by external monitors; the timer fires every
four minutes on its own. Both only confirm the app is alive.
"""

import logging
from typing import Any, Optional
import azure.functions as func
from shared.config import get_app_version
from shared.constants import ApiRoutes, KEEP_ALIVE_SCHEDULE
from shared.dates import to_iso8601_string
from shared.models import utc_now
from shared.responses import (
    cors_headers, create_keep_alive_response, json_response, internal_error_response
)

logger = logging.getLogger(__name__)

KEEP_ALIVE_FUNCTION_NAME = "KeepAlive"
KEEP_ALIVE_METHODS = "GET, OPTIONS"
KEEP_ALIVE_HEADERS = "Content-Type"


def keep_alive(req: func.HttpRequest) -> func.HttpResponse:
    """
    GET /api/v1/keepalive
    Report that the app is alive.
    """
    logger.info(f"Keep-alive ping received at {to_iso8601_string(utc_now())}")
    try:
        body = create_keep_alive_response({
            "functionName": KEEP_ALIVE_FUNCTION_NAME,
            "version": get_app_version(),
        })
        return json_response(
            body,
            headers=cors_headers(KEEP_ALIVE_METHODS, KEEP_ALIVE_HEADERS),
            compact=True
        )
    except Exception as e:
        logger.error(f"Error building keep-alive response: {str(e)}")
        return internal_error_response()


def next_scheduled_run(timer: Optional[Any]) -> Optional[Any]:
    """
    Read the next fire time from the timer's schedule status.

    Returns None when the host supplied no schedule status.
    """
    if timer is None:
        return None
    schedule_status = getattr(timer, "schedule_status", None)
    if not schedule_status:
        return None
    return schedule_status.get("Next")


def timer_keep_alive(timer: Optional[func.TimerRequest]) -> None:
    """Log that the scheduled keep-alive ran and, when known, when it runs next."""
    logger.info(f"Timer keep-alive executed at {to_iso8601_string(utc_now())}")

    if timer is not None and getattr(timer, "past_due", False):
        logger.warning("Timer keep-alive is past due")

    next_run = next_scheduled_run(timer)
    if next_run is not None:
        logger.info(f"Next timer schedule at: {next_run}")


def register_keepalive_routes(app: func.FunctionApp):
    """Register the keep-alive route and timer with the function app."""

    @app.function_name(name=KEEP_ALIVE_FUNCTION_NAME)
    @app.route(route=ApiRoutes.Health.KEEP_ALIVE, methods=["GET"])
    def keep_alive_ping(req: func.HttpRequest) -> func.HttpResponse:
        return keep_alive(req)

    @app.function_name(name="TimerKeepAlive")
    @app.timer_trigger(
        schedule=KEEP_ALIVE_SCHEDULE,
        arg_name="timer",
        run_on_startup=False,
        use_monitor=False
    )
    def keep_alive_timer(timer: func.TimerRequest) -> None:
        timer_keep_alive(timer)
