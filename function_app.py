"""
Forecast Functions - Azure Functions Application

A Python-based Azure Functions backend exposing a sample weather forecast,
an aggregated health check and a keep-alive ping (HTTP and timer) that keeps
the app warm between requests.
"""

import azure.functions as func
import logging

from shared.config import get_log_level

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

# Create the main Function App instance
app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

# Import routes
from shared.models import HealthStatus
from health.service import FunctionHealthCheck, HealthCheckService
from health.routes import register_health_routes
from weather.routes import register_weather_routes
from keepalive.routes import register_keepalive_routes

# =============================================================================
# Health Checks
# =============================================================================

health_service = HealthCheckService().add_check(
    "FunctionHealth",
    FunctionHealthCheck(),
    failure_status=HealthStatus.DEGRADED
)

# =============================================================================
# Routes
# =============================================================================

register_weather_routes(app)
register_health_routes(app, health_service)
register_keepalive_routes(app)

logger.info("Function app routes registered")
