# Health check functions
from .service import (
    FunctionHealthCheck,
    HealthCheck,
    HealthCheckRegistration,
    HealthCheckResult,
    HealthCheckService,
    HealthEvaluator,
)
from .routes import register_health_routes

__all__ = [
    "FunctionHealthCheck",
    "HealthCheck",
    "HealthCheckRegistration",
    "HealthCheckResult",
    "HealthCheckService",
    "HealthEvaluator",
    "register_health_routes",
]
