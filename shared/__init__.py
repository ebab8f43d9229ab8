# Shared utilities for Forecast Functions
from .models import (
    WeatherForecast, HealthStatus, HealthCheckEntry, HealthCheckResponse,
    KeepAliveResponse, ApiErrorResponse, ApiError, ApiErrorDetail, ApiInnerError,
    celsius_to_fahrenheit,
)
from .serialization import to_json, from_json, try_from_json
from .validation import is_valid_temperature, has_value, has_items
from .dates import to_iso8601_string, to_iso8601_date, to_time_zone
from .responses import (
    json_response, preflight_response, cors_headers, error_response,
    validation_error_response, internal_error_response, create_error_response,
    create_validation_error_response, create_keep_alive_response,
)

__all__ = [
    "WeatherForecast",
    "HealthStatus",
    "HealthCheckEntry",
    "HealthCheckResponse",
    "KeepAliveResponse",
    "ApiErrorResponse",
    "ApiError",
    "ApiErrorDetail",
    "ApiInnerError",
    "celsius_to_fahrenheit",
    "to_json",
    "from_json",
    "try_from_json",
    "is_valid_temperature",
    "has_value",
    "has_items",
    "to_iso8601_string",
    "to_iso8601_date",
    "to_time_zone",
    "json_response",
    "preflight_response",
    "cors_headers",
    "error_response",
    "validation_error_response",
    "internal_error_response",
    "create_error_response",
    "create_validation_error_response",
    "create_keep_alive_response",
]
