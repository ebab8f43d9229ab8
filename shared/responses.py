"""
Standard HTTP response helpers for consistent API responses.
"""

from typing import Any, Dict, Iterable, List, Optional

import azure.functions as func
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from .constants import (
    ALLOW_HEADERS, ALLOW_METHODS, ALLOW_ORIGIN, CONTENT_TYPE, MAX_AGE,
    ApiStatusCodes, ContentTypes, CorsPolicy,
)
from .models import (
    ApiError, ApiErrorDetail, ApiErrorResponse, KeepAliveResponse, utc_now,
)
from .serialization import to_json

VALIDATION_FAILED = "ValidationFailed"
INTERNAL_SERVER_ERROR = "InternalServerError"


def cors_headers(
    methods: str = CorsPolicy.ALLOWED_METHODS,
    allowed_headers: str = CorsPolicy.ALLOWED_HEADERS,
    origin: str = CorsPolicy.ALLOW_ALL_ORIGINS
) -> Dict[str, str]:
    """Build the Access-Control-* response headers."""
    return {
        ALLOW_ORIGIN: origin,
        ALLOW_METHODS: methods,
        ALLOW_HEADERS: allowed_headers,
    }


def json_response(
    data: Any,
    status_code: int = ApiStatusCodes.Success.OK,
    headers: Optional[Dict[str, str]] = None,
    compact: bool = False
) -> func.HttpResponse:
    """
    Create a JSON response.

    Args:
        data: Record, list of records or plain data to serialize
        status_code: HTTP status code (default: 200)
        headers: Optional additional headers
        compact: Serialize without indentation

    Returns:
        Azure Functions HttpResponse
    """
    response_headers = {
        CONTENT_TYPE: ContentTypes.JSON,
        **(headers or {})
    }

    return func.HttpResponse(
        to_json(data, compact=compact),
        status_code=status_code,
        mimetype="application/json",
        charset="utf-8",
        headers=response_headers
    )


def preflight_response(
    methods: str = CorsPolicy.ALLOWED_METHODS,
    allowed_headers: str = CorsPolicy.ALLOWED_HEADERS,
    max_age: str = CorsPolicy.MAX_AGE
) -> func.HttpResponse:
    """Create an empty 200 response answering a CORS preflight request."""
    headers = cors_headers(methods, allowed_headers)
    headers[MAX_AGE] = max_age
    return func.HttpResponse(
        status_code=ApiStatusCodes.Success.OK,
        headers=headers
    )


def create_error_response(
    code: str,
    message: str,
    target: Optional[str] = None,
    details: Optional[Iterable[ApiErrorDetail]] = None
) -> ApiErrorResponse:
    """
    Create an error envelope.

    Args:
        code: Service-specific error code
        message: Human-readable error description
        target: Optional target of the error
        details: Optional additional error details
    """
    return ApiErrorResponse(
        error=ApiError(
            code=code,
            message=message,
            target=target,
            details=list(details) if details is not None else None,
        )
    )


def create_validation_error_response(
    validation_errors: Dict[str, List[str]]
) -> ApiErrorResponse:
    """
    Create an error envelope with one detail per field message.

    Args:
        validation_errors: Field names mapped to their error messages
    """
    details = [
        ApiErrorDetail(code=VALIDATION_FAILED, message=error, target=field)
        for field, errors in validation_errors.items()
        for error in errors
    ]
    return create_error_response(
        VALIDATION_FAILED,
        "One or more validation errors occurred.",
        details=details
    )


def validation_errors_from_exception(exc: ValidationError) -> Dict[str, List[str]]:
    """
    Group pydantic validation errors by camelCase field path.
    """
    grouped: Dict[str, List[str]] = {}
    for error in exc.errors():
        parts = [
            to_camel(part) if isinstance(part, str) and "_" in part else str(part)
            for part in error.get("loc", ())
        ]
        field = ".".join(parts) or "body"
        grouped.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return grouped


def create_keep_alive_response(
    metadata: Optional[Dict[str, Any]] = None
) -> KeepAliveResponse:
    """Create a keep-alive record stamped with the current UTC time."""
    return KeepAliveResponse(status="alive", timestamp=utc_now(), metadata=metadata)


def error_response(
    code: str,
    message: str,
    status_code: int = ApiStatusCodes.ClientError.BAD_REQUEST,
    target: Optional[str] = None,
    details: Optional[Iterable[ApiErrorDetail]] = None,
    headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:
    """
    Create an error JSON response.

    Args:
        code: Service-specific error code
        message: Error message
        status_code: HTTP status code (default: 400)
        target: Optional target of the error
        details: Optional list of detailed errors
        headers: Optional additional headers

    Returns:
        Azure Functions HttpResponse with an ApiErrorResponse body
    """
    body = create_error_response(code, message, target=target, details=details)
    return json_response(body, status_code=status_code, headers=headers, compact=True)


def validation_error_response(
    validation_errors: Dict[str, List[str]],
    headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:
    """
    Create a 400 response listing every invalid field.

    Args:
        validation_errors: Field names mapped to their error messages
        headers: Optional additional headers
    """
    body = create_validation_error_response(validation_errors)
    return json_response(
        body,
        status_code=ApiStatusCodes.ClientError.BAD_REQUEST,
        headers=headers,
        compact=True
    )


def internal_error_response(
    message: str = "An unexpected error occurred.",
    headers: Optional[Dict[str, str]] = None
) -> func.HttpResponse:
    """
    Create a 500 response that carries no internal detail.
    """
    return error_response(
        INTERNAL_SERVER_ERROR,
        message,
        status_code=ApiStatusCodes.ServerError.INTERNAL_SERVER_ERROR,
        headers=headers
    )
