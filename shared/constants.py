"""
Static tables shared across the function app: routes, content types,
CORS policy values and HTTP status code groupings.
"""

from typing import Tuple


class ApiRoutes:
    """
    API route constants.

    Routes are registered relative to the host route prefix configured in
    host.json, so handlers use the short form (e.g. "weatherforecast") and
    clients call the full form (e.g. "api/v1/weatherforecast").
    """

    API_PREFIX = "api"
    API_VERSION = "v1"
    API_BASE = f"{API_PREFIX}/{API_VERSION}"

    class Weather:
        BASE = "weatherforecast"
        GET_FORECAST = BASE

    class Health:
        CHECK = "health"
        KEEP_ALIVE = "keepalive"

    @classmethod
    def full_path(cls, route: str) -> str:
        """Return the client-facing path for a registered route."""
        return f"{cls.API_BASE}/{route}"


class ApiStatusCodes:
    """HTTP status codes used by the API, grouped by class."""

    class Success:
        OK = 200
        CREATED = 201
        ACCEPTED = 202
        NO_CONTENT = 204

    class ClientError:
        BAD_REQUEST = 400
        UNAUTHORIZED = 401
        FORBIDDEN = 403
        NOT_FOUND = 404
        CONFLICT = 409
        UNPROCESSABLE_ENTITY = 422
        TOO_MANY_REQUESTS = 429

    class ServerError:
        INTERNAL_SERVER_ERROR = 500
        BAD_GATEWAY = 502
        SERVICE_UNAVAILABLE = 503
        GATEWAY_TIMEOUT = 504


class ContentTypes:
    JSON = "application/json; charset=utf-8"
    TEXT = "text/plain; charset=utf-8"
    XML = "application/xml; charset=utf-8"
    HTML = "text/html; charset=utf-8"


class CorsPolicy:
    """CORS header values."""

    # Development only
    ALLOW_ALL_ORIGINS = "*"
    ALLOWED_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
    ALLOWED_HEADERS = "Content-Type, Authorization, X-Requested-With"
    MAX_AGE = "86400"


# Header names
CONTENT_TYPE = "Content-Type"
ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
MAX_AGE = "Access-Control-Max-Age"

FORECAST_SUMMARIES: Tuple[str, ...] = (
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
)

# NCRONTAB with seconds: second 0 of every 4th minute
KEEP_ALIVE_SCHEDULE = "0 */4 * * * *"
