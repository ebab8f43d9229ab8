"""
Response records returned by the HTTP functions.

All records are immutable pydantic models serialized with camelCase names.
"""

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from .validation import is_valid_temperature

# Divisor used by the published Fahrenheit formula. Deliberately not 5/9.
FAHRENHEIT_DIVISOR = 0.5556


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def celsius_to_fahrenheit(temperature_c: int) -> int:
    """
    Convert Celsius to Fahrenheit the way clients of this API expect.

    The quotient is truncated toward zero, not rounded:
    25 -> 76, 0 -> 32, 100 -> 211, -40 -> -39.
    """
    return 32 + int(temperature_c / FAHRENHEIT_DIVISOR)


class ApiModel(BaseModel):
    """Base record: camelCase aliases, snake_case accepted on input, frozen."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class HealthStatus(str, Enum):
    UNHEALTHY = "Unhealthy"
    DEGRADED = "Degraded"
    HEALTHY = "Healthy"


_STATUS_RANK = {
    HealthStatus.UNHEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.HEALTHY: 2,
}


def worst_status(statuses: Iterable[HealthStatus]) -> HealthStatus:
    """
    Return the least healthy status, or Healthy when there is nothing to check.
    """
    return min(statuses, key=_STATUS_RANK.__getitem__, default=HealthStatus.HEALTHY)


class WeatherForecast(ApiModel):
    """A forecast for one calendar day."""

    date: date
    temperature_c: int
    summary: Optional[str] = Field(default=None, min_length=3, max_length=50)

    @field_validator("temperature_c")
    @classmethod
    def check_temperature(cls, value: int) -> int:
        if not is_valid_temperature(value):
            raise ValueError("Temperature must be between -50°C and 60°C")
        return value

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)


class HealthCheckEntry(ApiModel):
    """Result of one registered health check."""

    name: str = Field(min_length=1, max_length=100)
    status: HealthStatus
    description: Optional[str] = Field(default=None, max_length=500)
    duration: timedelta = timedelta(0)
    data: Optional[Dict[str, Any]] = None


class HealthCheckResponse(ApiModel):
    """Aggregated health report."""

    status: HealthStatus
    duration: timedelta = timedelta(0)
    timestamp: datetime = Field(default_factory=utc_now)
    checks: List[HealthCheckEntry] = Field(default_factory=list)

    @classmethod
    def from_entries(
        cls,
        entries: List[HealthCheckEntry],
        duration: timedelta,
        timestamp: Optional[datetime] = None
    ) -> "HealthCheckResponse":
        """Build a report whose status is the worst status among the entries."""
        return cls(
            status=worst_status(entry.status for entry in entries),
            duration=duration,
            timestamp=timestamp or utc_now(),
            checks=entries,
        )

    @property
    def is_healthy(self) -> bool:
        return self.status is HealthStatus.HEALTHY


class KeepAliveResponse(ApiModel):
    status: Literal["alive"] = "alive"
    timestamp: datetime = Field(default_factory=utc_now)
    metadata: Optional[Dict[str, Any]] = None


class ApiErrorDetail(ApiModel):
    code: str = Field(min_length=1)
    message: str = Field(min_length=1)
    target: Optional[str] = None


class ApiInnerError(ApiModel):
    """Nested technical context for an error; may chain further inner errors."""

    code: Optional[str] = None
    message: Optional[str] = None
    inner_error: Optional["ApiInnerError"] = Field(default=None, alias="innererror")


class ApiError(ApiModel):
    code: str = Field(min_length=1, max_length=50)
    message: str = Field(min_length=1, max_length=1000)
    target: Optional[str] = Field(default=None, max_length=100)
    details: Optional[List[ApiErrorDetail]] = None
    inner_error: Optional[ApiInnerError] = Field(default=None, alias="innererror")


class ApiErrorResponse(ApiModel):
    """Error envelope: {"error": {...}}."""

    error: ApiError
