"""
Health check registry and aggregation.

Checks are registered by name with the status to report when they raise.
HealthCheckService runs every registered check concurrently and folds the
results into a HealthCheckResponse whose status is the worst entry status.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError

from shared.config import get_app_version, get_environment
from shared.models import HealthCheckEntry, HealthCheckResponse, HealthStatus

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


@dataclass(frozen=True)
class HealthCheckResult:
    """Outcome of a single check."""

    status: HealthStatus
    description: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def healthy(cls, description: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        return cls(HealthStatus.HEALTHY, description, data)

    @classmethod
    def degraded(cls, description: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        return cls(HealthStatus.DEGRADED, description, data)

    @classmethod
    def unhealthy(cls, description: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        return cls(HealthStatus.UNHEALTHY, description, data)


class HealthCheck(Protocol):
    """A single dependency check."""

    async def check_health(self) -> HealthCheckResult: ...


class HealthEvaluator(Protocol):
    """Anything that can produce an aggregated health report."""

    async def check_health(self) -> HealthCheckResponse: ...


@dataclass(frozen=True)
class HealthCheckRegistration:
    name: str
    check: HealthCheck
    failure_status: HealthStatus = HealthStatus.UNHEALTHY


class FunctionHealthCheck:
    """
    Placeholder check for the function app itself.

    Always reports Healthy. Dependency checks (storage, downstream APIs)
    should be registered alongside it rather than folded in here.
    """

    async def check_health(self) -> HealthCheckResult:
        logger.info("Performing health check")
        return HealthCheckResult.healthy(
            "All systems operational",
            data={
                "version": get_app_version(),
                "environment": get_environment(),
            }
        )


class HealthCheckService:
    """Service class for registering and evaluating health checks."""

    def __init__(self, registrations: Optional[List[HealthCheckRegistration]] = None):
        self._registrations: List[HealthCheckRegistration] = []
        for registration in registrations or []:
            self._register(registration)

    @property
    def registrations(self) -> List[HealthCheckRegistration]:
        return list(self._registrations)

    def add_check(
        self,
        name: str,
        check: HealthCheck,
        failure_status: HealthStatus = HealthStatus.UNHEALTHY
    ) -> "HealthCheckService":
        """
        Register a check.

        Args:
            name: Unique name reported in the health response
            check: The check to run
            failure_status: Status reported when the check raises

        Returns:
            self, so registrations can be chained

        Raises:
            ValueError: If the name is empty, longer than 100 characters
                or already registered
        """
        self._register(HealthCheckRegistration(name, check, failure_status))
        return self

    def _register(self, registration: HealthCheckRegistration) -> None:
        if not 1 <= len(registration.name) <= MAX_NAME_LENGTH:
            raise ValueError(
                f"Health check name must be 1-{MAX_NAME_LENGTH} characters, got {len(registration.name)}"
            )
        if any(r.name == registration.name for r in self._registrations):
            raise ValueError(f"Health check '{registration.name}' is already registered")
        self._registrations.append(registration)

    async def check_health(self) -> HealthCheckResponse:
        """
        Run every registered check concurrently.

        Returns:
            Aggregated report, entries in registration order
        """
        started = time.perf_counter()
        entries = await asyncio.gather(
            *(self._run_check(registration) for registration in self._registrations)
        )
        duration = timedelta(seconds=time.perf_counter() - started)
        return HealthCheckResponse.from_entries(list(entries), duration)

    async def _run_check(self, registration: HealthCheckRegistration) -> HealthCheckEntry:
        started = time.perf_counter()
        try:
            result = await registration.check.check_health()
        except Exception as e:
            logger.error(f"Health check '{registration.name}' failed: {str(e)}")
            result = HealthCheckResult(
                registration.failure_status,
                description=str(e) or type(e).__name__
            )
        duration = timedelta(seconds=time.perf_counter() - started)

        try:
            return HealthCheckEntry(
                name=registration.name,
                status=result.status,
                description=_truncate(result.description),
                duration=duration,
                data=result.data,
            )
        except ValidationError as e:
            logger.error(f"Health check '{registration.name}' returned an invalid result: {str(e)}")
            return HealthCheckEntry(
                name=registration.name,
                status=registration.failure_status,
                description="Health check returned an invalid result",
                duration=duration,
            )


def _truncate(description: Optional[str]) -> Optional[str]:
    if description is None:
        return None
    return description[:MAX_DESCRIPTION_LENGTH]
