from typing import Optional

import azure.functions as func

from health.service import HealthCheckResult
from shared.models import HealthStatus


class FixedRandom:
    """Deterministic random source: fixed temperature, summaries picked in turn."""

    def __init__(self, temperature: int = 22, summary_index: int = 4):
        self.temperature = temperature
        self.summary_index = summary_index
        self.ranges = []

    def randrange(self, start: int, stop: int) -> int:
        self.ranges.append((start, stop))
        return self.temperature

    def choice(self, seq):
        return seq[self.summary_index % len(seq)]


class StaticCheck:
    def __init__(self, status: HealthStatus, description: Optional[str] = None, data=None):
        self.result = HealthCheckResult(status, description, data)
        self.calls = 0

    async def check_health(self) -> HealthCheckResult:
        self.calls += 1
        return self.result


class FailingCheck:
    def __init__(self, message: str = "database unreachable"):
        self.message = message

    async def check_health(self) -> HealthCheckResult:
        raise RuntimeError(self.message)


def make_request(method: str = "GET", url: str = "/api/v1/weatherforecast") -> func.HttpRequest:
    return func.HttpRequest(method=method, url=url, headers={}, params={}, body=b"")
