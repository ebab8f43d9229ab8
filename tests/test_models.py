from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from shared.models import (
    ApiError,
    ApiInnerError,
    HealthCheckEntry,
    HealthCheckResponse,
    HealthStatus,
    KeepAliveResponse,
    WeatherForecast,
    celsius_to_fahrenheit,
    worst_status,
)


@pytest.mark.parametrize(
    ("celsius", "fahrenheit"),
    [(25, 76), (0, 32), (100, 211), (-40, -39), (20, 67)],
)
def test_celsius_to_fahrenheit_truncates_toward_zero(celsius: int, fahrenheit: int) -> None:
    assert celsius_to_fahrenheit(celsius) == fahrenheit


def test_celsius_to_fahrenheit_does_not_round() -> None:
    # -1 / 0.5556 = -1.8; rounding would give 30, truncation gives 31
    assert celsius_to_fahrenheit(-1) == 31
    # 1 / 0.5556 = 1.8; rounding would give 34
    assert celsius_to_fahrenheit(1) == 33


def test_weather_forecast_derives_fahrenheit() -> None:
    forecast = WeatherForecast(date=date(2025, 6, 15), temperature_c=25, summary="Warm")

    assert forecast.date == date(2025, 6, 15)
    assert forecast.temperature_c == 25
    assert forecast.summary == "Warm"
    assert forecast.temperature_f == 76


def test_weather_forecast_accepts_camel_case_names() -> None:
    forecast = WeatherForecast.model_validate(
        {"date": "2025-06-15", "temperatureC": -40, "summary": "Freezing"}
    )
    assert forecast.temperature_f == -39


@pytest.mark.parametrize("temperature", [-51, 61])
def test_weather_forecast_rejects_out_of_range_temperature(temperature: int) -> None:
    with pytest.raises(ValidationError):
        WeatherForecast(date=date(2025, 6, 15), temperature_c=temperature)


@pytest.mark.parametrize("summary", ["Hi", "x" * 51])
def test_weather_forecast_rejects_bad_summary_length(summary: str) -> None:
    with pytest.raises(ValidationError):
        WeatherForecast(date=date(2025, 6, 15), temperature_c=10, summary=summary)


def test_weather_forecast_summary_is_optional() -> None:
    assert WeatherForecast(date=date(2025, 6, 15), temperature_c=10).summary is None


def test_records_are_immutable() -> None:
    forecast = WeatherForecast(date=date(2025, 6, 15), temperature_c=10)
    with pytest.raises(ValidationError):
        forecast.temperature_c = 20


def test_worst_status() -> None:
    assert worst_status([]) is HealthStatus.HEALTHY
    assert worst_status([HealthStatus.HEALTHY, HealthStatus.HEALTHY]) is HealthStatus.HEALTHY
    assert worst_status([HealthStatus.HEALTHY, HealthStatus.DEGRADED]) is HealthStatus.DEGRADED
    assert worst_status(
        [HealthStatus.DEGRADED, HealthStatus.UNHEALTHY, HealthStatus.HEALTHY]
    ) is HealthStatus.UNHEALTHY


def test_health_response_from_entries_downgrades_on_any_unhealthy_entry() -> None:
    entries = [
        HealthCheckEntry(name="FunctionHealth", status=HealthStatus.HEALTHY),
        HealthCheckEntry(name="Storage", status=HealthStatus.DEGRADED),
    ]

    report = HealthCheckResponse.from_entries(entries, timedelta(milliseconds=3))

    assert report.status is HealthStatus.DEGRADED
    assert not report.is_healthy
    assert [entry.name for entry in report.checks] == ["FunctionHealth", "Storage"]
    assert report.timestamp.tzinfo is not None


def test_health_entry_validates_name_and_description() -> None:
    with pytest.raises(ValidationError):
        HealthCheckEntry(name="", status=HealthStatus.HEALTHY)
    with pytest.raises(ValidationError):
        HealthCheckEntry(name="x" * 101, status=HealthStatus.HEALTHY)
    with pytest.raises(ValidationError):
        HealthCheckEntry(name="db", status=HealthStatus.HEALTHY, description="x" * 501)
    with pytest.raises(ValidationError):
        HealthCheckEntry(name="db", status="Sleeping")


def test_keep_alive_status_is_always_alive() -> None:
    assert KeepAliveResponse().status == "alive"
    with pytest.raises(ValidationError):
        KeepAliveResponse(status="dead")


def test_api_error_constraints() -> None:
    with pytest.raises(ValidationError):
        ApiError(code="", message="boom")
    with pytest.raises(ValidationError):
        ApiError(code="Oops", message="x" * 1001)


def test_inner_errors_nest() -> None:
    inner = ApiInnerError(
        code="Timeout",
        inner_error=ApiInnerError(code="SocketTimeout", message="read timed out"),
    )
    assert inner.inner_error.inner_error is None
    assert inner.inner_error.code == "SocketTimeout"


def test_temperature_error_message() -> None:
    with pytest.raises(ValidationError) as exc_info:
        WeatherForecast(date=date(2025, 6, 15), temperature_c=75)

    [error] = exc_info.value.errors()
    assert "Temperature must be between -50°C and 60°C" in error["msg"]


@pytest.mark.parametrize("temperature", [-50, 60])
def test_weather_forecast_accepts_range_bounds(temperature: int) -> None:
    assert WeatherForecast(date=date(2025, 6, 15), temperature_c=temperature).temperature_c == temperature
