"""
Business logic for weather forecast generation.
"""

import logging
import random
from datetime import date, timedelta
from typing import Callable, List, Optional, Protocol, Sequence, TypeVar

from shared.constants import FORECAST_SUMMARIES
from shared.models import WeatherForecast

logger = logging.getLogger(__name__)

T = TypeVar("T")

FORECAST_DAYS = 5
MIN_GENERATED_TEMPERATURE_C = -20
# Exclusive upper bound
MAX_GENERATED_TEMPERATURE_C = 55


class RandomSource(Protocol):
    """Source of randomness; random.Random and random.SystemRandom satisfy it."""

    def randrange(self, start: int, stop: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class WeatherForecastService:
    """Service class for forecast generation."""

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        today: Callable[[], date] = date.today,
        summaries: Sequence[str] = FORECAST_SUMMARIES
    ):
        # SystemRandom keeps no shared state between concurrent requests
        self.rng = rng or random.SystemRandom()
        self.today = today
        self.summaries = summaries

    def get_forecast(self, days: int = FORECAST_DAYS) -> List[WeatherForecast]:
        """
        Generate forecasts for consecutive days starting tomorrow.

        Args:
            days: Number of days to forecast (default: 5)

        Returns:
            One WeatherForecast per day, ordered by date
        """
        start = self.today()
        forecasts = [
            WeatherForecast(
                date=start + timedelta(days=offset),
                temperature_c=self.rng.randrange(
                    MIN_GENERATED_TEMPERATURE_C, MAX_GENERATED_TEMPERATURE_C
                ),
                summary=self.rng.choice(self.summaries),
            )
            for offset in range(1, days + 1)
        ]
        logger.debug(f"Generated {len(forecasts)} forecasts from {start}")
        return forecasts
