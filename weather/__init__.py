# Weather forecast functions
from .service import WeatherForecastService, RandomSource
from .routes import register_weather_routes

__all__ = [
    "WeatherForecastService",
    "RandomSource",
    "register_weather_routes",
]
