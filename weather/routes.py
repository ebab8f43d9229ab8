"""
HTTP route handlers for weather forecast endpoints.
"""

import logging
from typing import Optional
import azure.functions as func
from shared.constants import ApiRoutes, CorsPolicy
from shared.responses import (
    cors_headers, json_response, preflight_response, internal_error_response
)
from .service import WeatherForecastService

logger = logging.getLogger(__name__)

WEATHER_ALLOWED_HEADERS = "Content-Type, Authorization"


def get_weather_forecast(
    req: func.HttpRequest,
    service: WeatherForecastService
) -> func.HttpResponse:
    """
    GET /api/v1/weatherforecast
    Return five days of forecasts starting tomorrow.
    """
    logger.info("Getting weather forecast data.")
    try:
        forecast = service.get_forecast()
        return json_response(
            forecast,
            headers=cors_headers(CorsPolicy.ALLOWED_METHODS, WEATHER_ALLOWED_HEADERS),
            compact=True
        )
    except Exception as e:
        logger.error(f"Error getting weather forecast: {str(e)}")
        return internal_error_response()


def options_weather_forecast(req: func.HttpRequest) -> func.HttpResponse:
    """
    OPTIONS /api/v1/weatherforecast
    Answer the CORS preflight.
    """
    return preflight_response(CorsPolicy.ALLOWED_METHODS, WEATHER_ALLOWED_HEADERS)


def register_weather_routes(
    app: func.FunctionApp,
    service: Optional[WeatherForecastService] = None
):
    """Register all weather-related routes with the function app."""
    service = service or WeatherForecastService()

    @app.function_name(name="GetWeatherForecast")
    @app.route(route=ApiRoutes.Weather.GET_FORECAST, methods=["GET"])
    def weather_forecast(req: func.HttpRequest) -> func.HttpResponse:
        return get_weather_forecast(req, service)

    @app.function_name(name="OptionsWeatherForecast")
    @app.route(route=ApiRoutes.Weather.GET_FORECAST, methods=["OPTIONS"])
    def weather_forecast_preflight(req: func.HttpRequest) -> func.HttpResponse:
        return options_weather_forecast(req)
