# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Weather forecast sample routes instrumented with the Application Insights sink.
"""

import random
from datetime import date, datetime, timedelta, timezone
from fastapi import APIRouter, HTTPException
from src.api.routes.sinks import get_app_insights_logger
from src.core.models.weather import SUMMARIES, WeatherForecast

router = APIRouter(prefix="/weatherforecast", tags=["weatherforecast"])

FORECAST_DAYS = 5


def _forecast_for(days_ahead: int) -> WeatherForecast:
    return WeatherForecast(
        date=date.today() + timedelta(days=days_ahead),
        temperature_c=random.randint(-20, 54),
        summary=random.choice(SUMMARIES),
    )


@router.get("", response_model=list[WeatherForecast])
async def get_forecast() -> list[WeatherForecast]:
    """Generate a five day forecast, tracked as an in-memory dependency.

    :returns: Forecasts for the next five days.
    :rtype: list[WeatherForecast]
    """
    sink = get_app_insights_logger()
    sink.log_information("WeatherForecast endpoint called at %s", datetime.now(timezone.utc))
    sink.track_event(
        "WeatherForecastRequested",
        {
            "Endpoint": "GetWeatherForecast",
            "RequestTime": datetime.now(timezone.utc).isoformat(),
        },
    )

    start_time = datetime.now(timezone.utc)
    try:
        forecast = [_forecast_for(index) for index in range(1, FORECAST_DAYS + 1)]
    except Exception as e:
        sink.track_dependency(
            "InMemory",
            "GenerateWeatherData",
            "Generate forecast data",
            start_time,
            datetime.now(timezone.utc) - start_time,
            False,
        )
        sink.log_error("Error generating weather forecast", e)
        raise

    sink.track_dependency(
        "InMemory",
        "GenerateWeatherData",
        "Generate forecast data",
        start_time,
        datetime.now(timezone.utc) - start_time,
        True,
    )
    sink.track_metric("WeatherForecastGenerated", len(forecast))
    sink.log_information("Successfully generated %d weather forecasts", len(forecast))
    return forecast


@router.get("/{forecast_id}", response_model=WeatherForecast)
async def get_forecast_by_id(forecast_id: int) -> WeatherForecast:
    """Get the forecast forecast_id days ahead.

    :raises HTTPException: If forecast_id is outside 1..5 (404 error).
    """
    sink = get_app_insights_logger()
    sink.log_debug("Getting weather forecast by id: %s", forecast_id)
    if forecast_id < 1 or forecast_id > FORECAST_DAYS:
        sink.log_warning("Invalid weather forecast id requested: %s", forecast_id)
        raise HTTPException(status_code=404, detail=f"Forecast {forecast_id} not found")
    return _forecast_for(forecast_id)


@router.post("/simulate-error")
async def simulate_error() -> dict:
    """Raise, log and report a simulated failure.

    :raises HTTPException: Always (500 error).
    """
    sink = get_app_insights_logger()
    try:
        sink.log_information("Simulating an error condition")
        raise RuntimeError("This is a simulated error for testing Application Insights")
    except RuntimeError as e:
        sink.log_error("Simulated error occurred", e)
        raise HTTPException(status_code=500, detail=str(e))
