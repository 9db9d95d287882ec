# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Weather forecast sample model."""

import datetime as dt
from typing import Optional
from pydantic import computed_field
from src.core.models.events import CamelModel

SUMMARIES = (
    "Freezing",
    "Bracing",
    "Chilly",
    "Cool",
    "Mild",
    "Warm",
    "Balmy",
    "Hot",
    "Sweltering",
    "Scorching",
)


class WeatherForecast(CamelModel):
    """A single day's forecast."""

    date: dt.date
    temperature_c: int
    summary: Optional[str] = None

    @computed_field(alias="temperatureF")
    @property
    def temperature_f(self) -> int:
        return 32 + int(self.temperature_c / 0.5556)
