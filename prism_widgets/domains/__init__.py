"""Domain-specific data structures and helpers.

This package contains the cached weather state the widgets render from.
"""

from .weather import (
    ForecastDay,
    HourlyEntry,
    WeatherSnapshot,
)

__all__ = [
    "ForecastDay",
    "HourlyEntry",
    "WeatherSnapshot",
]
