"""Weather domain data structures.

This module defines the point-in-time weather/AQI snapshot the widgets
render from, and its translation from the shared key-value store the app
writes into (``HomeWidgetPreferences``).

Every field is optional. Translation never raises: a value of the wrong
type is treated as absent and the resolver substitutes its documented
default later on.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

# Store positions: forecast days are keyed 1..5, hourly entries 0..4.
FORECAST_DAY_KEYS = range(1, 6)
HOURLY_KEYS = range(0, 5)

MAX_FORECAST_DAYS = 5
MAX_HOURLY_ENTRIES = 5


@dataclass(frozen=True)
class ForecastDay:
    """A single day of the 5-day forecast.

    Attributes:
        name: Day label (e.g., "Tue"). Identifies the entry.
        temp: Pre-formatted high/low string (e.g., "21°/12°").
        condition: Free-text condition summary.
    """

    name: str | None = None
    temp: str | None = None
    condition: str | None = None


@dataclass(frozen=True)
class HourlyEntry:
    """A single hourly forecast entry shown in the notification.

    Attributes:
        time: Hour label (e.g., "14:00"). Identifies the entry.
        temp: Pre-formatted temperature.
        condition: Free-text condition summary.
    """

    time: str | None = None
    temp: str | None = None
    condition: str | None = None


@dataclass(frozen=True)
class WeatherSnapshot:
    """Read-only copy of the cached weather and AQI state.

    String fields are stored exactly as the app wrote them (already
    formatted); ``None`` means the key was absent or unusable.

    Attributes:
        temperature: Current temperature, numeric or placeholder text.
        condition: Current condition text (e.g., "Light rain").
        location: Location display name.
        feels_like: Apparent temperature.
        humidity: Relative humidity.
        wind_speed: Wind speed with unit.
        is_night: Whether it is currently night at the location.
        sunrise: Sunrise time, "HH:MM".
        sunset: Sunset time, "HH:MM".
        aqi_value: Air Quality Index (0-500+).
        aqi_description: AQI category text (e.g., "Moderate").
        aqi_pm25: PM2.5 concentration.
        forecast_days: Forecast days in store order (positions 1..5).
        hourly: Hourly entries in store order (positions 0..4).
    """

    temperature: str | None = None
    condition: str | None = None
    location: str | None = None
    feels_like: str | None = None
    humidity: str | None = None
    wind_speed: str | None = None
    is_night: bool = False
    sunrise: str | None = None
    sunset: str | None = None
    aqi_value: int | None = None
    aqi_description: str | None = None
    aqi_pm25: str | None = None
    forecast_days: tuple[ForecastDay, ...] = field(default_factory=lambda: ())
    hourly: tuple[HourlyEntry, ...] = field(default_factory=lambda: ())

    @property
    def today(self) -> ForecastDay:
        """First forecast day, or an empty entry if none is cached."""
        if self.forecast_days:
            return self.forecast_days[0]
        return ForecastDay()

    @classmethod
    def from_prefs(cls, prefs: Mapping[str, Any]) -> WeatherSnapshot:
        """Create a snapshot from the shared key-value store.

        Args:
            prefs: Store contents keyed as the app writes them
                (``temperature``, ``aqi_value``, ``day1_name``,
                ``hourly0_time``, ...).

        Returns:
            WeatherSnapshot with unusable values mapped to ``None``.
        """
        forecast_days = tuple(
            ForecastDay(
                name=_read_str(prefs, f"day{i}_name"),
                temp=_read_str(prefs, f"day{i}_temp"),
                condition=_read_str(prefs, f"day{i}_condition"),
            )
            for i in FORECAST_DAY_KEYS
        )
        hourly = tuple(
            HourlyEntry(
                time=_read_str(prefs, f"hourly{i}_time"),
                temp=_read_str(prefs, f"hourly{i}_temp"),
                condition=_read_str(prefs, f"hourly{i}_condition"),
            )
            for i in HOURLY_KEYS
        )

        return cls(
            temperature=_read_str(prefs, "temperature"),
            condition=_read_str(prefs, "condition"),
            location=_read_str(prefs, "location"),
            feels_like=_read_str(prefs, "feelsLike"),
            humidity=_read_str(prefs, "humidity"),
            wind_speed=_read_str(prefs, "windSpeed"),
            is_night=_read_bool(prefs, "isNight"),
            sunrise=_read_str(prefs, "sunrise"),
            sunset=_read_str(prefs, "sunset"),
            aqi_value=_read_int(prefs, "aqi_value"),
            aqi_description=_read_str(prefs, "aqi_description"),
            aqi_pm25=_read_str(prefs, "aqi_pm25"),
            forecast_days=forecast_days,
            hourly=hourly,
        )


def _read_str(prefs: Mapping[str, Any], key: str) -> str | None:
    """Read a string slot; numbers are stringified, anything else is absent."""
    value = prefs.get(key)
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _read_int(prefs: Mapping[str, Any], key: str) -> int | None:
    """Read an integer slot, accepting numeric strings."""
    value = prefs.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _read_bool(prefs: Mapping[str, Any], key: str) -> bool:
    """Read a boolean flag; missing or unrecognized values are False."""
    value = prefs.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False
