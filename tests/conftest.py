"""Pytest configuration and fixtures for prism_widgets tests."""

from __future__ import annotations

from typing import Any

import pytest

from prism_widgets.domains.weather import WeatherSnapshot


def full_prefs() -> dict[str, Any]:
    """Store contents as the app writes them after a successful sync."""
    prefs: dict[str, Any] = {
        "temperature": "21",
        "condition": "Light rain",
        "location": "Lisbon",
        "feelsLike": "19",
        "humidity": "82",
        "windSpeed": "14 km/h",
        "isNight": False,
        "sunrise": "07:12",
        "sunset": "19:48",
        "aqi_value": 42,
        "aqi_description": "Good",
        "aqi_pm25": "8.1",
    }
    days = [
        ("Mon", "22°/14°", "Sunny"),
        ("Tue", "20°/13°", "Partly cloudy"),
        ("Wed", "18°/12°", "Thunderstorm"),
        ("Thu", "17°/11°", "Snow showers"),
        ("Fri", "19°/12°", "Clear"),
    ]
    for i, (name, temp, condition) in enumerate(days, start=1):
        prefs[f"day{i}_name"] = name
        prefs[f"day{i}_temp"] = temp
        prefs[f"day{i}_condition"] = condition
    hours = [
        ("14:00", "21°", "Light rain"),
        ("15:00", "21°", "Cloudy"),
        ("16:00", "20°", "Drizzle"),
        ("17:00", "19°", "Clear"),
        ("18:00", "18°", "Snow"),
    ]
    for i, (time, temp, condition) in enumerate(hours):
        prefs[f"hourly{i}_time"] = time
        prefs[f"hourly{i}_temp"] = temp
        prefs[f"hourly{i}_condition"] = condition
    return prefs


@pytest.fixture
def prefs() -> dict[str, Any]:
    """Fully populated store contents."""
    return full_prefs()


@pytest.fixture
def snapshot(prefs: dict[str, Any]) -> WeatherSnapshot:
    """Snapshot built from fully populated store contents."""
    return WeatherSnapshot.from_prefs(prefs)


@pytest.fixture
def empty_snapshot() -> WeatherSnapshot:
    """Snapshot of an empty store (first launch, nothing synced yet)."""
    return WeatherSnapshot.from_prefs({})
