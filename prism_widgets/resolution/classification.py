"""Icon and color classification.

Maps raw condition text and AQI values to the symbolic icon and color
identifiers the rendering layer understands.

Properties:
- Pure, deterministic, no IO
- Never fails on empty or unrecognized input; falls back to a default
"""

from __future__ import annotations

from enum import Enum

# --------------------------------------------------------------------------
# Icons
# --------------------------------------------------------------------------


class IconId(str, Enum):
    """Weather icon identifiers (drawable names on the host)."""

    SUNNY = "ic_weather_sunny"
    CLOUDY = "ic_weather_cloudy"
    RAINY = "ic_weather_rainy"
    SNOWY = "ic_weather_snowy"
    NIGHT = "ic_weather_night"


# Substring rules in priority order; first match wins.
ICON_RULES: tuple[tuple[tuple[str, ...], IconId], ...] = (
    (("rain", "drizzle", "thunder"), IconId.RAINY),
    (("snow",), IconId.SNOWY),
    (("cloud",), IconId.CLOUDY),
    (("clear", "sunny"), IconId.SUNNY),
)

DEFAULT_ICON = IconId.CLOUDY


def icon_for(condition: str | None, is_night: bool) -> IconId:
    """Classify a condition into a weather icon.

    Night overrides the condition text entirely. Otherwise the lower-cased
    condition is matched against ``ICON_RULES`` in order.

    Args:
        condition: Free-text condition (e.g., "Light rain and cloud").
        is_night: Whether the "now" icon should show night.

    Returns:
        The matching IconId, or ``DEFAULT_ICON`` if nothing matches.
    """
    if is_night:
        return IconId.NIGHT

    text = (condition or "").lower()
    for needles, icon in ICON_RULES:
        if any(needle in text for needle in needles):
            return icon
    return DEFAULT_ICON


def forecast_icon_for(condition: str | None) -> IconId:
    """Classify a forecast-day condition.

    Forecast days are in the future, so they never take the night icon.
    """
    return icon_for(condition, is_night=False)


# --------------------------------------------------------------------------
# AQI colors
# --------------------------------------------------------------------------


class AqiColor(str, Enum):
    """AQI band colors (US EPA palette)."""

    GREEN = "#00E400"
    YELLOW = "#FFFF00"
    ORANGE = "#FF7E00"
    RED = "#FF0000"
    PURPLE = "#8F3F97"
    MAROON = "#7E0023"

    @property
    def argb(self) -> int:
        """Opaque ARGB integer as used by the host toolkit."""
        return 0xFF000000 | int(self.value[1:], 16)


# Inclusive upper bound of each band, ascending. Anything above the last
# bound is MAROON.
AQI_COLOR_BANDS: tuple[tuple[int, AqiColor], ...] = (
    (50, AqiColor.GREEN),
    (100, AqiColor.YELLOW),
    (150, AqiColor.ORANGE),
    (200, AqiColor.RED),
    (300, AqiColor.PURPLE),
)


def color_for_aqi(aqi: int) -> AqiColor:
    """Map an AQI value to its band color.

    Args:
        aqi: Air Quality Index. Values below zero fall in the first band.

    Returns:
        The AqiColor whose band contains ``aqi``.
    """
    for upper, color in AQI_COLOR_BANDS:
        if aqi <= upper:
            return color
    return AqiColor.MAROON
