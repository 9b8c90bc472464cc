"""View-model assembly: snapshot + size → render plan.

This module implements the single entry point the host calls for each
widget instance. It combines formatted text, classification results and
breakpoint visibility into one immutable RenderPlan.

Flow:
    variant
      → schema + rule table (registry)
        → text slots with defaults
          → icon / color classification
            → visibility (breakpoints)
              → RenderPlan

All resolution is:
- Pure (no IO, no clock, no process-wide state)
- Deterministic (same inputs → equal plans)
- Total (missing or malformed data degrades to documented defaults)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..domains.weather import MAX_FORECAST_DAYS, WeatherSnapshot
from .breakpoints import SizeConstraint, Visibility, resolve_visibility
from .classification import AqiColor, IconId, color_for_aqi, forecast_icon_for, icon_for
from .registry import (
    AQI_DESCRIPTION,
    AQI_PM25,
    AQI_PROGRESS,
    AQI_VALUE,
    CONDITION,
    DAY_ICON,
    DAY_NAME,
    DAY_TEMP,
    DEFAULT_REGISTRY,
    FEELS_LIKE,
    HUMIDITY,
    LOCATION,
    SUNRISE,
    SUNSET,
    TEMPERATURE,
    WEATHER_ICON,
    WIND_SPEED,
    VariantRegistry,
    WidgetVariant,
)

# --------------------------------------------------------------------------
# Defaults
# --------------------------------------------------------------------------

PLACEHOLDER = "--"
UNKNOWN_CONDITION = "Unknown"
UNKNOWN_LOCATION = "Unknown"
DEFAULT_PM25 = "0"
DEFAULT_SUNRISE = "06:00"
DEFAULT_SUNSET = "18:00"
DEFAULT_DAY_TEMP = "--°/--°"
DEFAULT_DAY_CONDITION = "unknown"

# The AQI bar tops out at the start of the maroon band.
AQI_PROGRESS_MAX = 300

DEGREE = "°"


# --------------------------------------------------------------------------
# Render Plan
# --------------------------------------------------------------------------


@dataclass(frozen=True)
class ProgressValue:
    """Determinate progress bar state.

    Attributes:
        value: Current value, within ``0..maximum``.
        maximum: Bar maximum.
    """

    value: int
    maximum: int

    def to_dict(self) -> dict[str, int]:
        """Convert to dictionary for the rendering layer."""
        return {"value": self.value, "max": self.maximum}


@dataclass(frozen=True)
class RenderPlan:
    """Complete, immutable output of one resolution call.

    A plan has no identity: it is produced fresh per call and discarded
    once the rendering layer has applied it.

    Attributes:
        variant: Widget variant, or None for sub-items and notifications.
        texts: Element → formatted text.
        icons: Element → icon identifier.
        colors: Element → color.
        visibility: Element → visibility flag. Covers every schema element.
        progress: Element → progress bar state.
        items: Ordered sub-plans for list elements (forecast days, hours).
    """

    variant: WidgetVariant | None = None
    texts: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    icons: Mapping[str, IconId] = field(default_factory=lambda: MappingProxyType({}))
    colors: Mapping[str, AqiColor] = field(
        default_factory=lambda: MappingProxyType({})
    )
    visibility: Mapping[str, Visibility] = field(
        default_factory=lambda: MappingProxyType({})
    )
    progress: Mapping[str, ProgressValue] = field(
        default_factory=lambda: MappingProxyType({})
    )
    items: tuple[RenderPlan, ...] = ()

    def is_visible(self, element: str) -> bool:
        """Whether ``element`` is shown. Unlisted elements are visible."""
        return self.visibility.get(element, Visibility.VISIBLE) is Visibility.VISIBLE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain form applied by the rendering layer."""
        result: dict[str, Any] = {
            "texts": dict(self.texts),
            "icons": {name: icon.value for name, icon in self.icons.items()},
            "colors": {name: color.value for name, color in self.colors.items()},
            "visibility": {name: vis.value for name, vis in self.visibility.items()},
        }
        if self.variant is not None:
            result["variant"] = self.variant.value
        if self.progress:
            result["progress"] = {
                name: bar.to_dict() for name, bar in self.progress.items()
            }
        if self.items:
            result["items"] = [item.to_dict() for item in self.items]
        return result


@dataclass
class _Slots:
    """Mutable scratch space filled by a variant builder."""

    texts: dict[str, str] = field(default_factory=lambda: {})
    icons: dict[str, IconId] = field(default_factory=lambda: {})
    colors: dict[str, AqiColor] = field(default_factory=lambda: {})
    progress: dict[str, ProgressValue] = field(default_factory=lambda: {})
    items: list[RenderPlan] = field(default_factory=lambda: [])


# --------------------------------------------------------------------------
# Core Resolution Function
# --------------------------------------------------------------------------


def resolve(
    variant: WidgetVariant,
    snapshot: WeatherSnapshot,
    constraint: SizeConstraint,
    registry: VariantRegistry = DEFAULT_REGISTRY,
) -> RenderPlan:
    """Resolve the render plan for one widget instance.

    Args:
        variant: Which widget kind is being rendered.
        snapshot: Point-in-time weather state; never re-read.
        constraint: Host-reported size of the instance.
        registry: Schemas and rule tables; defaults to the built-in tables.

    Returns:
        A fully assembled RenderPlan. Missing data is filled with the
        variant's defaults, so a plan is always complete.
    """
    schema = registry[variant]

    slots = _Slots()
    _BUILDERS[variant](snapshot, slots)

    return RenderPlan(
        variant=variant,
        texts=freeze_mapping(slots.texts),
        icons=freeze_mapping(slots.icons),
        colors=freeze_mapping(slots.colors),
        visibility=resolve_visibility(schema.elements, schema.rules, constraint),
        progress=freeze_mapping(slots.progress),
        items=tuple(slots.items),
    )


# --------------------------------------------------------------------------
# Variant Builders
# --------------------------------------------------------------------------


def _build_aqi_compact(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    aqi = snapshot.aqi_value if snapshot.aqi_value is not None else 0
    description = text_or_default(snapshot.aqi_description, PLACEHOLDER)
    pm25 = text_or_default(snapshot.aqi_pm25, DEFAULT_PM25)

    slots.texts[AQI_VALUE] = str(aqi)
    slots.texts[AQI_DESCRIPTION] = description.upper()
    slots.texts[AQI_PM25] = f"PM2.5: {pm25}"
    slots.colors[AQI_DESCRIPTION] = color_for_aqi(aqi)
    slots.progress[AQI_PROGRESS] = ProgressValue(
        value=min(max(aqi, 0), AQI_PROGRESS_MAX),
        maximum=AQI_PROGRESS_MAX,
    )


def _build_sun_path(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    slots.texts[SUNRISE] = text_or_default(snapshot.sunrise, DEFAULT_SUNRISE)
    slots.texts[SUNSET] = text_or_default(snapshot.sunset, DEFAULT_SUNSET)


def _build_weather_small(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    condition = text_or_default(snapshot.condition, UNKNOWN_CONDITION)

    slots.texts[TEMPERATURE] = with_degree(snapshot.temperature)
    slots.texts[LOCATION] = text_or_default(snapshot.location, UNKNOWN_LOCATION)
    slots.icons[WEATHER_ICON] = icon_for(condition, snapshot.is_night)


def _build_weather_medium(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    _build_weather_small(snapshot, slots)

    slots.texts[CONDITION] = text_or_default(snapshot.condition, UNKNOWN_CONDITION)
    slots.texts[FEELS_LIKE] = f"Feels {with_degree(snapshot.feels_like)}"
    slots.texts[HUMIDITY] = f"{text_or_default(snapshot.humidity, PLACEHOLDER)}%"


def _build_wind(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    slots.texts[WIND_SPEED] = text_or_default(snapshot.wind_speed, PLACEHOLDER)


def _build_forecast_row(snapshot: WeatherSnapshot, slots: _Slots) -> None:
    slots.texts[LOCATION] = text_or_default(snapshot.location, UNKNOWN_LOCATION)

    for day in snapshot.forecast_days[:MAX_FORECAST_DAYS]:
        # A day without a name is dropped, not rendered as an empty column.
        if day.name is None or not is_present(day.name):
            continue
        condition = text_or_default(day.condition, DEFAULT_DAY_CONDITION)
        slots.items.append(
            RenderPlan(
                texts=freeze_mapping(
                    {
                        DAY_NAME: day.name.upper(),
                        DAY_TEMP: text_or_default(day.temp, DEFAULT_DAY_TEMP),
                    }
                ),
                icons=freeze_mapping({DAY_ICON: forecast_icon_for(condition)}),
                visibility=all_visible((DAY_NAME, DAY_TEMP, DAY_ICON)),
            )
        )


_BUILDERS: Mapping[WidgetVariant, Callable[[WeatherSnapshot, _Slots], None]] = {
    WidgetVariant.AQI_COMPACT: _build_aqi_compact,
    WidgetVariant.FORECAST_ROW: _build_forecast_row,
    WidgetVariant.SUN_PATH: _build_sun_path,
    WidgetVariant.WEATHER_SMALL: _build_weather_small,
    WidgetVariant.WEATHER_MEDIUM: _build_weather_medium,
    WidgetVariant.WIND: _build_wind,
}


# --------------------------------------------------------------------------
# Formatting helpers
# --------------------------------------------------------------------------


def is_present(value: str | None) -> bool:
    """Whether a cached string carries any content."""
    return value is not None and value.strip() != ""


def text_or_default(value: str | None, default: str) -> str:
    """Return ``value``, or ``default`` when it is absent or blank."""
    if value is None or not is_present(value):
        return default
    return value


def with_degree(value: str | None) -> str:
    """Format a temperature with a degree sign; absent reads as ``--°``."""
    return f"{text_or_default(value, PLACEHOLDER)}{DEGREE}"


def freeze_mapping(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


def all_visible(elements: tuple[str, ...]) -> Mapping[str, Visibility]:
    return freeze_mapping({element: Visibility.VISIBLE for element in elements})
