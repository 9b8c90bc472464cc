"""Variant registry: widget kinds, their element schemas and rule tables.

Each widget variant owns a fixed set of named elements (view slots) and a
breakpoint rule table. The tables are data: a layout profile may replace
them (see ``prism_widgets.profile``) without touching the resolver.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ..errors import ProfileLoadError, UnknownVariantError
from .breakpoints import BreakpointRule


class WidgetVariant(str, Enum):
    """Supported home-screen widget kinds, by host id."""

    AQI_COMPACT = "aqi_compact"
    FORECAST_ROW = "forecast_row"
    SUN_PATH = "sun_path"
    WEATHER_SMALL = "weather_small"
    WEATHER_MEDIUM = "weather_medium"
    WIND = "wind"

    @classmethod
    def from_id(cls, variant_id: str) -> WidgetVariant:
        """Look up a variant by the id the host registered it under.

        Raises:
            UnknownVariantError: If no variant has this id.
        """
        try:
            return cls(variant_id)
        except ValueError:
            raise UnknownVariantError(variant_id) from None


# --------------------------------------------------------------------------
# Element names
# --------------------------------------------------------------------------

# AqiCompact
AQI_VALUE = "aqi_value"
AQI_DETAILS = "aqi_details"
AQI_DESCRIPTION = "aqi_description"
AQI_PM25 = "aqi_pm25"
AQI_PROGRESS = "aqi_progress"

# SunPath
SUN_ICON = "sun_icon"
SUNRISE = "sunrise"
SUNSET = "sunset"

# WeatherSmall / WeatherMedium
TEMPERATURE = "temperature"
LOCATION = "location"
CONDITION = "condition"
WEATHER_ICON = "weather_icon"
DETAILS = "details"
FEELS_LIKE = "feels_like"
HUMIDITY = "humidity"

# Wind
WIND_SPEED = "wind_speed"

# ForecastRow and its per-day items
FORECAST_DAYS = "forecast_days"
DAY_NAME = "day_name"
DAY_TEMP = "day_temp"
DAY_ICON = "day_icon"


# --------------------------------------------------------------------------
# Schema
# --------------------------------------------------------------------------


@dataclass(frozen=True)
class VariantSchema:
    """Element schema and breakpoint table for one variant.

    Attributes:
        variant: The variant this schema describes.
        elements: Element names, in layout order.
        rules: Breakpoint rules, in evaluation order.
    """

    variant: WidgetVariant
    elements: tuple[str, ...]
    rules: tuple[BreakpointRule, ...] = ()

    def __post_init__(self) -> None:
        """Every rule may only hide elements of this schema."""
        known = set(self.elements)
        for rule in self.rules:
            unknown = rule.hides - known
            if unknown:
                raise ProfileLoadError(
                    f"Rule {rule.rule_id!r} for {self.variant.value} hides "
                    f"unknown elements: {sorted(unknown)}"
                )


class VariantRegistry(Mapping[WidgetVariant, VariantSchema]):
    """Immutable mapping of every variant to its schema."""

    def __init__(self, schemas: Mapping[WidgetVariant, VariantSchema]) -> None:
        missing = set(WidgetVariant) - set(schemas)
        if missing:
            raise ProfileLoadError(
                f"Registry is missing variants: {sorted(v.value for v in missing)}"
            )
        self._schemas = MappingProxyType(dict(schemas))

    def __getitem__(self, variant: WidgetVariant) -> VariantSchema:
        return self._schemas[variant]

    def __iter__(self) -> Iterator[WidgetVariant]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)

    def __repr__(self) -> str:
        return f"VariantRegistry({list(self._schemas.values())!r})"

    def with_rules(
        self, variant: WidgetVariant, rules: tuple[BreakpointRule, ...]
    ) -> VariantRegistry:
        """Return a new registry with ``variant``'s rule table replaced."""
        schemas = dict(self._schemas)
        current = schemas[variant]
        schemas[variant] = VariantSchema(
            variant=variant, elements=current.elements, rules=rules
        )
        return VariantRegistry(schemas)


# --------------------------------------------------------------------------
# Default tables
# --------------------------------------------------------------------------

# Thresholds are approximate dp values. A 1x1 cell is roughly 40-70dp
# depending on the launcher grid; 2x1 is about 150-170dp wide. Each variant
# keeps its most important datum visible at any size.

DEFAULT_SCHEMAS: Mapping[WidgetVariant, VariantSchema] = {
    WidgetVariant.AQI_COMPACT: VariantSchema(
        variant=WidgetVariant.AQI_COMPACT,
        elements=(AQI_VALUE, AQI_DETAILS, AQI_DESCRIPTION, AQI_PM25, AQI_PROGRESS),
        rules=(
            BreakpointRule(
                rule_id="aqi_progress_short",
                hides=frozenset({AQI_PROGRESS}),
                height_below=80,
            ),
            BreakpointRule(
                rule_id="aqi_details_compact",
                hides=frozenset({AQI_DETAILS, AQI_DESCRIPTION, AQI_PM25}),
                width_below=100,
                height_below=60,
            ),
        ),
    ),
    WidgetVariant.SUN_PATH: VariantSchema(
        variant=WidgetVariant.SUN_PATH,
        elements=(SUNRISE, SUN_ICON, SUNSET),
        rules=(
            BreakpointRule(
                rule_id="sun_icon_narrow",
                hides=frozenset({SUN_ICON}),
                width_below=110,
            ),
            # Sunset is never hidden.
            BreakpointRule(
                rule_id="sunrise_narrow",
                hides=frozenset({SUNRISE}),
                width_below=70,
            ),
        ),
    ),
    WidgetVariant.WEATHER_MEDIUM: VariantSchema(
        variant=WidgetVariant.WEATHER_MEDIUM,
        elements=(
            WEATHER_ICON,
            TEMPERATURE,
            LOCATION,
            CONDITION,
            DETAILS,
            FEELS_LIKE,
            HUMIDITY,
        ),
        rules=(
            BreakpointRule(
                rule_id="details_short",
                hides=frozenset({DETAILS, FEELS_LIKE, HUMIDITY}),
                height_below=110,
            ),
            BreakpointRule(
                rule_id="condition_narrow",
                hides=frozenset({CONDITION}),
                width_below=140,
            ),
        ),
    ),
    WidgetVariant.WEATHER_SMALL: VariantSchema(
        variant=WidgetVariant.WEATHER_SMALL,
        elements=(WEATHER_ICON, TEMPERATURE, LOCATION),
    ),
    WidgetVariant.WIND: VariantSchema(
        variant=WidgetVariant.WIND,
        elements=(WIND_SPEED,),
    ),
    WidgetVariant.FORECAST_ROW: VariantSchema(
        variant=WidgetVariant.FORECAST_ROW,
        elements=(LOCATION, FORECAST_DAYS),
    ),
}

DEFAULT_REGISTRY = VariantRegistry(DEFAULT_SCHEMAS)
