"""Persistent notification view model.

The ongoing weather notification has a collapsed and an expanded layout.
Both share the same header (temperature, location, condition, high/low,
last update, icon); the expanded layout adds up to five hourly entries.

The engine never reads the clock: the caller passes the update time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..domains.weather import MAX_HOURLY_ENTRIES
from .assembler import (
    PLACEHOLDER,
    UNKNOWN_CONDITION,
    RenderPlan,
    all_visible,
    freeze_mapping,
    is_present,
    text_or_default,
    with_degree,
)
from .classification import icon_for

if TYPE_CHECKING:
    from datetime import datetime

    from ..domains.weather import HourlyEntry, WeatherSnapshot

# Header elements
NOTIF_TEMP = "notif_temp"
NOTIF_LOCATION = "notif_location"
NOTIF_CONDITION = "notif_condition"
NOTIF_HIGH_LOW = "notif_high_low"
NOTIF_UPDATED = "notif_updated"
NOTIF_ICON = "notif_icon"

# Expanded-only container and its items
HOURLY_FORECAST = "hourly_forecast"
HOURLY_TIME = "hourly_time"
HOURLY_TEMP = "hourly_temp"
HOURLY_ICON = "hourly_icon"

HEADER_ELEMENTS = (
    NOTIF_ICON,
    NOTIF_TEMP,
    NOTIF_LOCATION,
    NOTIF_CONDITION,
    NOTIF_HIGH_LOW,
    NOTIF_UPDATED,
)
HOURLY_ITEM_ELEMENTS = (HOURLY_TIME, HOURLY_TEMP, HOURLY_ICON)

DEFAULT_NOTIFICATION_LOCATION = "Location"
DEFAULT_HIGH_LOW = "--/--"
DEFAULT_HOURLY_CONDITION = "cloud"
UNKNOWN_TIME = "--:--"


@dataclass(frozen=True)
class NotificationPlan:
    """Render plans for both notification layouts.

    Attributes:
        collapsed: Header-only plan.
        expanded: Header plus hourly items.
    """

    collapsed: RenderPlan
    expanded: RenderPlan

    @property
    def hourly(self) -> tuple[RenderPlan, ...]:
        """Hourly sub-plans shown in the expanded layout."""
        return self.expanded.items

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain form applied by the rendering layer."""
        return {
            "collapsed": self.collapsed.to_dict(),
            "expanded": self.expanded.to_dict(),
        }


def resolve_notification(
    snapshot: WeatherSnapshot,
    updated_at: datetime | None = None,
) -> NotificationPlan:
    """Resolve the persistent notification.

    Args:
        snapshot: Point-in-time weather state.
        updated_at: When the snapshot was taken; shown as "Updated HH:MM".
            ``None`` shows a placeholder time.

    Returns:
        NotificationPlan with the collapsed and expanded layouts.
    """
    condition = text_or_default(snapshot.condition, UNKNOWN_CONDITION)
    high_low = text_or_default(snapshot.today.temp, DEFAULT_HIGH_LOW)
    updated = updated_at.strftime("%H:%M") if updated_at is not None else UNKNOWN_TIME

    texts = freeze_mapping(
        {
            NOTIF_TEMP: with_degree(snapshot.temperature),
            NOTIF_LOCATION: text_or_default(
                snapshot.location, DEFAULT_NOTIFICATION_LOCATION
            ),
            NOTIF_CONDITION: condition,
            NOTIF_HIGH_LOW: f"H/L: {high_low}",
            NOTIF_UPDATED: f"Updated {updated}",
        }
    )
    icons = freeze_mapping({NOTIF_ICON: icon_for(condition, snapshot.is_night)})

    collapsed = RenderPlan(
        texts=texts,
        icons=icons,
        visibility=all_visible(HEADER_ELEMENTS),
    )
    expanded = RenderPlan(
        texts=texts,
        icons=icons,
        visibility=all_visible((*HEADER_ELEMENTS, HOURLY_FORECAST)),
        items=resolve_hourly(snapshot),
    )
    return NotificationPlan(collapsed=collapsed, expanded=expanded)


def resolve_hourly(snapshot: WeatherSnapshot) -> tuple[RenderPlan, ...]:
    """Resolve the hourly items, skipping entries without a time.

    Hourly entries describe the next few hours, so unlike forecast days
    they follow the snapshot's night flag.
    """
    return tuple(
        _hourly_item(entry, snapshot.is_night)
        for entry in snapshot.hourly[:MAX_HOURLY_ENTRIES]
        if entry.time is not None and is_present(entry.time)
    )


def _hourly_item(entry: HourlyEntry, is_night: bool) -> RenderPlan:
    condition = text_or_default(entry.condition, DEFAULT_HOURLY_CONDITION)
    return RenderPlan(
        texts=freeze_mapping(
            {
                HOURLY_TIME: text_or_default(entry.time, UNKNOWN_TIME),
                HOURLY_TEMP: text_or_default(entry.temp, PLACEHOLDER),
            }
        ),
        icons=freeze_mapping({HOURLY_ICON: icon_for(condition, is_night)}),
        visibility=all_visible(HOURLY_ITEM_ELEMENTS),
    )
