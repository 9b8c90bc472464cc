"""Host Adapter Boundary.

This module defines the interface between the resolution engine and the
host that owns the key-value store and the widget/notification toolkit.

Key principles:
- The engine never reads the store or the clock on its own
- The host hands over one snapshot per refresh; every instance in that
  refresh is resolved against the same snapshot
- Renderers apply plans verbatim and never re-derive visibility or text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from .domains.weather import WeatherSnapshot
from .errors import RenderError
from .resolution.assembler import RenderPlan, resolve
from .resolution.breakpoints import SizeConstraint
from .resolution.notification import NotificationPlan, resolve_notification
from .resolution.registry import DEFAULT_REGISTRY, VariantRegistry, WidgetVariant

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from datetime import datetime

_LOGGER = logging.getLogger(__name__)


# --------------------------------------------------------------------------
# Widget Instances
# --------------------------------------------------------------------------


@dataclass(frozen=True)
class WidgetInstance:
    """One placed widget on the home screen.

    Attributes:
        instance_id: Host-assigned widget id.
        variant: Widget kind.
        constraint: Current size reported by the host.
    """

    instance_id: int
    variant: WidgetVariant
    constraint: SizeConstraint

    @classmethod
    def from_host(
        cls,
        instance_id: int,
        variant_id: str,
        options: Mapping[str, Any],
    ) -> WidgetInstance:
        """Create an instance from raw host values.

        Raises:
            UnknownVariantError: If ``variant_id`` is not registered.
        """
        return cls(
            instance_id=instance_id,
            variant=WidgetVariant.from_id(variant_id),
            constraint=SizeConstraint.from_options(options),
        )


# --------------------------------------------------------------------------
# Renderer Interface
# --------------------------------------------------------------------------


class WidgetRenderer(Protocol):
    """Protocol for applying widget plans to the host toolkit."""

    def apply(self, instance_id: int, plan: RenderPlan) -> None:
        """Apply a render plan to one widget instance.

        Raises:
            RenderError: If the toolkit rejects the update.
        """
        ...


class NotificationRenderer(Protocol):
    """Protocol for posting the persistent notification."""

    def show(self, plan: NotificationPlan) -> None:
        """Post or replace the ongoing notification.

        Raises:
            RenderError: If the toolkit rejects the update.
        """
        ...


# --------------------------------------------------------------------------
# Refresh
# --------------------------------------------------------------------------


def refresh_widgets(
    prefs: Mapping[str, Any],
    instances: Iterable[WidgetInstance],
    renderer: WidgetRenderer,
    registry: VariantRegistry = DEFAULT_REGISTRY,
) -> int:
    """Resolve and apply every widget instance against one snapshot.

    A renderer failure on one instance is logged and does not stop the
    remaining instances.

    Args:
        prefs: Current store contents.
        instances: Widget instances to refresh.
        renderer: Toolkit renderer.
        registry: Schemas and rule tables to resolve with.

    Returns:
        Number of instances the renderer accepted.
    """
    snapshot = WeatherSnapshot.from_prefs(prefs)
    applied = 0

    for instance in instances:
        plan = resolve(instance.variant, snapshot, instance.constraint, registry)
        try:
            renderer.apply(instance.instance_id, plan)
        except RenderError as err:
            _LOGGER.warning(
                "[%s] Failed to apply %s plan: %s",
                instance.instance_id,
                instance.variant.value,
                err,
            )
            continue
        applied += 1
        _LOGGER.debug(
            "[%s] Applied %s plan at %dx%d",
            instance.instance_id,
            instance.variant.value,
            instance.constraint.min_width,
            instance.constraint.min_height,
        )

    _LOGGER.debug("Refreshed %d widget instance(s)", applied)
    return applied


def refresh_notification(
    prefs: Mapping[str, Any],
    renderer: NotificationRenderer,
    updated_at: datetime | None = None,
) -> bool:
    """Resolve and post the persistent notification.

    Returns:
        True if the renderer accepted the plan.
    """
    plan = resolve_notification(WeatherSnapshot.from_prefs(prefs), updated_at)
    try:
        renderer.show(plan)
    except RenderError as err:
        _LOGGER.error("Failed to post weather notification: %s", err)
        return False
    return True
