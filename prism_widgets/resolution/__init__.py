"""View-model resolution for Prism widgets.

This package contains pure resolution logic with no I/O dependencies.
All functions are deterministic and side-effect free.

Components:
- classification: Condition → icon, AQI → color
- breakpoints: Size constraint → per-element visibility
- registry: Widget variants, element schemas and rule tables
- assembler: Snapshot + size → RenderPlan
- notification: Snapshot → persistent notification plans
"""

from .assembler import (
    AQI_PROGRESS_MAX,
    ProgressValue,
    RenderPlan,
    resolve,
)
from .breakpoints import (
    BreakpointRule,
    RuleCheck,
    SizeConstraint,
    Visibility,
    explain_visibility,
    resolve_visibility,
)
from .classification import (
    AQI_COLOR_BANDS,
    AqiColor,
    IconId,
    color_for_aqi,
    forecast_icon_for,
    icon_for,
)
from .notification import (
    NotificationPlan,
    resolve_hourly,
    resolve_notification,
)
from .registry import (
    DEFAULT_REGISTRY,
    VariantRegistry,
    VariantSchema,
    WidgetVariant,
)

__all__ = [
    "AQI_COLOR_BANDS",
    "AQI_PROGRESS_MAX",
    "DEFAULT_REGISTRY",
    "AqiColor",
    "BreakpointRule",
    "IconId",
    "NotificationPlan",
    "ProgressValue",
    "RenderPlan",
    "RuleCheck",
    "SizeConstraint",
    "VariantRegistry",
    "VariantSchema",
    "Visibility",
    "WidgetVariant",
    "color_for_aqi",
    "explain_visibility",
    "forecast_icon_for",
    "icon_for",
    "resolve",
    "resolve_hourly",
    "resolve_notification",
    "resolve_visibility",
]
