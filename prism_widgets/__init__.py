"""Home-screen widget and notification view models for Prism Weather.

Resolves cached weather/AQI state and host size constraints into
immutable render plans for the widget toolkit.
"""

__version__ = "0.1.0"

from .adapter import (
    NotificationRenderer,
    WidgetInstance,
    WidgetRenderer,
    refresh_notification,
    refresh_widgets,
)
from .domains import ForecastDay, HourlyEntry, WeatherSnapshot
from .errors import (
    PrismWidgetError,
    ProfileLoadError,
    RenderError,
    UnknownVariantError,
)
from .profile import LayoutProfile, load_layout_profile
from .resolution import (
    DEFAULT_REGISTRY,
    AqiColor,
    IconId,
    NotificationPlan,
    RenderPlan,
    SizeConstraint,
    VariantRegistry,
    Visibility,
    WidgetVariant,
    color_for_aqi,
    icon_for,
    resolve,
    resolve_notification,
)

__all__ = [
    "DEFAULT_REGISTRY",
    "AqiColor",
    "ForecastDay",
    "HourlyEntry",
    "IconId",
    "LayoutProfile",
    "NotificationPlan",
    "NotificationRenderer",
    "PrismWidgetError",
    "ProfileLoadError",
    "RenderError",
    "RenderPlan",
    "SizeConstraint",
    "UnknownVariantError",
    "VariantRegistry",
    "Visibility",
    "WeatherSnapshot",
    "WidgetInstance",
    "WidgetRenderer",
    "WidgetVariant",
    "__version__",
    "color_for_aqi",
    "icon_for",
    "load_layout_profile",
    "refresh_notification",
    "refresh_widgets",
    "resolve",
    "resolve_notification",
]
