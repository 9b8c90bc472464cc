"""Error types for Prism widget resolution.

The resolution engine itself never raises on missing or malformed weather
data. These errors belong to the host boundary: unknown variant ids handed
over by the launcher, and layout profiles that fail to load.
"""

from __future__ import annotations


class PrismWidgetError(Exception):
    """Base error for Prism widget failures."""


class UnknownVariantError(PrismWidgetError):
    """The host asked for a widget variant that is not registered."""

    def __init__(self, variant_id: str) -> None:
        super().__init__(f"Unknown widget variant: {variant_id!r}")
        self.variant_id = variant_id


class ProfileLoadError(PrismWidgetError):
    """Error loading a layout profile or validating its rule tables."""


class RenderError(PrismWidgetError):
    """The host toolkit failed to apply a render plan."""
