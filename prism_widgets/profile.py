"""Layout profile loading.

A layout profile replaces the breakpoint rule tables of selected widget
variants, e.g. to tune thresholds for a launcher with an unusual grid.
Profiles are treated as data, not code. Variants a profile does not list
keep their built-in tables.

Profile format::

    profile_id: tablet
    variants:
      aqi_compact:
        rules:
          - id: aqi_progress_short
            hides: [aqi_progress]
            height_below: 90
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ProfileLoadError, UnknownVariantError
from .resolution.breakpoints import BreakpointRule
from .resolution.registry import DEFAULT_REGISTRY, VariantRegistry, WidgetVariant

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutProfile:
    """A loaded layout profile.

    Attributes:
        profile_id: Profile identifier (e.g., "tablet").
        registry: Registry with the profile's rule tables applied.
        overridden: Variants whose rule tables the profile replaced.
    """

    profile_id: str
    registry: VariantRegistry
    overridden: frozenset[WidgetVariant]


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling."""
    if not path.exists():
        raise ProfileLoadError(f"File not found: {path}")
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as err:
        raise ProfileLoadError(f"Invalid YAML in {path}: {err}") from err
    if not isinstance(data, dict):
        raise ProfileLoadError(f"Profile {path} must be a mapping")
    return data


def _parse_threshold(rule_id: str, data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ProfileLoadError(
            f"Rule {rule_id!r}: {key} must be a non-negative integer, got {value!r}"
        )
    return value


def parse_rule(data: dict[str, Any]) -> BreakpointRule:
    """Parse a single breakpoint rule.

    Args:
        data: Rule mapping with ``id``, ``hides`` and at least one of
            ``width_below`` / ``height_below``.

    Returns:
        Parsed BreakpointRule.

    Raises:
        ProfileLoadError: If the rule is malformed.
    """
    if not isinstance(data, dict):
        raise ProfileLoadError(f"Rule must be a mapping, got {data!r}")
    rule_id = data.get("id", "unknown")
    hides = data.get("hides", [])
    if isinstance(hides, str):
        hides = [hides]
    if not isinstance(hides, list) or not all(isinstance(h, str) for h in hides):
        raise ProfileLoadError(f"Rule {rule_id!r}: hides must be a list of names")

    try:
        return BreakpointRule(
            rule_id=str(rule_id),
            hides=frozenset(hides),
            width_below=_parse_threshold(rule_id, data, "width_below"),
            height_below=_parse_threshold(rule_id, data, "height_below"),
        )
    except ValueError as err:
        raise ProfileLoadError(str(err)) from err


def load_layout_profile(
    profile_path: Path,
    base: VariantRegistry = DEFAULT_REGISTRY,
) -> LayoutProfile:
    """Load a layout profile from YAML.

    Args:
        profile_path: Path to the profile file.
        base: Registry the overrides are applied on top of.

    Returns:
        LayoutProfile whose registry carries the overridden rule tables.

    Raises:
        ProfileLoadError: If the file is missing or invalid, names an unknown
            variant, or a rule hides an element the variant does not have.
    """
    data = _load_yaml(profile_path)
    profile_id = str(data.get("profile_id", profile_path.stem))

    variants = data.get("variants") or {}
    if not isinstance(variants, dict):
        raise ProfileLoadError(f"Profile {profile_id!r}: variants must be a mapping")

    registry = base
    overridden: set[WidgetVariant] = set()

    for variant_id, variant_data in variants.items():
        try:
            variant = WidgetVariant.from_id(str(variant_id))
        except UnknownVariantError as err:
            raise ProfileLoadError(f"Profile {profile_id!r}: {err}") from err

        if variant_data is None:
            variant_data = {}
        if not isinstance(variant_data, dict):
            raise ProfileLoadError(
                f"Profile {profile_id!r}: {variant.value} must be a mapping"
            )
        rules_data = variant_data.get("rules", [])
        if not isinstance(rules_data, list):
            raise ProfileLoadError(
                f"Profile {profile_id!r}: rules for {variant.value} must be a list"
            )
        rules = tuple(parse_rule(rule_data) for rule_data in rules_data)

        # VariantSchema validates element names and raises ProfileLoadError.
        registry = registry.with_rules(variant, rules)
        overridden.add(variant)
        _LOGGER.debug(
            "Profile %s: %s uses %d rule(s)", profile_id, variant.value, len(rules)
        )

    _LOGGER.info(
        "Loaded layout profile %s (%d variant override(s))",
        profile_id,
        len(overridden),
    )
    return LayoutProfile(
        profile_id=profile_id,
        registry=registry,
        overridden=frozenset(overridden),
    )
