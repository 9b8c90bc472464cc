"""Breakpoint resolution for resizable widgets.

This module answers one question:
"Given a widget's rule table and its size, which elements are shown?"

Rules are evaluated per element, not short-circuited as a whole: one
element may depend on width while another depends on height within the
same variant. Width and height are independent axes, so a narrow-but-tall
instance and a wide-but-short instance each get their own rules applied.

Properties:
- Pure, deterministic, no IO
- Every element is visible unless a satisfied rule hides it
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from typing import Any

# --------------------------------------------------------------------------
# Data Types
# --------------------------------------------------------------------------


class Visibility(str, Enum):
    """Visibility flag applied to a view element."""

    VISIBLE = "visible"
    GONE = "gone"


@dataclass(frozen=True)
class SizeConstraint:
    """Host-reported minimum bounding box for one widget instance.

    Attributes:
        min_width: Minimum width in device-independent units.
        min_height: Minimum height in device-independent units.
    """

    min_width: int
    min_height: int

    def __post_init__(self) -> None:
        """Validate constraint invariants."""
        if self.min_width < 0 or self.min_height < 0:
            raise ValueError(
                f"Size must be non-negative, got {self.min_width}x{self.min_height}"
            )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> SizeConstraint:
        """Create a constraint from host widget options.

        Missing, negative or non-numeric ``minWidth``/``minHeight`` read as 0,
        which is the most compact layout.
        """
        return cls(
            min_width=_read_dimension(options, "minWidth"),
            min_height=_read_dimension(options, "minHeight"),
        )


@dataclass(frozen=True)
class BreakpointRule:
    """A single visibility rule.

    The predicate is satisfied when the width is below ``width_below`` OR
    the height is below ``height_below``. A threshold left as ``None`` does
    not take part. While satisfied, every element in ``hides`` is GONE.

    Attributes:
        rule_id: Identifier used in traces and layout profiles.
        hides: Elements this rule hides.
        width_below: Width threshold, exclusive.
        height_below: Height threshold, exclusive.
    """

    rule_id: str
    hides: frozenset[str]
    width_below: int | None = None
    height_below: int | None = None

    def __post_init__(self) -> None:
        """Validate rule invariants."""
        if not self.hides:
            raise ValueError(f"Rule {self.rule_id!r} hides no elements")
        if self.width_below is None and self.height_below is None:
            raise ValueError(f"Rule {self.rule_id!r} has no threshold")

    def is_satisfied(self, constraint: SizeConstraint) -> bool:
        """Check the rule's predicate against a size constraint."""
        if self.width_below is not None and constraint.min_width < self.width_below:
            return True
        if self.height_below is not None and constraint.min_height < self.height_below:
            return True
        return False


@dataclass(frozen=True)
class RuleCheck:
    """Result of evaluating a single rule, for traces.

    Attributes:
        rule_id: The evaluated rule.
        satisfied: Whether its predicate held.
        hidden: Elements it hid (empty when not satisfied).
    """

    rule_id: str
    satisfied: bool
    hidden: frozenset[str] = field(default_factory=lambda: frozenset())


# --------------------------------------------------------------------------
# Resolution
# --------------------------------------------------------------------------


def resolve_visibility(
    elements: Iterable[str],
    rules: Iterable[BreakpointRule],
    constraint: SizeConstraint,
) -> Mapping[str, Visibility]:
    """Compute the per-element visibility map for one widget instance.

    Args:
        elements: All elements of the variant's schema, in schema order.
        rules: The variant's breakpoint rules.
        constraint: Host-reported size of the instance.

    Returns:
        Read-only mapping with an entry for every element. Elements that no
        satisfied rule names are VISIBLE.
    """
    hidden: set[str] = set()
    for rule in rules:
        if rule.is_satisfied(constraint):
            hidden |= rule.hides

    return MappingProxyType(
        {
            element: Visibility.GONE if element in hidden else Visibility.VISIBLE
            for element in elements
        }
    )


def explain_visibility(
    rules: Iterable[BreakpointRule],
    constraint: SizeConstraint,
) -> tuple[RuleCheck, ...]:
    """Trace which rules fired for a constraint.

    Useful when a widget looks wrong on a particular launcher grid.
    """
    checks: list[RuleCheck] = []
    for rule in rules:
        satisfied = rule.is_satisfied(constraint)
        checks.append(
            RuleCheck(
                rule_id=rule.rule_id,
                satisfied=satisfied,
                hidden=rule.hides if satisfied else frozenset(),
            )
        )
    return tuple(checks)


def _read_dimension(options: Mapping[str, Any], key: str) -> int:
    value = options.get(key)
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, str):
        try:
            return max(int(value.strip()), 0)
        except ValueError:
            return 0
    return 0
