"""Tests for breakpoint rules and visibility resolution."""

from __future__ import annotations

import pytest

from prism_widgets.resolution.breakpoints import (
    BreakpointRule,
    RuleCheck,
    SizeConstraint,
    Visibility,
    explain_visibility,
    resolve_visibility,
)

# --------------------------------------------------------------------------
# Test Fixtures
# --------------------------------------------------------------------------


def width_rule() -> BreakpointRule:
    """Hides "label" when narrower than 100."""
    return BreakpointRule(rule_id="narrow", hides=frozenset({"label"}), width_below=100)


def height_rule() -> BreakpointRule:
    """Hides "bar" when shorter than 80."""
    return BreakpointRule(rule_id="short", hides=frozenset({"bar"}), height_below=80)


ELEMENTS = ("value", "label", "bar")


# --------------------------------------------------------------------------
# Test: SizeConstraint
# --------------------------------------------------------------------------


class TestSizeConstraint:
    """Tests for SizeConstraint."""

    def test_negative_rejected(self) -> None:
        """Negative sizes are invalid."""
        with pytest.raises(ValueError):
            SizeConstraint(min_width=-1, min_height=40)

    def test_from_options(self) -> None:
        """Host options are read by key."""
        constraint = SizeConstraint.from_options({"minWidth": 146, "minHeight": 72})
        assert constraint == SizeConstraint(min_width=146, min_height=72)

    def test_from_options_missing_reads_zero(self) -> None:
        """Missing dimensions read as the most compact size."""
        assert SizeConstraint.from_options({}) == SizeConstraint(0, 0)

    def test_from_options_tolerates_bad_values(self) -> None:
        """Non-numeric and negative values read as zero."""
        constraint = SizeConstraint.from_options(
            {"minWidth": "wide", "minHeight": -10}
        )
        assert constraint == SizeConstraint(0, 0)

    def test_from_options_numeric_string(self) -> None:
        """Numeric strings are accepted."""
        constraint = SizeConstraint.from_options({"minWidth": "120", "minHeight": "90"})
        assert constraint == SizeConstraint(120, 90)


# --------------------------------------------------------------------------
# Test: BreakpointRule
# --------------------------------------------------------------------------


class TestBreakpointRule:
    """Tests for BreakpointRule."""

    def test_threshold_is_exclusive(self) -> None:
        """A size equal to the threshold does not satisfy the rule."""
        rule = width_rule()
        assert rule.is_satisfied(SizeConstraint(99, 500)) is True
        assert rule.is_satisfied(SizeConstraint(100, 500)) is False

    def test_either_axis_satisfies(self) -> None:
        """With both thresholds, either axis alone is enough."""
        rule = BreakpointRule(
            rule_id="compact",
            hides=frozenset({"label"}),
            width_below=100,
            height_below=60,
        )
        assert rule.is_satisfied(SizeConstraint(90, 200)) is True
        assert rule.is_satisfied(SizeConstraint(200, 50)) is True
        assert rule.is_satisfied(SizeConstraint(100, 60)) is False

    def test_requires_threshold(self) -> None:
        """A rule without any threshold is rejected."""
        with pytest.raises(ValueError):
            BreakpointRule(rule_id="never", hides=frozenset({"label"}))

    def test_requires_elements(self) -> None:
        """A rule that hides nothing is rejected."""
        with pytest.raises(ValueError):
            BreakpointRule(rule_id="noop", hides=frozenset(), width_below=10)


# --------------------------------------------------------------------------
# Test: resolve_visibility
# --------------------------------------------------------------------------


class TestResolveVisibility:
    """Tests for resolve_visibility."""

    def test_all_visible_without_rules(self) -> None:
        """Elements default to visible."""
        result = resolve_visibility(ELEMENTS, (), SizeConstraint(0, 0))
        assert dict(result) == {e: Visibility.VISIBLE for e in ELEMENTS}

    def test_axes_are_independent(self) -> None:
        """Narrow-but-tall hides width-driven elements only."""
        rules = (width_rule(), height_rule())
        result = resolve_visibility(ELEMENTS, rules, SizeConstraint(50, 200))

        assert result["label"] == Visibility.GONE
        assert result["bar"] == Visibility.VISIBLE
        assert result["value"] == Visibility.VISIBLE

    def test_wide_but_short(self) -> None:
        """Wide-but-short hides height-driven elements only."""
        rules = (width_rule(), height_rule())
        result = resolve_visibility(ELEMENTS, rules, SizeConstraint(200, 50))

        assert result["label"] == Visibility.VISIBLE
        assert result["bar"] == Visibility.GONE

    def test_rules_not_short_circuited(self) -> None:
        """Every satisfied rule applies, not just the first."""
        rules = (width_rule(), height_rule())
        result = resolve_visibility(ELEMENTS, rules, SizeConstraint(10, 10))

        assert result["label"] == Visibility.GONE
        assert result["bar"] == Visibility.GONE
        assert result["value"] == Visibility.VISIBLE

    def test_result_is_read_only(self) -> None:
        """The visibility map cannot be mutated."""
        result = resolve_visibility(ELEMENTS, (), SizeConstraint(0, 0))
        with pytest.raises(TypeError):
            result["value"] = Visibility.GONE  # type: ignore[index]

    def test_keeps_schema_order(self) -> None:
        """Map keys follow the element order given."""
        result = resolve_visibility(ELEMENTS, (width_rule(),), SizeConstraint(0, 0))
        assert tuple(result) == ELEMENTS


# --------------------------------------------------------------------------
# Test: explain_visibility
# --------------------------------------------------------------------------


class TestExplainVisibility:
    """Tests for explain_visibility."""

    def test_trace_per_rule(self) -> None:
        """Each rule yields one check, in order."""
        checks = explain_visibility(
            (width_rule(), height_rule()), SizeConstraint(50, 200)
        )
        assert checks == (
            RuleCheck(rule_id="narrow", satisfied=True, hidden=frozenset({"label"})),
            RuleCheck(rule_id="short", satisfied=False, hidden=frozenset()),
        )
