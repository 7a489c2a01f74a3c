"""Significance classification of field groups into rule buckets.

Each group is compared with the baseline and may land in any number of
buckets.  Thresholds (defaults from :class:`ThresholdConfig`):

=====================  ====================================================
Bucket                 Condition
=====================  ====================================================
do_more                win-rate diff >= 15pp and expectancy >= 0.3R
required_condition     win-rate diff >= 22.5pp, expectancy >= 0.45R, n >= 10
stop_doing             win-rate diff <= -15pp and expectancy < 0
no_trade               win rate <= 35%, expectancy <= -0.5R, n >= 5
=====================  ====================================================

Only the group's own expectancy is tested; the expectancy difference to
baseline is reported on the verdict for callers that want it.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.config import ThresholdConfig
from ..core.enums import RuleCategory
from .baseline import Baseline
from .report import FieldGroup, Rule

# Tolerance for threshold comparisons on accumulated floats
EPSILON = 1e-9

_STATEMENTS = {
    RuleCategory.DO_MORE: "Trade during {value} ({field})",
    RuleCategory.REQUIRED_CONDITION: 'Ensure {field} is "{value}"',
    RuleCategory.STOP_DOING: "Avoid trading during {value} ({field})",
    RuleCategory.NO_TRADE: 'Do NOT trade when {field} is "{value}"',
}


@dataclass(frozen=True)
class Verdict:
    """Classification of one group against the baseline."""

    group: FieldGroup
    win_rate_diff: float
    expectancy_diff: float
    categories: tuple[RuleCategory, ...]


def format_field(name: str) -> str:
    """``htf_bias`` -> ``Htf Bias``."""
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), name.replace("_", " "))


def rule_statement(category: RuleCategory, group: FieldGroup) -> str:
    return _STATEMENTS[category].format(
        value=group.value, field=format_field(group.field)
    )


def _gte(a: float, b: float) -> bool:
    return a >= b - EPSILON


def _lte(a: float, b: float) -> bool:
    return a <= b + EPSILON


def classify_group(
    group: FieldGroup,
    baseline: Baseline,
    thresholds: ThresholdConfig | None = None,
) -> Verdict:
    """Decide which buckets a group qualifies for."""
    t = thresholds or ThresholdConfig()
    win_rate_diff = group.win_rate - baseline.win_rate
    expectancy_diff = group.expectancy - baseline.expectancy
    n = group.sample_size
    exp = group.expectancy

    categories: list[RuleCategory] = []
    if _gte(win_rate_diff, t.win_rate_diff) and _gte(exp, t.min_expectancy):
        categories.append(RuleCategory.DO_MORE)
    if (
        _gte(win_rate_diff, t.strict_win_rate_diff)
        and _gte(exp, t.strict_expectancy)
        and n >= t.strict_sample_size
    ):
        categories.append(RuleCategory.REQUIRED_CONDITION)
    if _lte(win_rate_diff, -t.win_rate_diff) and exp < -EPSILON:
        categories.append(RuleCategory.STOP_DOING)
    if (
        _lte(group.win_rate, t.no_trade_max_win_rate)
        and _lte(exp, t.no_trade_max_expectancy)
        and n >= t.min_sample_size
    ):
        categories.append(RuleCategory.NO_TRADE)

    return Verdict(
        group=group,
        win_rate_diff=win_rate_diff,
        expectancy_diff=expectancy_diff,
        categories=tuple(categories),
    )


def make_rule(category: RuleCategory, group: FieldGroup) -> Rule:
    return Rule(
        statement=rule_statement(category, group),
        category=category,
        field=group.field,
        value=group.value,
        sample_size=group.sample_size,
        win_rate=group.win_rate,
        expectancy=group.expectancy,
        avg_win_r=group.avg_win_r,
    )


def classify_groups(
    groups: Iterable[FieldGroup],
    baseline: Baseline,
    thresholds: ThresholdConfig | None = None,
) -> dict[RuleCategory, list[Rule]]:
    """Build unranked rule lists, one independent Rule per qualifying bucket."""
    buckets: dict[RuleCategory, list[Rule]] = {c: [] for c in RuleCategory}
    for group in groups:
        verdict = classify_group(group, baseline, thresholds)
        for category in verdict.categories:
            buckets[category].append(make_rule(category, group))
    return buckets
