"""Rank and cap rule buckets by impact."""

from __future__ import annotations

from ..core.config import RuleCapConfig
from ..core.enums import RuleCategory
from .report import Rule

# Positive buckets list the best expectancy first, negative ones the worst
_BEST_FIRST = {RuleCategory.DO_MORE, RuleCategory.REQUIRED_CONDITION}


def cap_for(category: RuleCategory, caps: RuleCapConfig) -> int:
    return {
        RuleCategory.DO_MORE: caps.do_more,
        RuleCategory.STOP_DOING: caps.stop_doing,
        RuleCategory.REQUIRED_CONDITION: caps.required_conditions,
        RuleCategory.NO_TRADE: caps.no_trade,
    }[category]


def rank_bucket(
    category: RuleCategory,
    rules: list[Rule],
    limit: int,
) -> list[Rule]:
    """Sort one bucket by expectancy and keep the top ``limit``.

    The sort is stable, so rules with equal expectancy keep the order in
    which they were classified.
    """
    ordered = sorted(
        rules,
        key=lambda r: r.expectancy,
        reverse=category in _BEST_FIRST,
    )
    return ordered[:limit]


def rank_rules(
    buckets: dict[RuleCategory, list[Rule]],
    caps: RuleCapConfig | None = None,
) -> dict[RuleCategory, list[Rule]]:
    caps = caps or RuleCapConfig()
    return {
        category: rank_bucket(category, buckets.get(category, []), cap_for(category, caps))
        for category in RuleCategory
    }
