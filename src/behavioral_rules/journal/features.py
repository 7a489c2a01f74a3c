"""Dimension registry: which categorical views of a trade are mined.

Each :class:`Dimension` pairs a field name with an extractor that maps a
trade to a label, or ``None`` when the trade has nothing to say about
that dimension.  A ``None`` only removes the trade from that one
dimension; it still counts everywhere else.

The registries are closed, ordered tuples.  Order matters: grouping
emits dimensions in registry order, which in turn fixes the order of
equally ranked rules.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..core.enums import DimensionSet
from .record import TradeRecord

# Indexed by datetime.weekday() (0=Monday)
DAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
]

# (start hour inclusive, end hour exclusive, label)
HOUR_RANGES = [
    (0, 6, "Night (00-06)"),
    (6, 12, "Morning (06-12)"),
    (12, 18, "Afternoon (12-18)"),
    (18, 24, "Evening (18-24)"),
]


@dataclass(frozen=True)
class Dimension:
    """A named categorical view of a trade."""

    name: str
    extract: Callable[[TradeRecord], str | None]

    def __call__(self, trade: TradeRecord) -> str | None:
        return self.extract(trade)


# ---------------------------------------------------------------------------
# Computed extractors
# ---------------------------------------------------------------------------

def day_of_week(trade: TradeRecord) -> str:
    return DAY_NAMES[trade.executed_at.weekday()]


def hour_range(trade: TradeRecord) -> str:
    hour = trade.executed_at.hour
    for start, end, label in HOUR_RANGES:
        if start <= hour < end:
            return label
    return HOUR_RANGES[-1][2]


def risk_level(trade: TradeRecord) -> str | None:
    """Bucket account risk percent; zero or missing risk is absent."""
    pct = trade.risk_pct
    if not pct:
        return None
    if pct <= 0.5:
        return "Very Low (≤0.5%)"
    if pct <= 1:
        return "Low (0.5-1%)"
    if pct <= 2:
        return "Medium (1-2%)"
    return "High (>2%)"


def rr_planned_bucket(trade: TradeRecord) -> str | None:
    """Bucket planned reward:risk; zero or missing is absent."""
    rr = trade.rr_planned
    if not rr:
        return None
    if rr < 2:
        return "Low RR (<2)"
    if rr < 3:
        return "Medium RR (2-3)"
    return "High RR (3+)"


def _attribute(name: str) -> Dimension:
    """Pass-through dimension reading one optional field."""
    return Dimension(name, lambda t: getattr(t, name) or None)


# ---------------------------------------------------------------------------
# Registries
# ---------------------------------------------------------------------------

STANDARD_DIMENSIONS: tuple[Dimension, ...] = (
    _attribute("session"),
    _attribute("setup_type"),
    _attribute("htf_bias"),
    _attribute("rules_followed"),
    _attribute("trade_grade"),
    _attribute("direction"),
    _attribute("confidence"),
    Dimension("day_of_week", day_of_week),
    Dimension("hour_range", hour_range),
    Dimension("risk_level", risk_level),
)

EXTENDED_DIMENSIONS: tuple[Dimension, ...] = STANDARD_DIMENSIONS + (
    _attribute("killzone"),
    _attribute("entry_model"),
    _attribute("news_day"),
    _attribute("account_type"),
    Dimension("rr_planned_bucket", rr_planned_bucket),
)


def dimensions_for(dimension_set: DimensionSet) -> tuple[Dimension, ...]:
    if dimension_set == DimensionSet.EXTENDED:
        return EXTENDED_DIMENSIONS
    return STANDARD_DIMENSIONS


def extract_features(
    trade: TradeRecord,
    dimensions: tuple[Dimension, ...] = STANDARD_DIMENSIONS,
) -> dict[str, str]:
    """Return every present dimension label for one trade."""
    features: dict[str, str] = {}
    for dim in dimensions:
        value = dim(trade)
        if value is not None:
            features[dim.name] = value
    return features
