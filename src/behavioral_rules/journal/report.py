"""Output models: per-group statistics, rules and the rule report."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from ..core.enums import ReportStatus, RuleCategory


@dataclass(frozen=True)
class FieldGroup:
    """Aggregated outcome of every closed trade sharing one dimension value."""

    field: str
    value: str
    wins: int
    losses: int
    total_r: float
    avg_win_r: float

    @property
    def sample_size(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win rate in percent."""
        if self.sample_size == 0:
            return 0.0
        return self.wins / self.sample_size * 100

    @property
    def expectancy(self) -> float:
        """Mean R per trade."""
        if self.sample_size == 0:
            return 0.0
        return self.total_r / self.sample_size


class Rule(BaseModel):
    """A single actionable finding in one rule bucket."""

    model_config = {"frozen": True}

    statement: str
    category: RuleCategory
    field: str
    value: str
    sample_size: int
    win_rate: float
    expectancy: float
    avg_win_r: float


class RuleReport(BaseModel):
    """Result of one mining run.

    ``status`` is ``insufficient_data`` when fewer closed trades than
    ``min_sample_size`` were supplied; in that case ``total_analyzed``
    holds the observed count and every bucket is empty.
    """

    model_config = {"frozen": True}

    status: ReportStatus
    message: str = ""
    baseline_win_rate: float = 0.0
    baseline_expectancy: float = 0.0
    total_analyzed: int = 0
    min_sample_size: int = 5
    do_more: list[Rule] = Field(default_factory=list)
    stop_doing: list[Rule] = Field(default_factory=list)
    required_conditions: list[Rule] = Field(default_factory=list)
    no_trade: list[Rule] = Field(default_factory=list)

    @property
    def is_insufficient(self) -> bool:
        return self.status == ReportStatus.INSUFFICIENT_DATA

    @property
    def has_rules(self) -> bool:
        return bool(
            self.do_more or self.stop_doing
            or self.required_conditions or self.no_trade
        )

    def bucket(self, category: RuleCategory) -> list[Rule]:
        """Return the ranked rules for one category."""
        return {
            RuleCategory.DO_MORE: self.do_more,
            RuleCategory.STOP_DOING: self.stop_doing,
            RuleCategory.REQUIRED_CONDITION: self.required_conditions,
            RuleCategory.NO_TRADE: self.no_trade,
        }[category]

    def to_dict(self) -> dict[str, Any]:
        """Export to a JSON-safe dictionary for the presentation layer."""
        return self.model_dump(mode="json")
