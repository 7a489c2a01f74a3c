"""Enumerations used across the rule-mining engine."""

from enum import Enum


class TradeResult(str, Enum):
    """Outcome recorded on a journal entry."""

    WIN = "win"
    LOSS = "loss"
    BREAKEVEN = "breakeven"
    OPEN = "open"

    @property
    def is_closed(self) -> bool:
        """Only wins and losses count toward win rate and expectancy."""
        return self in (TradeResult.WIN, TradeResult.LOSS)


class RuleCategory(str, Enum):
    DO_MORE = "do_more"
    STOP_DOING = "stop_doing"
    REQUIRED_CONDITION = "required_condition"
    NO_TRADE = "no_trade"


class ReportStatus(str, Enum):
    INSUFFICIENT_DATA = "insufficient_data"
    OK = "ok"


class DimensionSet(str, Enum):
    """Which dimension registry the feature extractor uses."""

    STANDARD = "standard"
    EXTENDED = "extended"  # adds killzone, entry model, news day, account, planned RR


class LookbackWindow(str, Enum):
    DAYS_30 = "30"
    DAYS_90 = "90"
    ALL = "all"

    @property
    def days(self) -> int | None:
        if self is LookbackWindow.ALL:
            return None
        return int(self.value)
