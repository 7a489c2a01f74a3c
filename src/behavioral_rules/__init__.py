"""Behavioral rule mining for trading journals."""

from .core.config import MiningConfig
from .core.enums import ReportStatus, RuleCategory, TradeResult
from .journal import RuleMiner, RuleReport, TradeRecord, mine_rules

__version__ = "0.1.0"

__all__ = [
    "MiningConfig",
    "ReportStatus",
    "RuleCategory",
    "TradeResult",
    "RuleMiner",
    "RuleReport",
    "TradeRecord",
    "mine_rules",
]
