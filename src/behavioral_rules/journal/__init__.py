"""Trade Journal rule mining: behavioral patterns from closed trades.

Groups a trader's closed trades by single categorical conditions,
compares each group with the overall baseline and turns the standouts
into ranked, human-readable rules.

Key components
--------------
TradeRecord      One journaled trade (input, read-only)
Dimension        Named extractor in the fixed dimension registry
Baseline         Win rate / expectancy over all closed trades
FieldGroup       Aggregated stats for one (dimension, value)
Rule             One finding in one bucket
RuleReport       Full result: status, baseline, four ranked buckets
RuleMiner        Runs the pipeline with a given MiningConfig
"""

from .record import TradeRecord
from .features import Dimension, STANDARD_DIMENSIONS, EXTENDED_DIMENSIONS
from .baseline import Baseline
from .report import FieldGroup, Rule, RuleReport
from .rule_engine import RuleMiner, mine_rules

__all__ = [
    "TradeRecord",
    "Dimension",
    "STANDARD_DIMENSIONS",
    "EXTENDED_DIMENSIONS",
    "Baseline",
    "FieldGroup",
    "Rule",
    "RuleReport",
    "RuleMiner",
    "mine_rules",
]
