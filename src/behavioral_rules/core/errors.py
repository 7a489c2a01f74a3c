"""Custom exception hierarchy for the rule-mining engine.

The engine itself never raises on well-typed input: too few trades is a
report status, not an error.  These exceptions cover the edges around it.
"""


class BehavioralRulesError(Exception):
    """Base exception for all rule-mining errors."""


# --- Configuration ---
class ConfigError(BehavioralRulesError):
    """Invalid or missing configuration."""


# --- Data ---
class TradeLoadError(BehavioralRulesError):
    """A trade file could not be read or a row failed validation."""

    def __init__(self, source: str, reason: str, row: int | None = None):
        self.source = source
        self.reason = reason
        self.row = row
        where = f"{source} row {row}" if row is not None else source
        super().__init__(f"Cannot load trades from {where}: {reason}")
