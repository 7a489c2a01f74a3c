"""Journal trade record: the engine's input model.

A TradeRecord is one journaled trade as handed over by the trade store.
The engine treats it as read-only: it never changes, adds or drops
fields, and it only reads the categorical attributes through the
dimension registry in :mod:`behavioral_rules.journal.features`.

Categorical attributes are optional.  Journals fill them in unevenly,
so an empty string is normalised to ``None`` here and the trade simply
drops out of that one dimension.
"""

from __future__ import annotations

import math
from datetime import datetime

from pydantic import BaseModel, field_validator

from ..core.enums import TradeResult

# Realized R credited to a win that carries no R-multiple
DEFAULT_WIN_R = 1.0

# Every loss counts as exactly this many R, whatever was realized
LOSS_R = -1.0

_CATEGORICAL_FIELDS = (
    "session",
    "setup_type",
    "htf_bias",
    "trade_grade",
    "direction",
    "killzone",
    "entry_model",
    "news_day",
    "account_type",
)


class TradeRecord(BaseModel):
    """One journaled trade.

    Parameters
    ----------
    trade_id : str
        Identifier assigned by the trade store.
    result : TradeResult
        ``win``, ``loss``, ``breakeven`` or ``open``.
    r_multiple : float | None
        Realized R-multiple, if the trader recorded one.
    executed_at : datetime
        Execution timestamp.  Its own wall-clock hour and weekday are used
        for bucketing; no timezone conversion is applied.
    """

    # R, risk and planned-RR values must be finite
    model_config = {"frozen": True, "allow_inf_nan": False}

    trade_id: str
    result: TradeResult
    r_multiple: float | None = None
    executed_at: datetime

    # Core journal attributes
    session: str | None = None  # "London", "New York", "Asia", ...
    setup_type: str | None = None
    htf_bias: str | None = None  # "Bullish" / "Bearish" / "Neutral"
    rules_followed: str | None = None  # "Yes" / "No" / "Partially"
    trade_grade: str | None = None  # "A+", "A", "B", ...
    direction: str | None = None  # "long" / "short"
    confidence: str | None = None  # 1-10 self-rating, kept as a label
    risk_pct: float | None = None  # Account risk, percent

    # Extended journal attributes
    killzone: str | None = None
    entry_model: str | None = None
    news_day: str | None = None
    account_type: str | None = None
    rr_planned: float | None = None

    @field_validator("result", mode="before")
    @classmethod
    def _normalise_result(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator(*_CATEGORICAL_FIELDS, mode="before")
    @classmethod
    def _blank_is_absent(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("rules_followed", mode="before")
    @classmethod
    def _rules_followed_label(cls, v: object) -> object:
        if isinstance(v, bool):
            return "Yes" if v else "No"
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence_label(cls, v: object) -> object:
        if v is None or isinstance(v, bool):
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v:
                return None
            # CSV cells arrive as text; "7.0" and 7.0 are the same rating
            try:
                number = float(v)
            except ValueError:
                return v
            if not math.isfinite(number):
                return v
            v = number
        if isinstance(v, (int, float)):
            # A zero rating means "not rated"
            if v == 0:
                return None
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    # ------------------------------------------------------------------ #
    # R accounting                                                         #
    # ------------------------------------------------------------------ #

    @property
    def is_closed(self) -> bool:
        return self.result.is_closed

    @property
    def is_win(self) -> bool:
        return self.result == TradeResult.WIN

    @property
    def win_r(self) -> float:
        """R credited when this trade is a win (missing or zero R counts as 1R)."""
        return self.r_multiple or DEFAULT_WIN_R

    @property
    def scored_r(self) -> float:
        """R contribution used for expectancy.

        Wins contribute their realized R.  Losses are normalised to a
        fixed -1R unit regardless of the R actually realized.  This is a
        deliberate simplification of the scoring model: changing it would
        move groups between buckets and alter every previously reported
        rule, so it must stay.
        """
        if self.is_win:
            return self.win_r
        return LOSS_R
