"""Behavioral rule mining: which conditions go with better or worse trading.

Runs the journal through a fixed pipeline of pure stages:

1. lookback + closed-trade filter   (:mod:`.filters`)
2. baseline win rate / expectancy   (:mod:`.baseline`)
3. per-dimension grouping           (:mod:`.grouping`, :mod:`.features`)
4. significance classification      (:mod:`.classifier`)
5. ranking and capping              (:mod:`.ranking`)

The miner holds configuration only; every call to :meth:`RuleMiner.mine`
starts from scratch, and the same trades always yield the same report.

Usage::

    report = mine_rules(trades)
    if report.is_insufficient:
        print(report.message)
    for rule in report.do_more:
        print(rule.statement, rule.expectancy)
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from ..core.config import MiningConfig
from ..core.enums import LookbackWindow, ReportStatus, RuleCategory
from ..observability.logger import get_logger, run_context
from .baseline import compute_baseline
from .classifier import classify_groups
from .features import dimensions_for
from .filters import closed_trades, latest_execution, within_lookback
from .grouping import group_trades
from .ranking import rank_rules
from .record import TradeRecord
from .report import RuleReport

logger = get_logger(__name__)

NO_PATTERNS_MESSAGE = "No statistically significant patterns found yet."


class RuleMiner:
    """Discover behavioral rules from a trader's closed trades.

    Parameters
    ----------
    config : MiningConfig | None
        Thresholds, bucket caps, dimension set and lookback window.
        Defaults to :class:`MiningConfig` defaults.
    """

    def __init__(self, config: MiningConfig | None = None) -> None:
        self._config = config or MiningConfig()
        self._dimensions = dimensions_for(self._config.dimension_set)

    @property
    def config(self) -> MiningConfig:
        return self._config

    def mine(
        self,
        trades: Iterable[TradeRecord],
        *,
        now: datetime | None = None,
    ) -> RuleReport:
        """Run the full pipeline over ``trades``.

        Parameters
        ----------
        trades : Iterable[TradeRecord]
            Journal entries in any order.  Open and breakeven entries are
            ignored.
        now : datetime | None
            Reference time for the lookback window.  When omitted, the
            latest execution time in ``trades`` is used so the result
            depends on the input alone.
        """
        cfg = self._config
        min_n = cfg.thresholds.min_sample_size
        trades = list(trades)

        with run_context():
            if cfg.lookback != LookbackWindow.ALL and trades:
                ref = now or latest_execution(trades)
                trades = within_lookback(trades, cfg.lookback, ref)

            closed = closed_trades(trades)
            if len(closed) < min_n:
                logger.info(
                    "rule_mining.insufficient_data",
                    closed=len(closed),
                    required=min_n,
                )
                return RuleReport(
                    status=ReportStatus.INSUFFICIENT_DATA,
                    message=(
                        f"Need at least {min_n} closed trades for analysis. "
                        f"Currently have {len(closed)}."
                    ),
                    total_analyzed=len(closed),
                    min_sample_size=min_n,
                )

            baseline = compute_baseline(closed)
            groups = group_trades(closed, self._dimensions, min_sample_size=min_n)
            logger.debug(
                "rule_mining.grouped",
                dimensions=len(self._dimensions),
                groups=len(groups),
            )

            buckets = rank_rules(
                classify_groups(groups, baseline, cfg.thresholds),
                cfg.caps,
            )
            report = RuleReport(
                status=ReportStatus.OK,
                baseline_win_rate=baseline.win_rate,
                baseline_expectancy=baseline.expectancy,
                total_analyzed=baseline.total,
                min_sample_size=min_n,
                do_more=buckets[RuleCategory.DO_MORE],
                stop_doing=buckets[RuleCategory.STOP_DOING],
                required_conditions=buckets[RuleCategory.REQUIRED_CONDITION],
                no_trade=buckets[RuleCategory.NO_TRADE],
            )
            if not report.has_rules:
                report = report.model_copy(update={"message": NO_PATTERNS_MESSAGE})

            logger.info(
                "rule_mining.complete",
                analyzed=baseline.total,
                baseline_win_rate=round(baseline.win_rate, 2),
                baseline_expectancy=round(baseline.expectancy, 4),
                do_more=len(report.do_more),
                stop_doing=len(report.stop_doing),
                required_conditions=len(report.required_conditions),
                no_trade=len(report.no_trade),
            )
            return report


def mine_rules(
    trades: Iterable[TradeRecord],
    config: MiningConfig | None = None,
    *,
    now: datetime | None = None,
) -> RuleReport:
    """Convenience wrapper: ``RuleMiner(config).mine(trades, now=now)``."""
    return RuleMiner(config).mine(trades, now=now)
