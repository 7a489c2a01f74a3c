"""Trade file loading and report export.

These adapters sit at the edge of the engine: the miner itself never
touches the filesystem.  JSON files may hold a bare list of trade
objects or an object with a ``trades`` list.  CSV files need a header
row whose columns match :class:`TradeRecord` field names; empty cells
are read as missing values.

Usage::

    trades = load_trades("journal.csv")
    report = mine_rules(trades)
    print(report_to_json(report))
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..core.errors import TradeLoadError
from .record import TradeRecord
from .report import RuleReport

logger = logging.getLogger(__name__)


def parse_trades(rows: list[dict[str, Any]], *, source: str = "<memory>") -> list[TradeRecord]:
    """Validate raw rows into trade records.

    Raises
    ------
    TradeLoadError
        On the first row that fails validation (rows are 1-based).
    """
    trades: list[TradeRecord] = []
    for i, row in enumerate(rows, start=1):
        if not isinstance(row, dict):
            raise TradeLoadError(source, "expected an object", row=i)
        try:
            trades.append(TradeRecord.model_validate(row))
        except ValidationError as exc:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}"
                for e in exc.errors()
            )
            raise TradeLoadError(source, errors, row=i) from exc
    return trades


def load_trades_json(path: str | Path) -> list[TradeRecord]:
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise TradeLoadError(str(path), str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise TradeLoadError(str(path), f"invalid JSON: {exc}") from exc

    if isinstance(data, dict):
        data = data.get("trades")
    if not isinstance(data, list):
        raise TradeLoadError(str(path), "expected a list of trades")

    trades = parse_trades(data, source=str(path))
    logger.debug("Loaded %d trades from %s", len(trades), path)
    return trades


def load_trades_csv(path: str | Path) -> list[TradeRecord]:
    path = Path(path)
    try:
        with open(path, newline="", encoding="utf-8") as f:
            rows = [
                {k: (v if v != "" else None) for k, v in row.items() if k}
                for row in csv.DictReader(f)
            ]
    except OSError as exc:
        raise TradeLoadError(str(path), str(exc)) from exc

    trades = parse_trades(rows, source=str(path))
    logger.debug("Loaded %d trades from %s", len(trades), path)
    return trades


def load_trades(path: str | Path) -> list[TradeRecord]:
    """Load trades, choosing the format from the file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_trades_json(path)
    if suffix == ".csv":
        return load_trades_csv(path)
    raise TradeLoadError(str(path), f"unsupported file type '{suffix}'")


def report_to_json(report: RuleReport, *, indent: int = 2) -> str:
    """Serialise a report; identical reports give identical strings."""
    return json.dumps(report.to_dict(), indent=indent)
