"""CLI entry point for the behavioral rule miner."""

from __future__ import annotations

import click

from .core.enums import DimensionSet, LookbackWindow, RuleCategory
from .core.errors import BehavioralRulesError
from .journal.report import Rule, RuleReport

_SECTIONS = [
    (RuleCategory.DO_MORE, "Do More Of"),
    (RuleCategory.STOP_DOING, "Stop Doing"),
    (RuleCategory.REQUIRED_CONDITION, "Required Conditions"),
    (RuleCategory.NO_TRADE, "No-Trade Scenarios"),
]


def _format_rule(rule: Rule) -> str:
    sign = "+" if rule.expectancy >= 0 else ""
    line = f"  - {rule.statement}  [n={rule.sample_size}, Exp: {sign}{rule.expectancy:.2f}R"
    if rule.avg_win_r > 0:
        line += f", Avg Win: {rule.avg_win_r:.2f}R"
    return line + "]"


def render_text(report: RuleReport) -> str:
    """Human-readable rendering of a report."""
    if report.is_insufficient:
        return report.message

    lines = [
        f"Based on {report.total_analyzed} closed trades",
        f"Baseline Win Rate: {report.baseline_win_rate:.1f}%  "
        f"Baseline Expectancy: {report.baseline_expectancy:.2f}R",
    ]
    if not report.has_rules:
        lines.append("")
        lines.append(report.message)
        return "\n".join(lines)

    for category, title in _SECTIONS:
        rules = report.bucket(category)
        if not rules:
            continue
        lines.append("")
        lines.append(f"{title}:")
        lines.extend(_format_rule(r) for r in rules)
    return "\n".join(lines)


@click.group()
@click.version_option(package_name="behavioral-rules")
def main() -> None:
    """Behavioral rule mining for trading journals."""


@main.command()
@click.argument("trades_file", type=click.Path(dir_okay=False))
@click.option("--config", default=None, help="Config file path (TOML)")
@click.option(
    "--lookback",
    type=click.Choice([w.value for w in LookbackWindow]),
    default=None,
    help="Only analyse the last 30 or 90 days (default: all)",
)
@click.option(
    "--dimensions",
    type=click.Choice([d.value for d in DimensionSet]),
    default=None,
    help="Dimension set to mine",
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def mine(
    trades_file: str,
    config: str | None,
    lookback: str | None,
    dimensions: str | None,
    output_format: str,
) -> None:
    """Mine behavioral rules from a JSON or CSV trade file."""
    from .core.config import load_settings
    from .journal.io import load_trades, report_to_json
    from .journal.rule_engine import RuleMiner
    from .observability.logger import setup_logging

    overrides: dict = {}
    if lookback:
        overrides.setdefault("mining", {})["lookback"] = lookback
    if dimensions:
        overrides.setdefault("mining", {})["dimension_set"] = dimensions

    try:
        settings = load_settings(config_path=config, overrides=overrides)
        setup_logging(
            level=settings.observability.log_level,
            format=settings.observability.log_format,
        )
        trades = load_trades(trades_file)
    except BehavioralRulesError as exc:
        raise click.ClickException(str(exc)) from exc

    report = RuleMiner(settings.mining).mine(trades)

    if output_format == "json":
        click.echo(report_to_json(report))
    else:
        click.echo(render_text(report))


if __name__ == "__main__":
    main()
