"""Tests for the ``behavioral-rules`` CLI."""

import json

import pytest
from click.testing import CliRunner

from behavioral_rules.cli import main


def _rows(n_wins: int, n_losses: int, **attrs) -> list[dict]:
    rows = []
    for i in range(n_wins + n_losses):
        rows.append({
            "trade_id": f"{attrs.get('setup_type', 'x')}-{i}",
            "result": "win" if i < n_wins else "loss",
            "r_multiple": 1.0 if i < n_wins else -1.0,
            "executed_at": "2024-03-04T09:15:00",
            **attrs,
        })
    return rows


@pytest.fixture
def trades_file(tmp_path):
    path = tmp_path / "trades.json"
    rows = _rows(8, 2, setup_type="Breakout") + _rows(2, 8, setup_type="Fade")
    path.write_text(json.dumps(rows))
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestMine:

    def test_text_output(self, runner, trades_file):
        result = runner.invoke(main, ["mine", str(trades_file)])
        assert result.exit_code == 0, result.output
        assert "Based on 20 closed trades" in result.output
        assert "Baseline Win Rate: 50.0%" in result.output
        assert "Do More Of:" in result.output
        assert "Trade during Breakout (Setup Type)" in result.output
        assert "No-Trade Scenarios:" in result.output
        assert 'Do NOT trade when Setup Type is "Fade"' in result.output

    def test_json_output(self, runner, trades_file):
        result = runner.invoke(main, ["mine", str(trades_file), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["status"] == "ok"
        assert data["total_analyzed"] == 20
        assert [r["value"] for r in data["required_conditions"]] == ["Breakout"]

    def test_insufficient_data(self, runner, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps(_rows(2, 1)))
        result = runner.invoke(main, ["mine", str(path)])
        assert result.exit_code == 0
        assert "Need at least 5 closed trades" in result.output
        assert "Currently have 3" in result.output

    def test_no_patterns(self, runner, tmp_path):
        path = tmp_path / "trades.json"
        path.write_text(json.dumps(_rows(5, 5, session="London")))
        result = runner.invoke(main, ["mine", str(path)])
        assert result.exit_code == 0
        assert "No statistically significant patterns found yet." in result.output

    def test_config_file(self, runner, trades_file, tmp_path):
        config = tmp_path / "rules.toml"
        config.write_text("[mining.thresholds]\nmin_sample_size = 50\n")
        result = runner.invoke(main, ["mine", str(trades_file), "--config", str(config)])
        assert result.exit_code == 0
        assert "Need at least 50 closed trades" in result.output

    def test_missing_trades_file(self, runner, tmp_path):
        result = runner.invoke(main, ["mine", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Cannot load trades" in result.output

    def test_missing_config_file(self, runner, trades_file, tmp_path):
        result = runner.invoke(
            main, ["mine", str(trades_file), "--config", str(tmp_path / "none.toml")]
        )
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_bad_lookback_choice(self, runner, trades_file):
        result = runner.invoke(main, ["mine", str(trades_file), "--lookback", "7"])
        assert result.exit_code == 2
