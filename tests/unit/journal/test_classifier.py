"""Tests for significance classification and rule statements."""

import pytest

from behavioral_rules.core.config import ThresholdConfig
from behavioral_rules.core.enums import RuleCategory
from behavioral_rules.journal.baseline import Baseline
from behavioral_rules.journal.classifier import (
    classify_group,
    classify_groups,
    format_field,
    rule_statement,
)
from behavioral_rules.journal.report import FieldGroup

# 50% win rate, 0.0R expectancy
EVEN_BASELINE = Baseline(total=100, wins=50, total_r=0.0)


def _group(wins: int, losses: int, total_r: float, value: str = "London",
           field: str = "session", avg_win_r: float = 1.0) -> FieldGroup:
    return FieldGroup(
        field=field, value=value, wins=wins, losses=losses,
        total_r=total_r, avg_win_r=avg_win_r,
    )


class TestFormatting:

    @pytest.mark.parametrize("raw,pretty", [
        ("session", "Session"),
        ("htf_bias", "Htf Bias"),
        ("day_of_week", "Day Of Week"),
        ("rr_planned_bucket", "Rr Planned Bucket"),
    ])
    def test_format_field(self, raw, pretty):
        assert format_field(raw) == pretty

    def test_statements(self):
        group = _group(7, 3, 4.0, value="Breakout", field="setup_type")
        assert rule_statement(RuleCategory.DO_MORE, group) == "Trade during Breakout (Setup Type)"
        assert rule_statement(RuleCategory.REQUIRED_CONDITION, group) == 'Ensure Setup Type is "Breakout"'
        assert rule_statement(RuleCategory.STOP_DOING, group) == "Avoid trading during Breakout (Setup Type)"
        assert rule_statement(RuleCategory.NO_TRADE, group) == 'Do NOT trade when Setup Type is "Breakout"'


class TestThresholds:

    def test_exact_do_more_threshold(self):
        """65% win rate (diff 15) at 0.3R against a 50%/0.0 baseline qualifies."""
        group = _group(13, 7, 6.0)
        verdict = classify_group(group, EVEN_BASELINE)
        assert verdict.win_rate_diff == pytest.approx(15.0)
        assert group.expectancy == pytest.approx(0.3)
        assert verdict.categories == (RuleCategory.DO_MORE,)

    def test_just_below_do_more_expectancy(self):
        group = _group(13, 7, 5.8)
        assert classify_group(group, EVEN_BASELINE).categories == ()

    def test_high_win_rate_needs_expectancy(self):
        # 80% wins but tiny winners: expectancy 0.12
        group = _group(8, 2, 1.2, avg_win_r=0.4)
        assert RuleCategory.DO_MORE not in classify_group(group, EVEN_BASELINE).categories

    def test_required_condition_needs_ten_trades(self):
        nine = _group(8, 1, 7.0)
        ten = _group(9, 1, 8.0)
        assert classify_group(nine, EVEN_BASELINE).categories == (RuleCategory.DO_MORE,)
        assert classify_group(ten, EVEN_BASELINE).categories == (
            RuleCategory.DO_MORE, RuleCategory.REQUIRED_CONDITION,
        )

    def test_required_condition_exact_threshold(self):
        # 72.5% over 40 trades = diff 22.5; expectancy 0.45
        group = _group(29, 11, 18.0)
        assert RuleCategory.REQUIRED_CONDITION in classify_group(group, EVEN_BASELINE).categories

    def test_stop_doing_exact_threshold(self):
        # 35% win rate, expectancy -0.3: stop doing but not a no-trade
        group = _group(7, 13, -6.0)
        verdict = classify_group(group, EVEN_BASELINE)
        assert verdict.win_rate_diff == pytest.approx(-15.0)
        assert verdict.categories == (RuleCategory.STOP_DOING,)

    def test_stop_doing_requires_negative_expectancy(self):
        # 30% win rate but big winners keep expectancy at zero
        group = _group(3, 7, 0.0, avg_win_r=7 / 3)
        assert classify_group(group, EVEN_BASELINE).categories == ()

    def test_no_trade_and_stop_doing_overlap(self):
        group = _group(2, 8, -6.0)
        assert classify_group(group, EVEN_BASELINE).categories == (
            RuleCategory.STOP_DOING, RuleCategory.NO_TRADE,
        )

    def test_no_trade_is_absolute_not_relative(self):
        """A weak group is a no-trade even when the baseline is just as weak."""
        weak_baseline = Baseline(total=100, wins=30, total_r=-40.0)
        group = _group(3, 7, -6.0)
        assert classify_group(group, weak_baseline).categories == (RuleCategory.NO_TRADE,)

    def test_expectancy_diff_reported(self):
        baseline = Baseline(total=10, wins=5, total_r=2.0)
        group = _group(7, 3, 4.0)
        assert classify_group(group, baseline).expectancy_diff == pytest.approx(0.2)

    def test_custom_thresholds(self):
        strict = ThresholdConfig(win_rate_diff=20.0)
        group = _group(13, 7, 6.0)
        assert classify_group(group, EVEN_BASELINE, strict).categories == ()


class TestClassifyGroups:

    def test_one_rule_per_bucket(self):
        strong = _group(9, 1, 8.0, value="London")
        weak = _group(2, 8, -6.0, value="Asia")
        buckets = classify_groups([strong, weak], EVEN_BASELINE)
        assert [r.value for r in buckets[RuleCategory.DO_MORE]] == ["London"]
        assert [r.value for r in buckets[RuleCategory.REQUIRED_CONDITION]] == ["London"]
        assert [r.value for r in buckets[RuleCategory.STOP_DOING]] == ["Asia"]
        assert [r.value for r in buckets[RuleCategory.NO_TRADE]] == ["Asia"]

    def test_rule_carries_group_stats(self):
        group = _group(9, 1, 8.0, avg_win_r=1.0)
        rule = classify_groups([group], EVEN_BASELINE)[RuleCategory.DO_MORE][0]
        assert rule.category == RuleCategory.DO_MORE
        assert rule.sample_size == 10
        assert rule.win_rate == pytest.approx(90.0)
        assert rule.expectancy == pytest.approx(0.8)
        assert rule.avg_win_r == pytest.approx(1.0)

    def test_all_buckets_present_when_empty(self):
        buckets = classify_groups([], EVEN_BASELINE)
        assert set(buckets) == set(RuleCategory)
        assert all(v == [] for v in buckets.values())
