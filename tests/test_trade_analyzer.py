"""Tests for trade package valuation."""

import pytest

from src.contract_engine.models import Contract
from src.front_office.models import DraftPick, Player, Position
from src.front_office.trade_analyzer import TradeAnalyzer, TradeFairness


# ── Helpers ──────────────────────────────────────────────────────────

def _make_player(player_id="x", age=25, overall=90):
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        position=Position.WR,
        age=age,
        overall=overall,
        team_id="HOU",
        contract=Contract(years=3, salary=5, bonus=3, years_left=2, total_value=18),
    )


def _make_pick(value, round_=1):
    return DraftPick(
        round=round_, pick_number=24, original_team_id="HOU",
        current_team_id="HOU", year=2026, value=value,
    )


@pytest.fixture
def analyzer():
    return TradeAnalyzer()


# ── Asset values ─────────────────────────────────────────────────────

class TestAssetValue:
    def test_young_player(self, analyzer):
        # 90^2 * (35-25)/10 / 10
        assert analyzer.asset_value(_make_player(age=25, overall=90)) == pytest.approx(810)

    def test_age_factor_floor(self, analyzer):
        # (35-34)/10 = 0.1 is floored at 0.5
        assert analyzer.asset_value(_make_player(age=34, overall=80)) == pytest.approx(320)

    def test_player_older_than_ceiling(self, analyzer):
        assert analyzer.asset_value(_make_player(age=38, overall=80)) == pytest.approx(320)

    def test_pick_uses_chart_value(self, analyzer):
        assert analyzer.asset_value(_make_pick(210)) == 210

    def test_package_value_sums(self, analyzer):
        package = [_make_player(age=25, overall=90), _make_pick(66, round_=2)]
        assert analyzer.package_value(package) == pytest.approx(876)


# ── Fairness ─────────────────────────────────────────────────────────

class TestEvaluate:
    def test_fair_within_margin(self, analyzer):
        result = analyzer.evaluate([_make_pick(200)], [_make_pick(180)])
        assert result.fairness == TradeFairness.FAIR
        assert result.difference == pytest.approx(20)

    def test_overpay(self, analyzer):
        result = analyzer.evaluate([_make_player(age=25, overall=90)], [_make_pick(210)])
        assert result.fairness == TradeFairness.OVERPAY
        assert result.my_value == pytest.approx(810)
        assert result.their_value == 210

    def test_underpay(self, analyzer):
        result = analyzer.evaluate([_make_pick(24)], [_make_pick(168)])
        assert result.fairness == TradeFairness.UNDERPAY
        assert result.difference == pytest.approx(-144)

    def test_gap_beyond_margin_is_not_fair(self, analyzer):
        # 15% of 100 is 15; a gap of 16 falls outside
        result = analyzer.evaluate([_make_pick(100)], [_make_pick(84)])
        assert result.fairness == TradeFairness.OVERPAY

    def test_empty_packages(self, analyzer):
        result = analyzer.evaluate([], [])
        assert result.my_value == 0
        assert result.fairness == TradeFairness.UNDERPAY

    def test_roster_players_from_repository(self, analyzer, repository):
        mine = [repository.get_player("3")]
        theirs = [repository.get_player("8")]
        result = analyzer.evaluate(mine, theirs)
        assert result.my_value == pytest.approx(analyzer.asset_value(mine[0]))
        assert result.fairness in set(TradeFairness)
