"""Tests for release and restructure calculations."""

import pytest

from src.contract_engine.cap_management import (
    calculate_dead_cap,
    calculate_restructure,
    execute_player_release,
    max_void_years,
)
from src.contract_engine.contract_math import ContractValidationError
from src.contract_engine.models import Contract, ReleaseType


# ── Helpers ──────────────────────────────────────────────────────────

def _make_contract(**overrides):
    defaults = {
        "years": 4, "salary": 14, "bonus": 10,
        "years_left": 3, "total_value": 66,
    }
    defaults.update(overrides)
    return Contract(**defaults)


# ── Dead cap ─────────────────────────────────────────────────────────

class TestCalculateDeadCap:
    def test_standard_cut_accelerates_everything(self, rookie_deal):
        # 20 / 4 = 5 per year, 3 years left
        impact = calculate_dead_cap(rookie_deal, is_post_june_1=False)
        assert impact.current_year == 2026
        assert impact.dead_cap_current_year == pytest.approx(15)
        assert impact.dead_cap_next_year == 0
        assert impact.savings_current_year == pytest.approx(-6)

    def test_post_june_1_defers_remaining(self, rookie_deal):
        impact = calculate_dead_cap(rookie_deal, is_post_june_1=True)
        assert impact.dead_cap_current_year == pytest.approx(5)
        assert impact.dead_cap_next_year == pytest.approx(10)
        assert impact.savings_current_year == 9

    def test_post_june_1_with_one_year_left_is_standard(self):
        contract = _make_contract(salary=9, bonus=20, years_left=1)
        impact = calculate_dead_cap(contract, is_post_june_1=True)
        assert impact.dead_cap_current_year == pytest.approx(5)
        assert impact.dead_cap_next_year == 0
        assert impact.savings_current_year == pytest.approx(4)

    def test_void_years_extend_proration(self):
        contract = _make_contract(bonus=20, void_years=1)
        impact = calculate_dead_cap(contract, is_post_june_1=False)
        assert impact.dead_cap_current_year == pytest.approx(12)

    def test_explicit_total_length_wins(self):
        contract = _make_contract(bonus=20, total_length=5)
        impact = calculate_dead_cap(contract, is_post_june_1=False, current_year=2027)
        assert impact.current_year == 2027
        assert impact.dead_cap_current_year == pytest.approx(12)

    def test_zero_proration_length_rejected(self):
        contract = _make_contract(total_length=0)
        with pytest.raises(ContractValidationError, match="proration length"):
            calculate_dead_cap(contract, is_post_june_1=False)


# ── Release ──────────────────────────────────────────────────────────

class TestExecutePlayerRelease:
    def test_standard_release(self):
        impact = execute_player_release(_make_contract(), is_post_june_1=False)
        assert impact.release_type == ReleaseType.STANDARD
        assert impact.immediate_dead_cap == pytest.approx(7.5)
        assert impact.deferred_dead_cap == 0
        assert impact.net_savings == pytest.approx(6.5)
        assert "2026" in impact.note

    def test_post_june_1_release(self):
        impact = execute_player_release(_make_contract(), is_post_june_1=True)
        assert impact.release_type == ReleaseType.POST_JUNE_1
        assert impact.immediate_dead_cap == pytest.approx(2.5)
        assert impact.deferred_dead_cap == pytest.approx(5)
        assert impact.net_savings == 14
        assert "2027" in impact.note

    def test_post_june_1_honoured_with_one_year_left(self):
        impact = execute_player_release(_make_contract(years_left=1), is_post_june_1=True)
        assert impact.release_type == ReleaseType.POST_JUNE_1
        assert impact.deferred_dead_cap == pytest.approx(0)


# ── Restructure ──────────────────────────────────────────────────────

class TestRestructure:
    @pytest.mark.parametrize("years_left,expected", [
        (0, 4), (1, 4), (2, 3), (3, 2), (5, 0), (6, 0),
    ])
    def test_max_void_years(self, years_left, expected):
        assert max_void_years(years_left) == expected

    def test_restructure_without_void_years(self):
        impact = calculate_restructure(_make_contract())
        # 14 - 1.21 = 12.79 over 3 years
        assert impact.amount_restructured == pytest.approx(12.79)
        assert impact.proration_term == 3
        assert impact.yearly_proration == pytest.approx(12.79 / 3)
        assert impact.current_year_savings == pytest.approx(12.79 * 2 / 3)
        assert impact.future_dead_cap_exposure == 0

    def test_restructure_with_void_years(self):
        impact = calculate_restructure(_make_contract(), void_years=2)
        assert impact.proration_term == 5
        assert impact.yearly_proration == pytest.approx(2.558)
        assert impact.current_year_savings == pytest.approx(10.232)
        assert impact.future_dead_cap_exposure == pytest.approx(5.116)

    def test_void_years_over_limit_rejected(self):
        with pytest.raises(ContractValidationError, match="between 0 and 2"):
            calculate_restructure(_make_contract(), void_years=3)

    def test_negative_void_years_rejected(self):
        with pytest.raises(ContractValidationError):
            calculate_restructure(_make_contract(), void_years=-1)

    @pytest.mark.parametrize("salary", [1.0, 1.21])
    def test_salary_at_or_below_minimum_rejected(self, salary):
        with pytest.raises(ContractValidationError, match="nothing to restructure"):
            calculate_restructure(_make_contract(salary=salary))

    def test_custom_minimum_salary(self):
        impact = calculate_restructure(_make_contract(), minimum_salary=2.0)
        assert impact.amount_restructured == pytest.approx(12)

    def test_expired_contract_rejected(self):
        with pytest.raises(ContractValidationError, match="expired"):
            calculate_restructure(_make_contract(years_left=0))
