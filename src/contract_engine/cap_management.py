"""Release and restructure calculations for roster management.

Unlike :func:`calculate_cap_hit`, these spread the signing bonus evenly
across the contract's proration length (original years plus void years),
which is how dead money is charged when a player is cut.
"""

from src.contract_engine.config import (
    DEFAULT_CAP_YEAR,
    MAX_PRORATION_YEARS,
    MAX_VOID_YEARS,
    VETERAN_MINIMUM_SALARY,
)
from src.contract_engine.contract_math import ContractValidationError
from src.contract_engine.models import (
    Contract,
    DeadCapImpact,
    ReleaseImpact,
    ReleaseType,
    RestructureImpact,
)


def _yearly_proration(contract: Contract) -> float:
    if contract.proration_length <= 0:
        raise ContractValidationError(
            "Contract has no proration length; cannot spread the signing bonus"
        )
    if contract.years_left < 0:
        raise ContractValidationError(
            f"years_left cannot be negative (got {contract.years_left})"
        )
    return contract.bonus / contract.proration_length


def calculate_dead_cap(
    contract: Contract,
    is_post_june_1: bool,
    current_year: int = DEFAULT_CAP_YEAR,
) -> DeadCapImpact:
    """Dead money and savings from cutting a player.

    A standard cut accelerates all remaining proration into the current
    year. A post-June-1 designation (only meaningful with more than one
    year left) charges one year of proration now and defers the rest, so
    the full salary is saved immediately.
    """
    yearly_proration = _yearly_proration(contract)
    remaining_proration = yearly_proration * contract.years_left

    if is_post_june_1 and contract.years_left > 1:
        return DeadCapImpact(
            current_year=current_year,
            dead_cap_current_year=yearly_proration,
            dead_cap_next_year=remaining_proration - yearly_proration,
            savings_current_year=contract.salary,
        )

    return DeadCapImpact(
        current_year=current_year,
        dead_cap_current_year=remaining_proration,
        dead_cap_next_year=0.0,
        savings_current_year=contract.salary - remaining_proration,
    )


def execute_player_release(contract: Contract, is_post_june_1: bool) -> ReleaseImpact:
    """Release summary for the confirm-cut dialog.

    The designation is honoured as chosen, even with a single year left.
    """
    yearly_proration = _yearly_proration(contract)
    remaining_proration = yearly_proration * contract.years_left

    if is_post_june_1:
        return ReleaseImpact(
            release_type=ReleaseType.POST_JUNE_1,
            immediate_dead_cap=yearly_proration,
            deferred_dead_cap=remaining_proration - yearly_proration,
            net_savings=contract.salary,
            note=(
                f"Savings applied to {DEFAULT_CAP_YEAR} cap; "
                f"balance moves to {DEFAULT_CAP_YEAR + 1}."
            ),
        )

    return ReleaseImpact(
        release_type=ReleaseType.STANDARD,
        immediate_dead_cap=remaining_proration,
        deferred_dead_cap=0.0,
        net_savings=contract.salary - remaining_proration,
        note=f"Entire dead cap hit taken in {DEFAULT_CAP_YEAR}.",
    )


def max_void_years(years_left: int) -> int:
    """Void years that keep total proration within the league limit."""
    return max(0, min(MAX_VOID_YEARS, MAX_PRORATION_YEARS - years_left))


def calculate_restructure(
    contract: Contract,
    void_years: int = 0,
    minimum_salary: float = VETERAN_MINIMUM_SALARY,
) -> RestructureImpact:
    """Convert base salary above the minimum into prorated signing bonus.

    Args:
        contract: The contract being restructured.
        void_years: Dummy years added to spread the proration further.
        minimum_salary: Base salary left in place.

    Returns:
        A :class:`RestructureImpact`.

    Raises:
        ContractValidationError: If ``void_years`` is outside
            ``[0, max_void_years(years_left)]``, the contract has no years
            left to spread the bonus over, or the salary is already at or
            below ``minimum_salary``.
    """
    limit = max_void_years(contract.years_left)
    if not 0 <= void_years <= limit:
        raise ContractValidationError(
            f"void_years must be between 0 and {limit} (got {void_years})"
        )

    proration_term = contract.years_left + void_years
    if proration_term <= 0:
        raise ContractValidationError("Cannot restructure an expired contract")

    amount = contract.salary - minimum_salary
    if amount <= 0:
        raise ContractValidationError(
            f"Salary ${contract.salary:.2f}M is already at or below the "
            f"${minimum_salary:.2f}M minimum; nothing to restructure"
        )
    yearly_proration = amount / proration_term

    return RestructureImpact(
        void_years=void_years,
        amount_restructured=amount,
        proration_term=proration_term,
        yearly_proration=yearly_proration,
        current_year_savings=amount - yearly_proration,
        future_dead_cap_exposure=yearly_proration * void_years,
    )
