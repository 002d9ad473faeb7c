"""Contract value arithmetic: APY, total value, cap hit and signing.

All monetary amounts are floats in millions.
"""

from src.contract_engine.config import MONEY_PRECISION
from src.contract_engine.models import Contract, ContractOffer


class ContractValidationError(Exception):
    """Raised when contract terms are malformed or an offer breaks the rules."""

    pass


def _check_terms(salary: float, years: int, bonus: float) -> None:
    """Fail fast on terms no real contract can have."""
    if years < 0:
        raise ContractValidationError(f"Contract years cannot be negative (got {years})")
    if salary < 0:
        raise ContractValidationError(f"Salary cannot be negative (got {salary})")
    if bonus < 0:
        raise ContractValidationError(f"Signing bonus cannot be negative (got {bonus})")


def calculate_total_value(salary: float, years: int, bonus: float) -> float:
    """Total value of a contract: ``salary * years + bonus``."""
    _check_terms(salary, years, bonus)
    return (salary * years) + bonus


def calculate_apy(salary: float, years: int, bonus: float) -> float:
    """Average value per year of a contract.

    Args:
        salary: Annual salary in millions.
        years: Contract length. Must be at least 1.
        bonus: Total signing bonus in millions.

    Returns:
        ``(salary * years + bonus) / years``.

    Raises:
        ContractValidationError: If ``years`` is zero or any term is negative.
    """
    if years == 0:
        raise ContractValidationError("Cannot compute APY for a zero-year contract")
    return calculate_total_value(salary, years, bonus) / years


def validate_cap_space(offer: ContractOffer, available_cap_space: float) -> bool:
    """Whether the offer's APY fits under the available cap space."""
    apy = calculate_apy(offer.salary, offer.years, offer.bonus)
    return apy <= available_cap_space


def create_contract_from_offer(offer: ContractOffer) -> Contract:
    """Build the contract a player signs when an offer is accepted.

    Salary and bonus are rounded individually. The total value is rounded
    from the offer's unrounded total, so it can differ by a cent from
    ``salary * years + bonus`` of the rounded fields.
    """
    if offer.years < 1:
        raise ContractValidationError(
            f"A signed contract needs at least one year (got {offer.years})"
        )
    total_value = calculate_total_value(offer.salary, offer.years, offer.bonus)

    return Contract(
        years=offer.years,
        salary=round(offer.salary, MONEY_PRECISION),
        bonus=round(offer.bonus, MONEY_PRECISION),
        years_left=offer.years,
        total_value=round(total_value, MONEY_PRECISION),
    )


def calculate_cap_hit(contract: Contract, year: int = 1) -> float:
    """Cap hit for a contract year.

    The negotiation engine charges the APY every year; ``year`` is accepted
    for callers that iterate over contract years but does not change the
    result. Prorated bonus accounting lives in :mod:`cap_management`.
    """
    if year < 1:
        raise ContractValidationError(f"Contract years are 1-indexed (got {year})")
    return calculate_apy(contract.salary, contract.years, contract.bonus)
