"""Interest scoring, offer evaluation and the negotiation session."""

import logging
from typing import Optional

from src.contract_engine.config import (
    ACCEPTANCE_THRESHOLD,
    BELOW_MARKET_THRESHOLD,
    CLOSE_THRESHOLD,
    MAX_INTEREST_SCORE,
    MIN_INTEREST_SCORE,
    OFFER_BONUS_RANGE,
    OFFER_SALARY_RANGE,
    OFFER_YEARS_RANGE,
    OPENING_BONUS_FRACTION,
    OPENING_SALARY_FRACTION,
    YEAR_MISMATCH_PENALTY,
)
from src.contract_engine.contract_math import (
    ContractValidationError,
    calculate_apy,
    calculate_total_value,
    create_contract_from_offer,
    validate_cap_space,
)
from src.contract_engine.models import (
    Contract,
    ContractDemand,
    ContractOffer,
    DealStatus,
    OfferEvaluation,
)

logger = logging.getLogger(__name__)

_SLIDER_RANGES = {
    "years": OFFER_YEARS_RANGE,
    "salary": OFFER_SALARY_RANGE,
    "bonus": OFFER_BONUS_RANGE,
}


def get_interest_score(offer: ContractOffer, demand: ContractDemand) -> float:
    """How interested a player is in an offer, from 0 to 100.

    The score is the offer's total value as a percentage of the demand's,
    minus ``YEAR_MISMATCH_PENALTY`` points for every year the offer is
    longer or shorter than requested.

    Raises:
        ContractValidationError: If the demand has no value to compare against.
    """
    demand_value = calculate_total_value(demand.salary, demand.years, demand.bonus)
    offer_value = calculate_total_value(offer.salary, offer.years, offer.bonus)
    if demand_value <= 0:
        raise ContractValidationError("Contract demand must have a positive total value")

    score = (offer_value / demand_value) * 100
    score -= abs(offer.years - demand.years) * YEAR_MISMATCH_PENALTY

    return min(MAX_INTEREST_SCORE, max(MIN_INTEREST_SCORE, score))


def evaluate_contract_offer(score: float) -> OfferEvaluation:
    """Map an interest score to a deal status and agent feedback."""
    if score >= ACCEPTANCE_THRESHOLD:
        return OfferEvaluation(
            status=DealStatus.ACCEPTED,
            feedback="The client is thrilled. We have a deal!",
            score=score,
        )
    if score >= CLOSE_THRESHOLD:
        return OfferEvaluation(
            status=DealStatus.OPEN,
            feedback=(
                "We're close. Increase the guaranteed money (bonus) "
                "slightly and we'll sign."
            ),
            score=score,
        )
    if score >= BELOW_MARKET_THRESHOLD:
        return OfferEvaluation(
            status=DealStatus.OPEN,
            feedback=(
                "This is below market value. The years look okay, but the "
                "APY needs to come up significantly."
            ),
            score=score,
        )
    return OfferEvaluation(
        status=DealStatus.OPEN,
        feedback="This offer is insulting. We are far apart.",
        score=score,
    )


class NegotiationSession:
    """A single negotiation between the front office and one player.

    Holds the offer currently on the table, checks it against the slider
    bounds and the team's cap space, and turns an accepted offer into a
    signed :class:`Contract`. The session never touches the roster; the
    caller applies ``signed_contract`` to its own player store.
    """

    def __init__(
        self,
        player_id: str,
        demand: Optional[ContractDemand],
        cap_space: float,
    ):
        self.player_id = player_id
        self.demand = demand
        self.cap_space = cap_space
        self.offer = self._opening_offer(demand)
        self.status = DealStatus.OPEN
        self.feedback: Optional[str] = None
        self.signed_contract: Optional[Contract] = None

    @staticmethod
    def _opening_offer(demand: Optional[ContractDemand]) -> ContractOffer:
        if demand is None:
            return ContractOffer(years=OFFER_YEARS_RANGE[0], salary=1.0, bonus=0.0)
        return ContractOffer(
            years=demand.years,
            salary=demand.salary * OPENING_SALARY_FRACTION,
            bonus=demand.bonus * OPENING_BONUS_FRACTION,
        )

    # ------------------------------------------------------------------
    # Offer state
    # ------------------------------------------------------------------

    def update_offer(
        self,
        years: Optional[int] = None,
        salary: Optional[float] = None,
        bonus: Optional[float] = None,
    ) -> ContractOffer:
        """Move one or more offer sliders.

        Raises:
            ContractValidationError: If a value is outside its slider range
                or the deal is already done.
        """
        if self.status == DealStatus.ACCEPTED:
            raise ContractValidationError("Offer is locked: contract already signed")

        updates = {
            name: value
            for name, value in (("years", years), ("salary", salary), ("bonus", bonus))
            if value is not None
        }
        # Validate everything before touching the offer
        for name, value in updates.items():
            _check_range(name, value, _SLIDER_RANGES[name])
        for name, value in updates.items():
            setattr(self.offer, name, value)
        return self.offer

    @property
    def total_value(self) -> float:
        return calculate_total_value(self.offer.salary, self.offer.years, self.offer.bonus)

    @property
    def apy(self) -> float:
        return calculate_apy(self.offer.salary, self.offer.years, self.offer.bonus)

    @property
    def interest_score(self) -> float:
        """Live interest in the current offer (0 when the player has no demand)."""
        if self.demand is None:
            return 0.0
        return get_interest_score(self.offer, self.demand)

    @property
    def can_submit(self) -> bool:
        """Whether the current offer fits under the cap."""
        return validate_cap_space(self.offer, self.cap_space)

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit_offer(self) -> OfferEvaluation:
        """Present the current offer to the player's agent.

        Returns:
            The evaluation; on acceptance ``signed_contract`` is populated.

        Raises:
            ContractValidationError: If the deal is already signed or the
                offer's APY exceeds the available cap space.
        """
        if self.status == DealStatus.ACCEPTED:
            raise ContractValidationError("Contract already signed")

        if not self.can_submit:
            logger.warning(
                "Offer to %s rejected: APY %.2f exceeds cap space %.2f",
                self.player_id, self.apy, self.cap_space,
            )
            raise ContractValidationError(
                f"Offer APY ${self.apy:.2f}M exceeds available cap space "
                f"${self.cap_space:.2f}M"
            )

        evaluation = evaluate_contract_offer(self.interest_score)
        self.status = evaluation.status
        self.feedback = evaluation.feedback

        if evaluation.status == DealStatus.ACCEPTED:
            self.signed_contract = create_contract_from_offer(self.offer)
            logger.info(
                "Player %s accepted %d yr / $%.2fM total (score %.1f)",
                self.player_id,
                self.signed_contract.years,
                self.signed_contract.total_value,
                evaluation.score,
            )
        else:
            logger.debug(
                "Player %s countered offer (score %.1f)", self.player_id, evaluation.score
            )

        return evaluation


def _check_range(name: str, value: float, bounds) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ContractValidationError(
            f"Offer {name} {value} is outside the allowed range [{low}, {high}]"
        )
