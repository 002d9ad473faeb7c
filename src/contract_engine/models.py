"""Contract data models shared by negotiation and cap management."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InterestType(str, Enum):
    """What a player values most when negotiating."""

    SECURITY = "Security"
    MONEY = "Money"
    CHAMPIONSHIP = "Championship"
    LOYALTY = "Loyalty"


class DealStatus(str, Enum):
    """State of a negotiation after an offer is evaluated."""

    OPEN = "OPEN"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"  # Reserved; offer evaluation never produces it


class ReleaseType(str, Enum):
    STANDARD = "STANDARD"
    POST_JUNE_1 = "POST_JUNE_1"


@dataclass
class ContractOffer:
    """An offer on the table during a negotiation."""

    years: int
    salary: float  # Millions per year
    bonus: float  # Total signing bonus (millions)


@dataclass
class ContractDemand:
    """What a player's agent is asking for."""

    years: int
    salary: float
    bonus: float
    interest: Optional[InterestType] = None
    market_value: Optional[float] = None


@dataclass
class Contract:
    """A signed contract owned by a single player."""

    years: int
    salary: float
    bonus: float
    years_left: int
    total_value: float
    cap_hit: Optional[float] = None
    dead_cap: Optional[float] = None
    void_years: int = 0
    total_length: Optional[int] = None  # Original length + void years
    guaranteed: Optional[float] = None
    start_year: Optional[int] = None

    @property
    def proration_length(self) -> int:
        """Number of league years the signing bonus is spread across."""
        if self.total_length is not None:
            return self.total_length
        return self.years + self.void_years

    @property
    def is_expiring(self) -> bool:
        return self.years_left <= 0


@dataclass
class OfferEvaluation:
    """Outcome of evaluating an interest score."""

    status: DealStatus
    feedback: str
    score: Optional[float] = None


@dataclass
class DeadCapImpact:
    """Cap consequences of cutting a player in a given league year."""

    current_year: int
    dead_cap_current_year: float
    dead_cap_next_year: float
    savings_current_year: float


@dataclass
class ReleaseImpact:
    """Labelled release summary shown before confirming a cut."""

    release_type: ReleaseType
    immediate_dead_cap: float
    deferred_dead_cap: float
    net_savings: float
    note: str


@dataclass
class RestructureImpact:
    """Cap effect of converting base salary into prorated bonus."""

    void_years: int
    amount_restructured: float
    proration_term: int
    yearly_proration: float
    current_year_savings: float
    future_dead_cap_exposure: float
