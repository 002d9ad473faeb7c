from src.contract_engine.cap_management import (
    calculate_dead_cap,
    calculate_restructure,
    execute_player_release,
    max_void_years,
)
from src.contract_engine.contract_math import (
    ContractValidationError,
    calculate_apy,
    calculate_cap_hit,
    calculate_total_value,
    create_contract_from_offer,
    validate_cap_space,
)
from src.contract_engine.models import (
    Contract,
    ContractDemand,
    ContractOffer,
    DealStatus,
    InterestType,
    OfferEvaluation,
)
from src.contract_engine.negotiation import (
    NegotiationSession,
    evaluate_contract_offer,
    get_interest_score,
)

__all__ = [
    "Contract",
    "ContractDemand",
    "ContractOffer",
    "ContractValidationError",
    "DealStatus",
    "InterestType",
    "NegotiationSession",
    "OfferEvaluation",
    "calculate_apy",
    "calculate_cap_hit",
    "calculate_dead_cap",
    "calculate_restructure",
    "calculate_total_value",
    "create_contract_from_offer",
    "evaluate_contract_offer",
    "execute_player_release",
    "get_interest_score",
    "max_void_years",
    "validate_cap_space",
]
