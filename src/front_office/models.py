"""Roster and draft data models for the front office."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.contract_engine.models import Contract, ContractDemand


class Position(str, Enum):
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    OL = "OL"
    DL = "DL"
    LB = "LB"
    CB = "CB"
    S = "S"
    K = "K"


@dataclass
class Player:
    """A rostered player or free agent.

    ``contract_demand`` is only set while a team may negotiate with the
    player (expiring contract or free agent).
    """

    player_id: str
    name: str
    position: Position
    age: int
    overall: int
    team_id: str
    contract: Contract
    contract_demand: Optional[ContractDemand] = None
    morale: int = 100
    fatigue: int = 100  # 100 is fresh
    archetype: str = ""
    development_trait: str = "Normal"

    @property
    def is_negotiable(self) -> bool:
        return self.contract_demand is not None


@dataclass
class DraftProspect:
    prospect_id: str
    name: str
    position: Position
    school: str
    projected_round: int
    scouting_grade: int
    forty_yard: float
    bench: int


@dataclass
class DraftPick:
    round: int
    pick_number: int
    original_team_id: str
    current_team_id: str
    year: int
    value: float  # Rich Hill chart value
