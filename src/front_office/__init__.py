from src.front_office.models import DraftPick, DraftProspect, Player, Position
from src.front_office.repository import LeagueRepository
from src.front_office.roster_manager import RosterError, RosterManager
from src.front_office.scouting import ScoutingBudget
from src.front_office.trade_analyzer import (
    TradeAnalyzer,
    TradeEvaluation,
    TradeFairness,
)

__all__ = [
    "DraftPick",
    "DraftProspect",
    "LeagueRepository",
    "Player",
    "Position",
    "RosterError",
    "RosterManager",
    "ScoutingBudget",
    "TradeAnalyzer",
    "TradeEvaluation",
    "TradeFairness",
]
