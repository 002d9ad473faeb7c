from src.match_engine.game_state import calculate_win_probability, update_game_state
from src.match_engine.match_controller import (
    MatchController,
    PlayResult,
    UnknownPlayError,
)
from src.match_engine.models import EventType, GameEvent, GameState, Play, PlayType, Possession
from src.match_engine.play_outcome import calculate_outcome
from src.match_engine.randomness import RandomSource

__all__ = [
    "EventType",
    "GameEvent",
    "GameState",
    "MatchController",
    "Play",
    "PlayResult",
    "PlayType",
    "Possession",
    "RandomSource",
    "UnknownPlayError",
    "calculate_outcome",
    "calculate_win_probability",
    "update_game_state",
]
