"""Match controller - resolves play calls and keeps the play-by-play log."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from src.match_engine.config import INITIAL_WIN_PROBABILITY
from src.match_engine.game_state import calculate_win_probability, update_game_state
from src.match_engine.models import EventType, GameEvent, GameState, Play
from src.match_engine.play_outcome import calculate_outcome
from src.match_engine.randomness import RandomSource

logger = logging.getLogger(__name__)


class UnknownPlayError(KeyError):
    """Raised when a play id is not on the play-call menu."""

    pass


@dataclass
class PlayResult:
    """Everything the scoreboard needs after one play call."""

    play: Play
    event: GameEvent
    state: GameState
    win_probability: float


class MatchController:
    """Drives a match one play call at a time.

    Coordinates play resolution (``calculate_outcome``), the down-and-distance
    transition (``update_game_state``) and the win-probability signal. There
    is no terminal state: the caller stops calling plays when it is done.
    """

    def __init__(
        self,
        play_menu: Iterable[Play],
        rng: Optional[RandomSource] = None,
        state: Optional[GameState] = None,
        win_probability: float = INITIAL_WIN_PROBABILITY,
    ):
        play_menu = list(play_menu)
        if not play_menu:
            raise ValueError("play_menu cannot be empty")
        self.plays: Dict[str, Play] = {}
        for play in play_menu:
            if play.play_id in self.plays:
                raise ValueError(f"Duplicate play_id in play_menu: {play.play_id}")
            self.plays[play.play_id] = play
        self.rng = rng or RandomSource()
        self.state = state or GameState.initial()
        self.win_probability = win_probability
        self.play_history: List[GameEvent] = []

    def call_play(self, play_id: str) -> PlayResult:
        """Run the play with ``play_id`` from the current field position.

        Raises:
            UnknownPlayError: If the play is not on the menu.
        """
        play = self.plays.get(play_id)
        if play is None:
            logger.warning("Unknown play called: %s", play_id)
            raise UnknownPlayError(play_id)

        event = calculate_outcome(play, self.state.ball_on, self.rng)
        self.play_history.insert(0, event)
        self.state = update_game_state(self.state, event)
        self.win_probability = calculate_win_probability(self.win_probability, event)

        logger.info(
            "%s: %s -> %s at %s (win prob %d%%)",
            play.name,
            event.description,
            self.state.down_and_distance(),
            self.state.field_position_label(),
            self.win_probability,
        )

        return PlayResult(
            play=play,
            event=event,
            state=self.state,
            win_probability=self.win_probability,
        )

    @property
    def last_event(self) -> Optional[GameEvent]:
        return self.play_history[0] if self.play_history else None

    def get_play_menu(self) -> List[Play]:
        return list(self.plays.values())

    def get_drive_summary(self) -> Dict:
        """Totals over the play history, keyed for the stats panel."""
        total_yards = sum(event.yardage for event in self.play_history)
        return {
            "plays": len(self.play_history),
            "total_yards": total_yards,
            "touchdowns": sum(1 for event in self.play_history if event.is_score),
            "turnovers": sum(
                1 for event in self.play_history if event.type == EventType.TURNOVER
            ),
            "home_score": self.state.home_score,
            "away_score": self.state.away_score,
            "win_probability": self.win_probability,
        }
