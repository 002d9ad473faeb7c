"""Data models for the match simulation engine."""

from dataclasses import dataclass, field
from enum import Enum

from src.match_engine.config import (
    FIRST_DOWN_DISTANCE,
    GOAL_LINE,
    KICKOFF_BALL_ON,
    MIDFIELD,
    START_CLOCK,
    START_QUARTER,
)


class PlayType(str, Enum):
    PASS = "Pass"
    RUN = "Run"


class EventType(str, Enum):
    PASS = "Pass"
    RUN = "Run"
    TURNOVER = "Turnover"
    SPECIAL = "Special"


class Possession(str, Enum):
    HOME = "HOME"
    AWAY = "AWAY"


@dataclass(frozen=True)
class Play:
    """A play from the offensive play-call menu."""

    play_id: str
    name: str
    type: PlayType
    formation: str
    risk: int  # 1-10
    reward: int  # 1-10
    success_rate: float  # 0-1

    def __post_init__(self):
        if not 0.0 <= self.success_rate <= 1.0:
            raise ValueError(
                f"success_rate must be in [0, 1] (got {self.success_rate}) for {self.name!r}"
            )
        for attr in ("risk", "reward"):
            value = getattr(self, attr)
            if not 1 <= value <= 10:
                raise ValueError(f"{attr} must be in [1, 10] (got {value}) for {self.name!r}")


@dataclass
class GameEvent:
    """Outcome of a single resolved play."""

    description: str
    yardage: int
    is_score: bool
    type: EventType


@dataclass
class GameState:
    """Scoreboard and down-and-distance for the drive in progress.

    ``ball_on`` is measured in yards from the offense's own goal line.
    """

    down: int
    distance: int
    ball_on: int
    quarter: int = START_QUARTER
    time: str = START_CLOCK
    home_score: int = 0
    away_score: int = 0
    possession: Possession = field(default=Possession.HOME)

    @classmethod
    def initial(cls) -> "GameState":
        """1st and 10 at the offense's own 25 in the first quarter."""
        return cls(down=1, distance=FIRST_DOWN_DISTANCE, ball_on=KICKOFF_BALL_ON)

    def field_position_label(self) -> str:
        """Scoreboard label such as ``OWN 25`` or ``OPP 35``."""
        if self.ball_on < MIDFIELD:
            return f"OWN {self.ball_on}"
        if self.ball_on == MIDFIELD:
            return "MIDFIELD"
        return f"OPP {GOAL_LINE - self.ball_on}"

    def down_and_distance(self) -> str:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.down, "th")
        return f"{self.down}{suffix} & {self.distance}"
