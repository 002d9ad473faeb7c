"""Resolve a called play into a yardage outcome.

Random draws are consumed in a fixed order so a scripted source can
reproduce any result:

1. the roll (turnover / success / failure),
2. on success: the big-play check, the base gain, then the big-play
   bonus if one was rolled,
3. on a failed pass: the sack check, then the sack loss if sacked.

Failed runs and turnovers draw nothing after the roll.
"""

import logging
import math
from typing import Optional

from src.match_engine.config import (
    BASE_GAIN_MIN,
    BASE_GAIN_SPREAD,
    BIG_PLAY_MIN,
    BIG_PLAY_REWARD_DIVISOR,
    BIG_PLAY_SPREAD,
    DEFAULT_TARGET,
    GOAL_LINE,
    SACK_PROBABILITY,
    SACK_SPREAD,
    TURNOVER_PROBABILITY,
)
from src.match_engine.models import EventType, GameEvent, Play, PlayType
from src.match_engine.randomness import RandomSource

logger = logging.getLogger(__name__)

_default_source = RandomSource()


def calculate_outcome(
    play: Play,
    current_ball_position: int,
    rng: Optional[RandomSource] = None,
) -> GameEvent:
    """Simulate one snap of ``play`` from ``current_ball_position``.

    Args:
        play: The play called from the menu.
        current_ball_position: Yards from the offense's own goal line (0-100).
        rng: Source of uniform draws. Defaults to a process-wide source.

    Returns:
        The resulting :class:`GameEvent`. Any gain reaching the goal line is
        clamped to the distance remaining and scored as a touchdown.
    """
    if not 0 <= current_ball_position <= GOAL_LINE:
        raise ValueError(
            f"Ball position must be in [0, {GOAL_LINE}] (got {current_ball_position})"
        )
    rng = rng or _default_source

    roll = rng.random()
    event_type = EventType(play.type.value)

    if roll < TURNOVER_PROBABILITY:
        event_type = EventType.TURNOVER
        yardage = 0
        description = f"INTERCEPTED! The defender jumps the route on the {play.name}."
    elif roll < play.success_rate:
        big_play = rng.random() < (play.reward / BIG_PLAY_REWARD_DIVISOR)
        yardage = math.floor(rng.random() * BASE_GAIN_SPREAD) + BASE_GAIN_MIN
        if big_play:
            yardage += math.floor(rng.random() * BIG_PLAY_SPREAD) + BIG_PLAY_MIN
        verb = "Complete" if play.type == PlayType.PASS else "Run"
        description = f"{verb} for {yardage} yards using {play.name}."
    elif play.type == PlayType.PASS:
        if rng.random() < SACK_PROBABILITY:
            yardage = -math.floor(rng.random() * SACK_SPREAD) - 1
            description = f"SACKED! Loss of {abs(yardage)} on the play."
        else:
            yardage = 0
            description = f"Incomplete pass intended for {DEFAULT_TARGET}."
    else:
        yardage = 0
        description = "Stuffed at the line of scrimmage. No gain."

    is_score = False
    if current_ball_position + yardage >= GOAL_LINE:
        is_score = True
        yardage = GOAL_LINE - current_ball_position
        description = f"TOUCHDOWN! Explosive play on the {play.name}!"

    logger.debug(
        "%s from %d: roll=%.3f -> %s (%+d yds)",
        play.name, current_ball_position, roll, event_type.value, yardage,
    )
    return GameEvent(
        description=description,
        yardage=yardage,
        is_score=is_score,
        type=event_type,
    )
