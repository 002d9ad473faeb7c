"""Down-and-distance transitions and the win-probability signal."""

from dataclasses import replace

from src.match_engine.config import (
    EXPLOSIVE_PLAY_YARDS,
    FIRST_DOWN_DISTANCE,
    GOAL_LINE,
    KICKOFF_BALL_ON,
    MAX_DOWNS,
    MAX_WIN_PROBABILITY,
    MIN_WIN_PROBABILITY,
    TOUCHDOWN_POINTS,
    WIN_PROB_EXPLOSIVE_SWING,
    WIN_PROB_LOSS_SWING,
    WIN_PROB_SCORE_SWING,
)
from src.match_engine.models import GameEvent, GameState


def update_game_state(state: GameState, event: GameEvent) -> GameState:
    """Apply a resolved play to the game state.

    A score credits the home side with a touchdown and automatic extra
    point and restarts at the own 25. Otherwise the ball advances and the
    down increments; gaining the line to gain, or running out of downs,
    resets to 1st and 10. Possession does not change on turnover on downs
    or interceptions.

    Returns:
        A new :class:`GameState`; ``state`` is left untouched.
    """
    if event.is_score:
        return replace(
            state,
            home_score=state.home_score + TOUCHDOWN_POINTS,
            ball_on=KICKOFF_BALL_ON,
            down=1,
            distance=FIRST_DOWN_DISTANCE,
        )

    # Safeties are not modelled; a loss behind the goal line stops at 0.
    # A non-scoring event never carries the ball past the opponent goal line.
    ball_on = min(GOAL_LINE, max(0, state.ball_on + event.yardage))
    down = state.down + 1
    distance = state.distance - event.yardage

    if distance <= 0:
        down = 1
        distance = FIRST_DOWN_DISTANCE

    # Turnover on downs
    if down > MAX_DOWNS:
        down = 1
        distance = FIRST_DOWN_DISTANCE

    return replace(state, ball_on=ball_on, down=down, distance=distance)


def calculate_win_probability(current_prob: float, event: GameEvent) -> float:
    """Nudge the displayed win probability after a play, bounded to [1, 99]."""
    if event.is_score:
        adjustment = WIN_PROB_SCORE_SWING
    elif event.yardage > EXPLOSIVE_PLAY_YARDS:
        adjustment = WIN_PROB_EXPLOSIVE_SWING
    elif event.yardage < 0:
        adjustment = WIN_PROB_LOSS_SWING
    else:
        adjustment = 0

    return min(MAX_WIN_PROBABILITY, max(MIN_WIN_PROBABILITY, current_prob + adjustment))
