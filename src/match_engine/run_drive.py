"""Simulate a series of play calls from the command line.

Usage:
    python -m src.match_engine.run_drive [plays] [seed]

Examples:
    python -m src.match_engine.run_drive 12
    python -m src.match_engine.run_drive 12 42
"""

import logging
import sys
from typing import Optional

from src.front_office.repository import LeagueRepository
from src.logging_config import setup_logging
from src.match_engine.match_controller import MatchController
from src.match_engine.randomness import RandomSource

logger = logging.getLogger(__name__)


def run_drive(
    num_plays: int = 12,
    seed: Optional[int] = None,
    repository: Optional[LeagueRepository] = None,
) -> MatchController:
    """Call ``num_plays`` plays, cycling through the play menu in order.

    Args:
        num_plays: Number of play calls to simulate.
        seed: Seed for the random source; ``None`` for a fresh game.
        repository: Reference data supplying the play menu.
            Defaults to the built-in mock league.

    Returns:
        The controller, holding the final state and play history.
    """
    if num_plays < 1:
        raise ValueError(f"num_plays must be at least 1 (got {num_plays})")

    repository = repository or LeagueRepository.from_defaults()
    menu = repository.play_menu()
    controller = MatchController(menu, rng=RandomSource(seed))

    logger.info("Starting drive: %d plays, seed=%s", num_plays, seed)
    for i in range(num_plays):
        controller.call_play(menu[i % len(menu)].play_id)

    summary = controller.get_drive_summary()
    logger.info(
        "Drive complete: %d plays, %d yards, %d TD, %d TO, score %d-%d, win prob %d%%",
        summary["plays"],
        summary["total_yards"],
        summary["touchdowns"],
        summary["turnovers"],
        summary["home_score"],
        summary["away_score"],
        summary["win_probability"],
    )
    return controller


if __name__ == "__main__":
    setup_logging()

    num_plays = int(sys.argv[1]) if len(sys.argv) > 1 else 12
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        controller = run_drive(num_plays, seed)
        print(f"Final score: {controller.state.home_score}-{controller.state.away_score}")
    except Exception:
        logger.exception("Drive simulation failed")
        sys.exit(1)
