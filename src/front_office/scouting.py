"""Scouting department hours budget."""

import logging
from typing import List

from src.front_office.config import SCOUTING_COST_PER_PROSPECT, SCOUTING_HOURS

logger = logging.getLogger(__name__)


class ScoutingBudget:
    """Tracks the hours left to spend scouting draft prospects."""

    def __init__(
        self,
        hours: int = SCOUTING_HOURS,
        cost_per_prospect: int = SCOUTING_COST_PER_PROSPECT,
    ):
        if hours < 0 or cost_per_prospect <= 0:
            raise ValueError("Scouting hours must be >= 0 and cost must be positive")
        self.hours = hours
        self.cost_per_prospect = cost_per_prospect
        self.scouted_ids: List[str] = []

    def can_scout(self, prospect_id: str) -> bool:
        return (
            self.hours >= self.cost_per_prospect
            and prospect_id not in self.scouted_ids
        )

    def scout(self, prospect_id: str) -> bool:
        """Spend hours on a prospect. Returns False if nothing was spent."""
        if not self.can_scout(prospect_id):
            logger.debug("Cannot scout %s (%dh left)", prospect_id, self.hours)
            return False
        self.hours -= self.cost_per_prospect
        self.scouted_ids.append(prospect_id)
        logger.info("Scouted %s (%dh remaining)", prospect_id, self.hours)
        return True

    def is_scouted(self, prospect_id: str) -> bool:
        return prospect_id in self.scouted_ids
