"""Roster manager - in-memory roster and cap bookkeeping for one team.

Applies the results of the contract engine (signed contracts, release
impacts) to the team's players and cap space.
"""

import logging
from typing import Dict, Iterable, List

from src.contract_engine.cap_management import (
    calculate_restructure,
    execute_player_release,
)
from src.contract_engine.config import MONEY_PRECISION
from src.contract_engine.contract_math import calculate_apy
from src.contract_engine.models import Contract, ReleaseImpact, RestructureImpact
from src.contract_engine.negotiation import NegotiationSession
from src.front_office.config import DEFAULT_CAP_SPACE, USER_TEAM_ID
from src.front_office.models import Player
from src.front_office.repository import LeagueRepository

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Raised when a roster move is not allowed."""

    pass


class RosterManager:
    """Owns a team's players and available cap space."""

    def __init__(self, players: Iterable[Player], cap_space: float):
        self.players: Dict[str, Player] = {p.player_id: p for p in players}
        self.cap_space = cap_space

    @classmethod
    def from_repository(
        cls,
        repository: LeagueRepository,
        team_id: str = USER_TEAM_ID,
        cap_space: float = DEFAULT_CAP_SPACE,
    ) -> "RosterManager":
        """Roster for one team, loaded from the league reference data."""
        return cls(repository.players_for_team(team_id), cap_space)

    def get_player(self, player_id: str) -> Player:
        try:
            return self.players[player_id]
        except KeyError:
            raise RosterError(f"Player {player_id} is not on this roster") from None

    def list_players(self) -> List[Player]:
        return list(self.players.values())

    # ------------------------------------------------------------------
    # Contracts
    # ------------------------------------------------------------------

    def open_negotiation(self, player_id: str) -> NegotiationSession:
        """Start negotiating with a player who has an active demand.

        Raises:
            RosterError: If the player is unknown or not open to negotiation.
        """
        player = self.get_player(player_id)
        if not player.is_negotiable:
            raise RosterError(f"{player.name} is not open to contract negotiation")
        return NegotiationSession(player_id, player.contract_demand, self.cap_space)

    def sign_player(self, player_id: str, contract: Contract) -> Player:
        """Attach a newly signed contract and charge its APY to the cap.

        The player's demand is cleared since they are no longer negotiating.
        """
        player = self.get_player(player_id)
        apy = calculate_apy(contract.salary, contract.years, contract.bonus)

        player.contract = contract
        player.contract_demand = None
        self.cap_space = round(
            self.cap_space - (contract.total_value / contract.years), MONEY_PRECISION
        )

        logger.info(
            "Signed %s: %d yr, $%.2fM APY (cap space now $%.2fM)",
            player.name, contract.years, apy, self.cap_space,
        )
        return player

    def complete_negotiation(self, session: NegotiationSession) -> Player:
        """Sign the contract produced by an accepted negotiation."""
        if session.signed_contract is None:
            raise RosterError(
                f"Negotiation with player {session.player_id} has not been accepted"
            )
        return self.sign_player(session.player_id, session.signed_contract)

    # ------------------------------------------------------------------
    # Cap moves
    # ------------------------------------------------------------------

    def release_player(self, player_id: str, is_post_june_1: bool = False) -> ReleaseImpact:
        """Cut a player, crediting the current-year savings to cap space."""
        player = self.get_player(player_id)
        impact = execute_player_release(player.contract, is_post_june_1)

        del self.players[player_id]
        self.cap_space = round(self.cap_space + impact.net_savings, MONEY_PRECISION)

        logger.info(
            "Released %s (%s): dead cap $%.2fM now, $%.2fM deferred",
            player.name,
            impact.release_type.value,
            impact.immediate_dead_cap,
            impact.deferred_dead_cap,
        )
        return impact

    def preview_restructure(self, player_id: str, void_years: int = 0) -> RestructureImpact:
        """Cap effect of restructuring a player's contract, without applying it."""
        player = self.get_player(player_id)
        return calculate_restructure(player.contract, void_years)
