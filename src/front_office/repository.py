"""Read-only league reference data backed by pandas DataFrames.

Players, the offensive play menu, the draft class and draft picks are
injected here once and queried by the front office and the match engine.
Query methods hand back fresh model objects, so callers can mutate what
they receive without touching the reference tables.
"""

import json
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from src.contract_engine.models import Contract, ContractDemand, InterestType
from src.front_office.config import (
    DEFAULT_DRAFT_CLASS,
    DEFAULT_DRAFT_PICKS,
    DEFAULT_PLAYERS,
    DEFAULT_PLAYS,
    DEFAULT_TEAMS,
    FREE_AGENT_TEAM_ID,
    LEAGUE_FILE,
)
from src.front_office.models import DraftPick, DraftProspect, Player, Position
from src.match_engine.models import Play, PlayType

logger = logging.getLogger(__name__)

# Keys expected in a reference data payload
_REQUIRED_KEYS = {"players", "plays", "draft_class"}


def _safe(val, default=None):
    """Return *default* when *val* is NaN/None, else the value."""
    if val is None:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    return val


def _contract_from_dict(data: Dict) -> Contract:
    return Contract(
        years=int(data["years"]),
        salary=float(data["salary"]),
        bonus=float(data["bonus"]),
        years_left=int(data["years_left"]),
        total_value=float(data["total_value"]),
        void_years=int(data.get("void_years", 0)),
        total_length=data.get("total_length"),
    )


def _demand_from_dict(data) -> Optional[ContractDemand]:
    if not isinstance(data, dict):
        return None
    interest = data.get("interest")
    return ContractDemand(
        years=int(data["years"]),
        salary=float(data["salary"]),
        bonus=float(data["bonus"]),
        interest=InterestType(interest) if interest else None,
        market_value=data.get("market_value"),
    )


class LeagueRepository:
    """Reference datasets for one league, held as DataFrames."""

    def __init__(
        self,
        players: List[Dict],
        plays: List[Dict],
        draft_class: List[Dict],
        draft_picks: Optional[List[Dict]] = None,
        teams: Optional[List[Dict]] = None,
    ):
        self.players_df = pd.DataFrame(players)
        self.plays_df = pd.DataFrame(plays)
        self.draft_class_df = pd.DataFrame(draft_class)
        self.draft_picks_df = pd.DataFrame(draft_picks or [])
        self.teams_df = pd.DataFrame(teams or [])

        for name, df, key in (
            ("players", self.players_df, "player_id"),
            ("plays", self.plays_df, "play_id"),
            ("draft_class", self.draft_class_df, "prospect_id"),
        ):
            if not df.empty and df[key].duplicated().any():
                dupes = df.loc[df[key].duplicated(), key].tolist()
                raise ValueError(f"Duplicate {key} values in {name}: {dupes}")

        logger.debug(
            "Loaded reference data: %d players, %d plays, %d prospects, %d picks",
            len(self.players_df), len(self.plays_df),
            len(self.draft_class_df), len(self.draft_picks_df),
        )

    @classmethod
    def from_defaults(cls) -> "LeagueRepository":
        """Repository seeded with the built-in mock league."""
        return cls(
            players=DEFAULT_PLAYERS,
            plays=DEFAULT_PLAYS,
            draft_class=DEFAULT_DRAFT_CLASS,
            draft_picks=DEFAULT_DRAFT_PICKS,
            teams=DEFAULT_TEAMS,
        )

    @classmethod
    def from_json(cls, path: Optional[Path] = None) -> "LeagueRepository":
        """Load reference data from a JSON file (default: ``data/reference/league.json``).

        The file holds ``players``, ``plays`` and ``draft_class`` lists, and
        optionally ``draft_picks`` and ``teams``, in the same record shape as
        the defaults in :mod:`src.front_office.config`.
        """
        path = Path(path) if path is not None else LEAGUE_FILE
        if not path.exists():
            raise FileNotFoundError(f"No reference data found at {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        missing = _REQUIRED_KEYS - set(data)
        if missing:
            raise ValueError(f"Malformed reference data file {path}: missing keys {missing}")

        logger.info("Loaded reference data from %s", path)
        return cls(
            players=data["players"],
            plays=data["plays"],
            draft_class=data["draft_class"],
            draft_picks=data.get("draft_picks"),
            teams=data.get("teams"),
        )

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def get_player(self, player_id: str) -> Player:
        """Look up one player.

        Raises:
            KeyError: If no player has this id.
        """
        rows = self.players_df[self.players_df["player_id"] == player_id]
        if rows.empty:
            raise KeyError(f"Player {player_id} not found")
        return self._row_to_player(rows.iloc[0])

    def all_players(self) -> List[Player]:
        return [self._row_to_player(row) for _, row in self.players_df.iterrows()]

    def players_for_team(self, team_id: str) -> List[Player]:
        rows = self.players_df[self.players_df["team_id"] == team_id]
        return [self._row_to_player(row) for _, row in rows.iterrows()]

    def free_agents(self) -> List[Player]:
        return self.players_for_team(FREE_AGENT_TEAM_ID)

    def players_with_demands(self) -> List[Player]:
        """Players currently open to negotiation."""
        return [p for p in self.all_players() if p.is_negotiable]

    # ------------------------------------------------------------------
    # Plays
    # ------------------------------------------------------------------

    def play_menu(self) -> List[Play]:
        return [self._row_to_play(row) for _, row in self.plays_df.iterrows()]

    def get_play(self, play_id: str) -> Play:
        rows = self.plays_df[self.plays_df["play_id"] == play_id]
        if rows.empty:
            raise KeyError(f"Play {play_id} not found")
        return self._row_to_play(rows.iloc[0])

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------

    def draft_board(self, max_round: Optional[int] = None) -> List[DraftProspect]:
        """Prospects ordered by scouting grade, best first.

        Args:
            max_round: If provided, only prospects projected in this round
                or earlier.
        """
        df = self.draft_class_df
        if df.empty:
            return []
        if max_round is not None:
            df = df[df["projected_round"] <= max_round]
        df = df.sort_values("scouting_grade", ascending=False, kind="stable")
        return [self._row_to_prospect(row) for _, row in df.iterrows()]

    def draft_picks_for_team(self, team_id: str) -> List[DraftPick]:
        """Picks currently owned by ``team_id``, earliest first."""
        df = self.draft_picks_df
        if df.empty:
            return []
        df = df[df["current_team_id"] == team_id].sort_values(
            ["year", "round", "pick_number"]
        )
        return [
            DraftPick(
                round=int(row["round"]),
                pick_number=int(row["pick_number"]),
                original_team_id=row["original_team_id"],
                current_team_id=row["current_team_id"],
                year=int(row["year"]),
                value=float(row["value"]),
            )
            for _, row in df.iterrows()
        ]

    def team_name(self, team_id: str) -> str:
        if self.teams_df.empty:
            return team_id
        rows = self.teams_df[self.teams_df["team_id"] == team_id]
        return team_id if rows.empty else rows.iloc[0]["name"]

    # ------------------------------------------------------------------
    # Row conversion
    # ------------------------------------------------------------------

    @staticmethod
    def _row_to_player(row: pd.Series) -> Player:
        return Player(
            player_id=str(row["player_id"]),
            name=row["name"],
            position=Position(row["position"]),
            age=int(row["age"]),
            overall=int(row["overall"]),
            team_id=row["team_id"],
            contract=_contract_from_dict(row["contract"]),
            contract_demand=_demand_from_dict(_safe(row.get("contract_demand"))),
            morale=int(_safe(row.get("morale"), 100)),
            fatigue=int(_safe(row.get("fatigue"), 100)),
            archetype=_safe(row.get("archetype"), ""),
            development_trait=_safe(row.get("development_trait"), "Normal"),
        )

    @staticmethod
    def _row_to_play(row: pd.Series) -> Play:
        return Play(
            play_id=row["play_id"],
            name=row["name"],
            type=PlayType(row["type"]),
            formation=row["formation"],
            risk=int(row["risk"]),
            reward=int(row["reward"]),
            success_rate=float(row["success_rate"]),
        )

    @staticmethod
    def _row_to_prospect(row: pd.Series) -> DraftProspect:
        return DraftProspect(
            prospect_id=row["prospect_id"],
            name=row["name"],
            position=Position(row["position"]),
            school=row["school"],
            projected_round=int(row["projected_round"]),
            scouting_grade=int(row["scouting_grade"]),
            forty_yard=float(row["forty_yard"]),
            bench=int(row["bench"]),
        )
