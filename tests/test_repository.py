"""Tests for the league reference data repository."""

import json

import pytest

from src.contract_engine.models import InterestType
from src.front_office.models import Position
from src.front_office.repository import LeagueRepository
from src.match_engine.models import PlayType


# ── Players ──────────────────────────────────────────────────────────

class TestPlayers:
    def test_default_counts(self, repository):
        assert len(repository.all_players()) == 11
        assert len(repository.play_menu()) == 6
        assert len(repository.draft_board()) == 5

    def test_get_player_with_demand(self, repository):
        player = repository.get_player("7")
        assert player.name == "L. Tunsil"
        assert player.position == Position.OL
        assert player.contract.years_left == 0
        assert player.contract_demand.years == 3
        assert player.contract_demand.salary == 26.5
        assert player.contract_demand.interest == InterestType.SECURITY

    def test_get_player_without_demand(self, repository):
        player = repository.get_player("1")
        assert player.contract_demand is None
        assert player.is_negotiable is False
        assert player.contract.total_value == 62

    def test_unknown_player(self, repository):
        with pytest.raises(KeyError):
            repository.get_player("999")

    def test_players_for_team(self, repository):
        ids = {p.player_id for p in repository.players_for_team("KC")}
        assert ids == {"8", "9"}

    def test_free_agents(self, repository):
        ids = {p.player_id for p in repository.free_agents()}
        assert ids == {"10", "11"}

    def test_players_with_demands(self, repository):
        ids = {p.player_id for p in repository.players_with_demands()}
        assert ids == {"7", "10", "11"}

    def test_returned_players_are_copies(self, repository):
        player = repository.get_player("3")
        player.contract.salary = 99
        player.team_id = "FA"
        fresh = repository.get_player("3")
        assert fresh.contract.salary == 14
        assert fresh.team_id == "HOU"


# ── Plays and draft ──────────────────────────────────────────────────

class TestPlaysAndDraft:
    def test_get_play(self, repository):
        play = repository.get_play("p5")
        assert play.name == "Four Verticals"
        assert play.type == PlayType.PASS
        assert play.success_rate == 0.35
        assert play.reward == 10

    def test_unknown_play(self, repository):
        with pytest.raises(KeyError):
            repository.get_play("p0")

    def test_draft_board_sorted_by_grade(self, repository):
        ids = [p.prospect_id for p in repository.draft_board()]
        assert ids == ["d1", "d2", "d4", "d5", "d3"]

    def test_draft_board_round_filter(self, repository):
        ids = [p.prospect_id for p in repository.draft_board(max_round=1)]
        assert "d3" not in ids
        assert len(ids) == 4

    def test_draft_picks_for_team(self, repository):
        picks = repository.draft_picks_for_team("HOU")
        assert [p.round for p in picks] == [1, 2, 3]
        assert picks[2].original_team_id == "IND"

    def test_team_name(self, repository):
        assert repository.team_name("KC") == "Kansas City Chiefs"
        assert repository.team_name("XXX") == "XXX"


# ── Construction ─────────────────────────────────────────────────────

class TestConstruction:
    def _payload(self):
        return {
            "players": [{
                "player_id": "p1", "name": "A. Player", "position": "QB",
                "age": 27, "overall": 80, "team_id": "FA",
                "contract": {"years": 1, "salary": 1, "bonus": 0,
                             "years_left": 0, "total_value": 1},
                "contract_demand": {"years": 2, "salary": 3, "bonus": 1},
            }],
            "plays": [{
                "play_id": "r1", "name": "Dive", "type": "Run", "formation": "I-Form",
                "risk": 1, "reward": 2, "success_rate": 0.6,
            }],
            "draft_class": [],
        }

    def test_from_json(self, tmp_path):
        path = tmp_path / "league.json"
        path.write_text(json.dumps(self._payload()), encoding="utf-8")

        repo = LeagueRepository.from_json(path)
        player = repo.get_player("p1")
        assert player.contract_demand.years == 2
        assert player.contract_demand.interest is None
        assert player.morale == 100
        assert repo.draft_board() == []
        assert repo.draft_picks_for_team("HOU") == []

    def test_from_json_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LeagueRepository.from_json(tmp_path / "missing.json")

    def test_from_json_missing_keys(self, tmp_path):
        path = tmp_path / "league.json"
        path.write_text(json.dumps({"players": []}), encoding="utf-8")
        with pytest.raises(ValueError, match="missing keys"):
            LeagueRepository.from_json(path)

    def test_duplicate_ids_rejected(self):
        payload = self._payload()
        payload["plays"].append(dict(payload["plays"][0]))
        with pytest.raises(ValueError, match="Duplicate play_id"):
            LeagueRepository(**payload)
