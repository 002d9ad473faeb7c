"""Shared fixtures for the coach mode test suite."""

from typing import Iterable, List

import pytest

from src.contract_engine.models import Contract, ContractDemand, ContractOffer
from src.front_office.repository import LeagueRepository
from src.match_engine.models import Play, PlayType


class ScriptedRandom:
    """Random source that replays a fixed list of draws.

    Raises IndexError if a play consumes more draws than scripted, so tests
    pin the exact number of draws as well as their order.
    """

    def __init__(self, draws: Iterable[float]):
        self.draws: List[float] = list(draws)
        self.consumed = 0

    def random(self) -> float:
        value = self.draws[self.consumed]
        self.consumed += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self.draws) - self.consumed


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture
def scripted():
    """Factory: ``scripted(0.5, 0.9, 0.5)`` -> ScriptedRandom."""
    def _make(*draws):
        return ScriptedRandom(draws)
    return _make


@pytest.fixture
def pass_play():
    return Play(
        play_id="p3", name="Mesh Spot", type=PlayType.PASS,
        formation="Shotgun Bunch", risk=3, reward=5, success_rate=0.70,
    )


@pytest.fixture
def run_play():
    return Play(
        play_id="p1", name="Inside Zone", type=PlayType.RUN,
        formation="Shotgun", risk=2, reward=4, success_rate=0.65,
    )


@pytest.fixture
def demand():
    return ContractDemand(years=3, salary=10, bonus=5)


@pytest.fixture
def matching_offer():
    return ContractOffer(years=3, salary=10, bonus=5)


@pytest.fixture
def rookie_deal():
    """4-year deal with a $20M bonus and three years left."""
    return Contract(years=4, salary=9, bonus=20, years_left=3, total_value=56)


@pytest.fixture(scope="module")
def repository():
    return LeagueRepository.from_defaults()
