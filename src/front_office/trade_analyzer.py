"""Trade analyzer - values players and picks on a common scale."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union

from src.front_office.config import (
    MIN_AGE_FACTOR,
    TRADE_AGE_CEILING,
    TRADE_FAIRNESS_MARGIN,
)
from src.front_office.models import DraftPick, Player

TradeAsset = Union[Player, DraftPick]


class TradeFairness(str, Enum):
    FAIR = "FAIR"
    OVERPAY = "OVERPAY"
    UNDERPAY = "UNDERPAY"


@dataclass
class TradeEvaluation:
    my_value: float
    their_value: float
    difference: float
    fairness: TradeFairness


class TradeAnalyzer:
    """Scores trade packages.

    Players are valued on overall rating squared, discounted with age;
    draft picks carry their Rich Hill chart value.
    """

    def asset_value(self, asset: TradeAsset) -> float:
        if isinstance(asset, Player):
            age_factor = max(MIN_AGE_FACTOR, (TRADE_AGE_CEILING - asset.age) / 10)
            return (asset.overall * asset.overall * age_factor) / 10
        return asset.value

    def package_value(self, assets: Iterable[TradeAsset]) -> float:
        return sum(self.asset_value(asset) for asset in assets)

    def evaluate(
        self,
        my_assets: Iterable[TradeAsset],
        their_assets: Iterable[TradeAsset],
    ) -> TradeEvaluation:
        """Compare what we give up against what we get back.

        The trade is FAIR when the gap is under 15% of the larger side,
        otherwise OVERPAY if we give more and UNDERPAY if we give less.
        """
        my_value = self.package_value(my_assets)
        their_value = self.package_value(their_assets)
        diff = my_value - their_value

        if abs(diff) < max(my_value, their_value) * TRADE_FAIRNESS_MARGIN:
            fairness = TradeFairness.FAIR
        elif diff > 0:
            fairness = TradeFairness.OVERPAY
        else:
            fairness = TradeFairness.UNDERPAY

        return TradeEvaluation(
            my_value=my_value,
            their_value=their_value,
            difference=diff,
            fairness=fairness,
        )
