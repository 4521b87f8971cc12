"""Betting strategies.

Each strategy is a small frozen dataclass that sizes the next wager from the
current bankroll. The simulator dispatches on the variant once per bet, so the
set of strategies is closed: ``Strategy`` is the union of the three classes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BoldPlay:
    """Stake the entire bankroll every round."""

    name = "bold"

    def bet_size(self, bankroll: float) -> float:
        return bankroll

    def display_name(self) -> str:
        return "Bold Play (Bet All)"


@dataclass(frozen=True)
class FlatBet:
    """Stake a fixed amount, or whatever is left if the bankroll is smaller."""

    amount: float = 1.0

    name = "flat"

    def __post_init__(self):
        if self.amount < 1:
            raise ValueError(f"flat bet amount must be >= 1, got {self.amount}")

    def bet_size(self, bankroll: float) -> float:
        return min(self.amount, bankroll)

    def display_name(self) -> str:
        return f"Flat ${self.amount:g} Bet"


@dataclass(frozen=True)
class KellyFraction:
    """Stake a fixed percentage of the current bankroll.

    The fraction is applied regardless of the sign of the edge, so on a
    negative-EV game this keeps betting where true Kelly would stake nothing.
    Bets are whole units with a floor of 1, capped at the bankroll.
    """

    percent: float = 20.0

    name = "kelly"

    def __post_init__(self):
        if not 1 <= self.percent <= 100:
            raise ValueError(f"kelly fraction percent must be in [1, 100], got {self.percent}")

    def bet_size(self, bankroll: float) -> float:
        target = (self.percent / 100.0) * bankroll
        bet = max(1, math.floor(target))
        return min(bet, bankroll)

    def display_name(self) -> str:
        return f"Kelly ({self.percent:g}% of bankroll)"


Strategy = Union[BoldPlay, FlatBet, KellyFraction]

STRATEGY_NAMES = ("bold", "flat", "kelly")


def strategy_from_name(
    name: str,
    *,
    flat_bet_amount: float = 1.0,
    kelly_fraction_pct: float = 20.0,
) -> Strategy:
    """Build a strategy variant from its short name.

    Only the parameter belonging to the chosen strategy is used.
    """
    key = name.strip().lower()
    if key == "bold":
        return BoldPlay()
    if key == "flat":
        return FlatBet(amount=float(flat_bet_amount))
    if key == "kelly":
        return KellyFraction(percent=float(kelly_fraction_pct))
    raise ValueError(f"Unknown strategy: {name!r}. Available: {list(STRATEGY_NAMES)}")


__all__ = [
    "BoldPlay",
    "FlatBet",
    "KellyFraction",
    "Strategy",
    "STRATEGY_NAMES",
    "strategy_from_name",
]
