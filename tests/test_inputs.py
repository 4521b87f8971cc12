from __future__ import annotations

import pytest

from ruin.inputs import coerce_config, parse_int
from ruin.sim.strategies import BoldPlay, FlatBet, KellyFraction


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), ("12.7", 12), (" 30abc", 30), ("-4", -4), ("abc", None), ("", None), (None, None), (7.9, 7)],
)
def test_parse_int_reads_leading_integer(raw, expected) -> None:
    assert parse_int(raw) == expected


def test_empty_input_uses_documented_defaults() -> None:
    config = coerce_config()
    assert config.starting_bankroll == 100
    assert config.max_games == 1000
    assert config.players_per_probability == 1000
    assert config.strategy == FlatBet(amount=1)


def test_bankroll_floor_and_invalid_fallback() -> None:
    assert coerce_config(starting_bankroll="5").starting_bankroll == 10
    assert coerce_config(starting_bankroll="-50").starting_bankroll == 10
    assert coerce_config(starting_bankroll="abc").starting_bankroll == 100
    assert coerce_config(starting_bankroll="0").starting_bankroll == 100
    assert coerce_config(starting_bankroll=250).starting_bankroll == 250


def test_counts_fall_back_when_not_positive() -> None:
    config = coerce_config(max_games="lots", players_per_probability="0")
    assert config.max_games == 1000
    assert config.players_per_probability == 1000
    assert coerce_config(max_games="25", players_per_probability=40).max_games == 25


def test_strategy_parameters() -> None:
    assert coerce_config(strategy="flat", flat_bet_amount="abc").strategy == FlatBet(amount=1)
    assert coerce_config(strategy="flat", flat_bet_amount="-3").strategy == FlatBet(amount=1)
    assert coerce_config(strategy="kelly", kelly_fraction_pct="250").strategy == KellyFraction(percent=100)
    assert coerce_config(strategy="kelly", kelly_fraction_pct="0").strategy == KellyFraction(percent=1)
    assert coerce_config(strategy="kelly").strategy == KellyFraction(percent=20)
    assert coerce_config(strategy="BOLD").strategy == BoldPlay()


def test_unknown_strategy_falls_back_to_flat() -> None:
    assert coerce_config(strategy="martingale", flat_bet_amount=3).strategy == FlatBet(amount=3)
