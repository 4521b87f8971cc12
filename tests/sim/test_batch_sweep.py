from __future__ import annotations

import numpy as np
import pytest

from ruin.sim.batch import run_batch
from ruin.sim.config import SimulationConfig
from ruin.sim.rng import make_rng
from ruin.sim.strategies import BoldPlay, FlatBet, KellyFraction
from ruin.sim.sweep import PROBABILITY_GRID, run_sweep


def _small_config(strategy=None, players: int = 50, max_games: int = 100) -> SimulationConfig:
    return SimulationConfig(
        max_games=max_games,
        players_per_probability=players,
        starting_bankroll=100,
        strategy=strategy or FlatBet(amount=5),
    )


def test_probability_grid_is_whole_percents_below_half() -> None:
    assert len(PROBABILITY_GRID) == 49
    assert PROBABILITY_GRID[0] == pytest.approx(0.01)
    assert PROBABILITY_GRID[-1] == pytest.approx(0.49)
    assert list(PROBABILITY_GRID) == sorted(PROBABILITY_GRID)


def test_run_batch_returns_one_unsorted_value_per_player() -> None:
    config = _small_config(players=200)
    out = run_batch(0.45, 200, config, make_rng(3))

    assert out.shape == (200,)
    assert np.all(out >= 0)
    assert not np.array_equal(out, np.sort(out))


def test_run_batch_is_deterministic_under_seed() -> None:
    config = _small_config()
    a = run_batch(0.4, 50, config, make_rng(1))
    b = run_batch(0.4, 50, config, make_rng(1))
    np.testing.assert_array_equal(a, b)


def test_run_batch_rejects_negative_player_count() -> None:
    with pytest.raises(ValueError):
        run_batch(0.4, -1, _small_config(), make_rng(0))


def test_sweep_produces_one_result_per_probability_in_order() -> None:
    config = _small_config(players=20, max_games=50)
    sweep = run_sweep(config, seed=1)

    assert len(sweep) == 49
    assert sweep.probabilities == list(PROBABILITY_GRID)
    for result in sweep:
        assert result.final_bankrolls.size == 20
        assert result.p50 <= result.p90 <= result.p99
        assert 0.0 <= result.fraction_ruined <= 1.0
        assert 0.0 <= result.fraction_positive <= 1.0
        assert result.fraction_ruined + result.fraction_positive <= 1.0
        assert result.variance == pytest.approx(4 * result.p * (1 - result.p))


def test_sweep_is_identical_across_worker_counts() -> None:
    config = _small_config(strategy=KellyFraction(percent=20), players=30, max_games=80)
    serial = run_sweep(config, seed=42, workers=1)
    threaded = run_sweep(config, seed=42, workers=4)

    for a, b in zip(serial, threaded):
        assert a.p == b.p
        np.testing.assert_array_equal(a.final_bankrolls, b.final_bankrolls)


def test_sweep_rejects_bad_worker_hint() -> None:
    with pytest.raises(ValueError):
        run_sweep(_small_config(players=1, max_games=1), seed=0, workers="many")


def test_bold_play_sweep_respects_doubling_cap() -> None:
    config = _small_config(strategy=BoldPlay(), players=100, max_games=6)
    sweep = run_sweep(config, seed=8, probabilities=(0.1, 0.3, 0.49))
    cap = 100 * 2**6
    for result in sweep:
        assert result.final_bankrolls.max() <= cap


def _all_wins_bankroll(strategy, starting_bankroll: float, max_games: int) -> float:
    # Bets grow with the bankroll, so winning every round is the largest reachable outcome.
    bankroll = starting_bankroll
    for _ in range(max_games):
        bankroll += strategy.bet_size(bankroll)
    return bankroll


def test_flat_bet_sweep_respects_linear_cap() -> None:
    strategy = FlatBet(amount=5)
    config = _small_config(strategy=strategy, players=200, max_games=40)
    sweep = run_sweep(config, seed=21, probabilities=(0.1, 0.3, 0.49))
    cap = 100 + 40 * 5
    assert _all_wins_bankroll(strategy, 100, 40) == cap
    for result in sweep:
        assert result.final_bankrolls.min() >= 0
        assert result.final_bankrolls.max() <= cap


def test_kelly_sweep_respects_compounding_cap() -> None:
    strategy = KellyFraction(percent=20)
    config = _small_config(strategy=strategy, players=200, max_games=40)
    sweep = run_sweep(config, seed=22, probabilities=(0.1, 0.3, 0.49))
    cap = _all_wins_bankroll(strategy, 100, 40)
    # Whole-unit bets with a 1-unit floor never beat continuous compounding.
    assert cap <= 100 * 1.2**40
    for result in sweep:
        assert result.final_bankrolls.min() >= 0
        assert result.final_bankrolls.max() <= cap


def test_kelly_cap_counts_minimum_one_unit_bet() -> None:
    # At a $3 bankroll 20% floors to 0, so the 1-unit floor drives growth.
    assert _all_wins_bankroll(KellyFraction(percent=20), 3, 2) == 5


def test_flat_bet_near_fair_drifts_down_and_ruins_some() -> None:
    config = SimulationConfig(
        max_games=1000,
        players_per_probability=1000,
        starting_bankroll=100,
        strategy=FlatBet(amount=5),
    )
    sweep = run_sweep(config, seed=2024, probabilities=(0.49,))
    result = sweep[0]

    assert result.fraction_ruined > 0
    assert result.average < 100


def test_ruin_fraction_rises_as_p_falls() -> None:
    config = _small_config(strategy=FlatBet(amount=10), players=400, max_games=300)
    sweep = run_sweep(config, seed=77, probabilities=(0.30, 0.40, 0.49))
    ruined = sweep.series("fraction_ruined")

    assert ruined[0] >= ruined[1] >= ruined[2]
