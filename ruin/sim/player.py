"""Single-player betting process."""

from __future__ import annotations

from ruin.sim.rng import UniformSource, bernoulli_trial
from ruin.sim.strategies import Strategy


def simulate_player(
    max_games: int,
    p: float,
    strategy: Strategy,
    starting_bankroll: float,
    rng: UniformSource,
) -> float:
    """
    Play even-money bets until ruin or until ``max_games`` rounds are done.

    Args:
        max_games: Round cap; a player still solvent at the cap is censored.
        p: Per-round win probability.
        strategy: Bet sizing rule.
        starting_bankroll: Initial bankroll.
        rng: Uniform source consumed one draw per round.

    Returns:
        Final bankroll, always >= 0. Zero is absorbing.
    """
    bankroll = starting_bankroll
    games_played = 0

    while games_played < max_games and bankroll > 0:
        bet = strategy.bet_size(bankroll)
        if bet <= 0:
            break

        if bernoulli_trial(p, rng):
            bankroll += bet
        else:
            bankroll -= bet

        games_played += 1

    return max(bankroll, 0)


__all__ = ["simulate_player"]
