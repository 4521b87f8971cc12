"""Coerce raw user input into a SimulationConfig.

Invalid or missing values are replaced with defaults instead of rejected, so
the engine only ever sees a valid config:

- starting bankroll: at least 10, 100 when non-numeric or zero
- max games: 1000 when non-numeric or not positive
- players per probability: 1000 when non-numeric or not positive
- flat bet amount: at least 1, 1 when non-numeric or zero
- kelly fraction: clamped to [1, 100], 20 when non-numeric
- strategy: ``flat`` when unrecognized
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from ruin.sim.config import SimulationConfig
from ruin.sim.strategies import STRATEGY_NAMES, strategy_from_name

logger = logging.getLogger(__name__)

DEFAULT_STARTING_BANKROLL = 100
MIN_STARTING_BANKROLL = 10
DEFAULT_MAX_GAMES = 1000
DEFAULT_PLAYERS_PER_PROBABILITY = 1000
DEFAULT_STRATEGY = "flat"
DEFAULT_FLAT_BET_AMOUNT = 1
DEFAULT_KELLY_FRACTION_PCT = 20


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse: ``"12.7"`` -> 12, ``"abc"`` -> None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    text = str(value).strip()
    sign = ""
    if text[:1] in ("+", "-"):
        sign, text = text[0], text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    if not digits:
        return None
    return int(sign + digits)


def _positive_or_default(value: Any, default: int, field_name: str) -> int:
    parsed = parse_int(value)
    if parsed is None or parsed <= 0:
        if value is not None:
            logger.info("[inputs] %s=%r invalid, using default %d", field_name, value, default)
        return default
    return parsed


def coerce_config(
    *,
    starting_bankroll: Any = None,
    max_games: Any = None,
    players_per_probability: Any = None,
    strategy: Any = None,
    flat_bet_amount: Any = None,
    kelly_fraction_pct: Any = None,
) -> SimulationConfig:
    bankroll = parse_int(starting_bankroll)
    if not bankroll:
        bankroll = DEFAULT_STARTING_BANKROLL
    bankroll = max(MIN_STARTING_BANKROLL, bankroll)

    games = _positive_or_default(max_games, DEFAULT_MAX_GAMES, "max_games")
    players = _positive_or_default(
        players_per_probability, DEFAULT_PLAYERS_PER_PROBABILITY, "players_per_probability"
    )

    strategy_name = str(strategy).strip().lower() if strategy is not None else DEFAULT_STRATEGY
    if strategy_name not in STRATEGY_NAMES:
        logger.info("[inputs] strategy=%r unknown, using %s", strategy, DEFAULT_STRATEGY)
        strategy_name = DEFAULT_STRATEGY

    flat_amount = parse_int(flat_bet_amount)
    if not flat_amount:
        flat_amount = DEFAULT_FLAT_BET_AMOUNT
    flat_amount = max(1, flat_amount)

    kelly_pct = parse_int(kelly_fraction_pct)
    if kelly_pct is None:
        kelly_pct = DEFAULT_KELLY_FRACTION_PCT
    kelly_pct = min(100, max(1, kelly_pct))

    return SimulationConfig(
        max_games=games,
        players_per_probability=players,
        starting_bankroll=float(bankroll),
        strategy=strategy_from_name(
            strategy_name,
            flat_bet_amount=flat_amount,
            kelly_fraction_pct=kelly_pct,
        ),
    )


__all__ = [
    "DEFAULT_STARTING_BANKROLL",
    "MIN_STARTING_BANKROLL",
    "DEFAULT_MAX_GAMES",
    "DEFAULT_PLAYERS_PER_PROBABILITY",
    "DEFAULT_STRATEGY",
    "DEFAULT_FLAT_BET_AMOUNT",
    "DEFAULT_KELLY_FRACTION_PCT",
    "parse_int",
    "coerce_config",
]
