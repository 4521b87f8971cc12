from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ruin.paths import get_config_root
from ruin.sim.strategies import FlatBet, KellyFraction, Strategy, strategy_from_name


DEFAULT_PROFILES_PATH = get_config_root() / "sweep_profiles.yaml"


@dataclass(frozen=True)
class SimulationConfig:
    """Inputs for one sweep. Only the active strategy's parameter is carried."""

    max_games: int = 1000
    players_per_probability: int = 1000
    starting_bankroll: float = 100.0
    strategy: Strategy = field(default_factory=lambda: FlatBet(amount=5.0))

    def __post_init__(self):
        if self.max_games < 0:
            raise ValueError(f"max_games must be >= 0, got {self.max_games}")
        if self.players_per_probability < 1:
            raise ValueError(
                f"players_per_probability must be >= 1, got {self.players_per_probability}"
            )
        if self.starting_bankroll < 0:
            raise ValueError(f"starting_bankroll must be >= 0, got {self.starting_bankroll}")

    @property
    def strategy_name(self) -> str:
        return self.strategy.name

    @property
    def flat_bet_amount(self) -> Optional[float]:
        return self.strategy.amount if isinstance(self.strategy, FlatBet) else None

    @property
    def kelly_fraction_pct(self) -> Optional[float]:
        return self.strategy.percent if isinstance(self.strategy, KellyFraction) else None

    def to_dict(self) -> dict:
        return {
            "max_games": self.max_games,
            "players_per_probability": self.players_per_probability,
            "starting_bankroll": self.starting_bankroll,
            "strategy": self.strategy_name,
            "flat_bet_amount": self.flat_bet_amount,
            "kelly_fraction_pct": self.kelly_fraction_pct,
            "strategy_display_name": self.strategy.display_name(),
        }


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, encoding="utf-8") as f:
            payload = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML at {path}: {exc}") from exc
    return payload or {}


def list_sweep_profiles(profiles_path: Optional[Path] = None) -> list[str]:
    path = (profiles_path or DEFAULT_PROFILES_PATH).expanduser().resolve()
    if not path.exists():
        return []
    return sorted((_read_yaml(path).get("profiles") or {}).keys())


def load_sweep_profile(
    *,
    profile: str = "baseline",
    profiles_path: Optional[Path] = None,
) -> SimulationConfig:
    path = (profiles_path or DEFAULT_PROFILES_PATH).expanduser().resolve()
    if not path.exists():
        raise FileNotFoundError(f"sweep profiles config missing at {path}")
    profiles = _read_yaml(path).get("profiles") or {}
    config = profiles.get(profile)
    if config is None:
        raise KeyError(f"Profile '{profile}' not found in {path}")
    if not isinstance(config, dict):
        raise ValueError(f"Profile '{profile}' in {path} must be a mapping, got {type(config).__name__}")

    strategy_cfg = config.get("strategy", {}) or {}
    strategy = strategy_from_name(
        str(strategy_cfg.get("name", "flat")),
        flat_bet_amount=float(strategy_cfg.get("flat_bet_amount", 1.0)),
        kelly_fraction_pct=float(strategy_cfg.get("kelly_fraction_pct", 20.0)),
    )

    return SimulationConfig(
        max_games=int(config.get("max_games", 1000)),
        players_per_probability=int(config.get("players_per_probability", 1000)),
        starting_bankroll=float(config.get("starting_bankroll", 100.0)),
        strategy=strategy,
    )


__all__ = [
    "SimulationConfig",
    "load_sweep_profile",
    "list_sweep_profiles",
    "DEFAULT_PROFILES_PATH",
]
