"""Run a gambler's-ruin sweep over win probabilities 0.01..0.49 and print the summary."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import pandas as pd
import typer

from ruin.inputs import coerce_config
from ruin.sim.config import DEFAULT_PROFILES_PATH, SimulationConfig, load_sweep_profile
from ruin.sim.sweep import run_sweep
from ruin.stats.distribution import DistributionView, distribution_at

app = typer.Typer(help=__doc__)


def _resolve_config(
    profile: Optional[str],
    profiles_path: Path,
    starting_bankroll: Optional[str],
    max_games: Optional[str],
    players: Optional[str],
    strategy: Optional[str],
    flat_bet: Optional[str],
    kelly_pct: Optional[str],
) -> SimulationConfig:
    if profile is not None:
        try:
            return load_sweep_profile(profile=profile, profiles_path=profiles_path)
        except (FileNotFoundError, KeyError, ValueError) as exc:
            raise typer.BadParameter(str(exc), param_hint="--profile") from exc
    return coerce_config(
        starting_bankroll=starting_bankroll,
        max_games=max_games,
        players_per_probability=players,
        strategy=strategy,
        flat_bet_amount=flat_bet,
        kelly_fraction_pct=kelly_pct,
    )


def _format_distribution(view: DistributionView) -> str:
    frame = pd.DataFrame(
        {
            "range": view.histogram.labels,
            "count": view.histogram.counts,
            "pareto_fit": [round(v, 2) for v in view.pareto_counts],
        }
    )
    if view.pareto.is_defined:
        fit_line = f"pareto alpha={view.pareto.alpha:.4f} xm={view.pareto.xm:g} (n={view.pareto.n_positive})"
    else:
        fit_line = f"pareto fit unavailable (n_positive={view.pareto.n_positive})"
    return "\n".join([view.title, frame.to_string(index=False), fit_line])


@app.command()
def main(
    profile: Optional[str] = typer.Option(
        None, "--profile", help="Named preset from the sweep profiles YAML; overrides the inputs below."
    ),
    profiles_path: Path = typer.Option(
        DEFAULT_PROFILES_PATH, "--profiles-path", help="YAML file holding sweep presets."
    ),
    starting_bankroll: Optional[str] = typer.Option(
        None, "--starting-bankroll", help="Starting bankroll ($), at least 10 (default 100)."
    ),
    max_games: Optional[str] = typer.Option(
        None, "--max-games", help="Max games per player (default 1000)."
    ),
    players: Optional[str] = typer.Option(
        None, "--players", help="Players per probability value (default 1000)."
    ),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", help="bold | flat | kelly (default flat)."
    ),
    flat_bet: Optional[str] = typer.Option(
        None, "--flat-bet", help="Flat bet amount ($), at least 1 (default 1)."
    ),
    kelly_pct: Optional[str] = typer.Option(
        None, "--kelly-pct", help="Kelly fraction, percent of current bankroll in [1, 100] (default 20)."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", min=0, help="Non-negative seed for a reproducible sweep."),
    workers: str = typer.Option("1", "--workers", help="Worker threads, or 'auto'."),
    distribution_index: Optional[int] = typer.Option(
        None,
        "--distribution-index",
        help="Also print the bankroll histogram and Pareto fit for this probability index (0 = p 0.01).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-probability progress."),
) -> None:
    """Simulate every probability, then print fraction ahead/ruined and percentile bankrolls."""

    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(message)s")

    config = _resolve_config(
        profile, profiles_path, starting_bankroll, max_games, players, strategy, flat_bet, kelly_pct
    )
    if workers.isdigit():
        worker_hint: int | str = int(workers)
    elif workers.lower() == "auto":
        worker_hint = "auto"
    else:
        raise typer.BadParameter(
            f"worker hint must be 'auto' or a positive integer, got {workers!r}", param_hint="--workers"
        )
    sweep = run_sweep(config, seed=seed, workers=worker_hint)

    typer.echo(f"Results: {sweep.strategy_display_name}")
    typer.echo(sweep.to_frame().to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    if distribution_index is not None:
        try:
            view = distribution_at(sweep, distribution_index)
        except IndexError as exc:
            raise typer.BadParameter(str(exc), param_hint="--distribution-index") from exc
        typer.echo("")
        typer.echo(_format_distribution(view))


if __name__ == "__main__":  # pragma: no cover
    app()
