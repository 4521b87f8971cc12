"""FastAPI router for sweep and distribution endpoints."""

from __future__ import annotations

import logging

import numpy as np
from fastapi import APIRouter, FastAPI, HTTPException

from ruin.api.models import (
    DistributionModel,
    DistributionRequest,
    SweepRequest,
    SweepResponse,
)
from ruin.inputs import coerce_config
from ruin.sim.sweep import run_sweep
from ruin.stats.distribution import distribution_at
from ruin.stats.histogram import bin_bankrolls
from ruin.stats.pareto import pareto_overlay

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/sweep", response_model=SweepResponse)
def post_sweep(request: SweepRequest) -> dict:
    config = coerce_config(
        starting_bankroll=request.starting_bankroll,
        max_games=request.max_games,
        players_per_probability=request.players_per_probability,
        strategy=request.strategy,
        flat_bet_amount=request.flat_bet_amount,
        kelly_fraction_pct=request.kelly_fraction_pct,
    )
    sweep = run_sweep(config, seed=request.seed)

    payload = {
        "config": config.to_dict(),
        "strategy_display_name": sweep.strategy_display_name,
        "results": [r.to_dict(include_bankrolls=request.include_bankrolls) for r in sweep],
        "distribution": None,
    }
    if request.distribution_index is not None:
        try:
            payload["distribution"] = distribution_at(sweep, request.distribution_index).to_dict()
        except IndexError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return payload


@router.post("/distribution", response_model=DistributionModel)
def post_distribution(request: DistributionRequest) -> dict:
    """Histogram and Pareto overlay for a bankroll batch supplied by the caller."""
    bankrolls = np.asarray(request.bankrolls, dtype=np.float64)
    if np.any(bankrolls < 0):
        raise HTTPException(status_code=400, detail="bankrolls must be non-negative")
    total = request.total_players or int(bankrolls.size)
    histogram = bin_bankrolls(bankrolls)
    fit, overlay = pareto_overlay(bankrolls, histogram.labels, total)
    return {
        "labels": histogram.labels,
        "counts": histogram.counts,
        "pareto": fit.to_dict(),
        "pareto_counts": overlay,
    }


def create_app() -> FastAPI:
    """Construct the FastAPI app."""
    app = FastAPI(title="Gambler's Ruin Sweep API", version="0.1.0")
    app.include_router(router, prefix="/api", tags=["sweep"])
    return app


__all__ = ["router", "create_app"]
