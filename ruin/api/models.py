from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field

# Form fields arrive as strings or numbers; coercion to defaults happens in ruin.inputs.
RawNumber = Optional[Union[int, float, str]]


class SweepRequest(BaseModel):
    starting_bankroll: RawNumber = None
    max_games: RawNumber = None
    players_per_probability: RawNumber = None
    strategy: Optional[str] = None
    flat_bet_amount: RawNumber = None
    kelly_fraction_pct: RawNumber = None
    seed: Optional[int] = Field(default=None, ge=0)
    include_bankrolls: bool = False
    distribution_index: Optional[int] = Field(default=None, ge=0)


class ProbabilityResultModel(BaseModel):
    p: float
    variance: float
    fraction_positive: float
    fraction_ruined: float
    p50: float
    p90: float
    p99: float
    average: float
    n_players: int
    final_bankrolls: Optional[List[float]] = None


class ParetoFitModel(BaseModel):
    alpha: Optional[float] = None
    xm: Optional[float] = None
    n_positive: int


class DistributionModel(BaseModel):
    p: Optional[float] = None
    variance: Optional[float] = None
    title: Optional[str] = None
    labels: List[str]
    counts: List[int]
    pareto: ParetoFitModel
    pareto_counts: List[float]


class SweepResponse(BaseModel):
    config: dict
    strategy_display_name: str
    results: List[ProbabilityResultModel]
    distribution: Optional[DistributionModel] = None


class DistributionRequest(BaseModel):
    bankrolls: List[float] = Field(..., min_length=1)
    total_players: Optional[int] = Field(default=None, ge=1)
