"""Scoring data models.

Data structures only, no business logic.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Verdict(str, Enum):
    """Ordered verdict tiers, lowest first."""

    LIKELY_LEGIT = "Likely Legit"
    POSSIBLY_SMURF = "Possibly Smurf"
    LIKELY_SMURF = "Likely Smurf"
    ALMOST_CERTAINLY_SMURF = "Almost Certainly Smurf"


class ParticipantMetrics(BaseModel):
    """Per-match performance derived from one participant record."""

    model_config = ConfigDict(frozen=True)

    match_id: str | None = None
    champion: str
    win: bool

    kills: int = Field(..., ge=0)
    deaths: int = Field(..., ge=0)
    assists: int = Field(..., ge=0)
    kda: float = Field(..., ge=0)

    cs_per_min: float = Field(..., ge=0)
    gold_per_min: float = Field(..., ge=0)
    dmg_per_min: float = Field(..., ge=0)
    # None means the payload did not report it, not "no lead"
    gold_diff_at_10: float | None = None
    kill_participation: float = Field(..., ge=0)


class AggregateStats(BaseModel):
    """Summary statistics over N >= 1 matches."""

    model_config = ConfigDict(frozen=True)

    games: int = Field(..., ge=1)
    winrate: float = Field(..., ge=0, le=1)
    avg_kda: float = Field(..., ge=0)
    avg_cs_per_min: float = Field(..., ge=0)
    avg_gold_per_min: float = Field(..., ge=0)
    avg_gold_diff_at_10: float | None = None
    avg_kill_participation: float = Field(..., ge=0)
    avg_dmg_per_min: float = Field(..., ge=0)
    champ_pool_size: int = Field(..., ge=1)


class RuleHit(BaseModel):
    """A scoring rule that fired, with the points it contributed."""

    model_config = ConfigDict(frozen=True)

    name: str
    points: int = Field(..., ge=0)
    description: str = ""
