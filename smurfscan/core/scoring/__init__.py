"""Smurf likelihood scoring.

Pipeline: extract (per match) -> aggregate (over the sample) -> score -> verdict.
All functions here are pure domain logic with zero I/O.
"""

from smurfscan.core.scoring.aggregator import aggregate
from smurfscan.core.scoring.extractor import extract, metrics_from_participant
from smurfscan.core.scoring.models import AggregateStats, ParticipantMetrics, RuleHit, Verdict
from smurfscan.core.scoring.scorer import evaluate_rules, score, verdict

__all__ = [
    "AggregateStats",
    "ParticipantMetrics",
    "RuleHit",
    "Verdict",
    "aggregate",
    "evaluate_rules",
    "extract",
    "metrics_from_participant",
    "score",
    "verdict",
]
