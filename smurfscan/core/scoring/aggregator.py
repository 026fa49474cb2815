"""Aggregate per-match metrics into summary statistics."""

from collections.abc import Sequence

import numpy as np

from smurfscan.core.scoring.models import AggregateStats, ParticipantMetrics


def _mean(values: Sequence[float]) -> float:
    return np.mean(values).item()


def aggregate(metrics: Sequence[ParticipantMetrics]) -> AggregateStats:
    """Combine N >= 1 per-match metrics.

    Every average is taken over all N matches except the gold difference at
    10 minutes, which only counts matches that reported it and stays None when
    none did.

    Raises:
        ValueError: If ``metrics`` is empty.
    """
    if not metrics:
        raise ValueError("aggregate() requires at least one match")

    games = len(metrics)
    wins = sum(1 for m in metrics if m.win)

    gold_diffs = [m.gold_diff_at_10 for m in metrics if m.gold_diff_at_10 is not None]
    avg_gold_diff_at_10 = _mean(gold_diffs) if gold_diffs else None

    return AggregateStats(
        games=games,
        winrate=wins / games,
        avg_kda=_mean([m.kda for m in metrics]),
        avg_cs_per_min=_mean([m.cs_per_min for m in metrics]),
        avg_gold_per_min=_mean([m.gold_per_min for m in metrics]),
        avg_gold_diff_at_10=avg_gold_diff_at_10,
        avg_kill_participation=_mean([m.kill_participation for m in metrics]),
        avg_dmg_per_min=_mean([m.dmg_per_min for m in metrics]),
        champ_pool_size=len({m.champion for m in metrics}),
    )
