"""Smurf score calculation - pure domain functions with zero I/O.

The score is a sum of independent boolean rules; rules never exclude each
other. The verdict maps the score to an ordered tier.
"""

from collections.abc import Callable
from dataclasses import dataclass

from smurfscan.core.scoring import thresholds as t
from smurfscan.core.scoring.models import AggregateStats, RuleHit, Verdict


@dataclass(frozen=True)
class ScoringRule:
    name: str
    points: int
    description: str
    predicate: Callable[[AggregateStats], bool]

    def hit(self) -> RuleHit:
        return RuleHit(name=self.name, points=self.points, description=self.description)


SCORING_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(
        "small_champion_pool",
        t.SMALL_CHAMP_POOL_POINTS,
        f"Champion pool <= {t.MAX_CHAMP_POOL_SIZE}",
        lambda agg: agg.champ_pool_size <= t.MAX_CHAMP_POOL_SIZE,
    ),
    ScoringRule(
        "high_kda",
        t.HIGH_KDA_POINTS,
        f"Avg KDA >= {t.MIN_AVG_KDA}",
        lambda agg: agg.avg_kda >= t.MIN_AVG_KDA,
    ),
    ScoringRule(
        "high_cs_per_min",
        t.HIGH_CS_POINTS,
        f"Avg CS/min >= {t.MIN_AVG_CS_PER_MIN}",
        lambda agg: agg.avg_cs_per_min >= t.MIN_AVG_CS_PER_MIN,
    ),
    ScoringRule(
        "high_gold_per_min",
        t.HIGH_GOLD_POINTS,
        f"Avg gold/min >= {t.MIN_AVG_GOLD_PER_MIN:g}",
        lambda agg: agg.avg_gold_per_min >= t.MIN_AVG_GOLD_PER_MIN,
    ),
    ScoringRule(
        "early_gold_lead",
        t.EARLY_GOLD_LEAD_POINTS,
        f"Avg gold diff @10 >= {t.MIN_AVG_GOLD_DIFF_AT_10:g}",
        lambda agg: agg.avg_gold_diff_at_10 is not None
        and agg.avg_gold_diff_at_10 >= t.MIN_AVG_GOLD_DIFF_AT_10,
    ),
    ScoringRule(
        "high_winrate",
        t.HIGH_WINRATE_POINTS,
        f"Winrate >= {t.MIN_WINRATE:.0%}",
        lambda agg: agg.winrate >= t.MIN_WINRATE,
    ),
    ScoringRule(
        "high_damage_per_min",
        t.HIGH_DAMAGE_POINTS,
        f"Avg damage/min >= {t.MIN_AVG_DMG_PER_MIN:g}",
        lambda agg: agg.avg_dmg_per_min >= t.MIN_AVG_DMG_PER_MIN,
    ),
    ScoringRule(
        "high_kill_participation",
        t.HIGH_KILL_PARTICIPATION_POINTS,
        f"Avg kill participation >= {t.MIN_AVG_KILL_PARTICIPATION:.0%}",
        lambda agg: agg.avg_kill_participation >= t.MIN_AVG_KILL_PARTICIPATION,
    ),
)


def evaluate_rules(agg: AggregateStats) -> list[RuleHit]:
    """Return every rule that fired for ``agg``, in rule order."""
    return [rule.hit() for rule in SCORING_RULES if rule.predicate(agg)]


def score(agg: AggregateStats) -> int:
    """Sum of the points of every rule that fired."""
    return sum(hit.points for hit in evaluate_rules(agg))


def verdict(value: int) -> Verdict:
    """Map a score to its tier, checking the highest cut-off first."""
    for minimum, tier in t.VERDICT_TIERS:
        if value >= minimum:
            return tier
    return t.DEFAULT_VERDICT
