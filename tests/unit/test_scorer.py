"""Unit tests for the smurf scorer and verdict tiers."""

import pytest

from smurfscan.core.scoring import thresholds
from smurfscan.core.scoring.models import AggregateStats, Verdict
from smurfscan.core.scoring.scorer import SCORING_RULES, evaluate_rules, score, verdict


def _agg(**overrides) -> AggregateStats:
    """An aggregate that trips no rule; override fields to trip them."""
    values = {
        "games": 10,
        "winrate": 0.5,
        "avg_kda": 2.0,
        "avg_cs_per_min": 5.0,
        "avg_gold_per_min": 250.0,
        "avg_gold_diff_at_10": None,
        "avg_kill_participation": 0.4,
        "avg_dmg_per_min": 200.0,
        "champ_pool_size": 6,
    }
    values.update(overrides)
    return AggregateStats(**values)


def test_baseline_scores_zero():
    assert score(_agg()) == 0
    assert evaluate_rules(_agg()) == []


def test_every_rule_fires_for_strong_aggregate():
    agg = _agg(
        champ_pool_size=2,
        avg_kda=5.0,
        avg_cs_per_min=8.0,
        avg_gold_per_min=350.0,
        avg_gold_diff_at_10=1200.0,
        winrate=0.7,
        avg_dmg_per_min=350.0,
        avg_kill_participation=0.6,
    )

    assert score(agg) == 1 + 2 + 2 + 1 + 2 + 3 + 1 + 1
    assert score(agg) == 13
    assert verdict(score(agg)) == Verdict.LIKELY_SMURF
    assert [hit.name for hit in evaluate_rules(agg)] == [rule.name for rule in SCORING_RULES]


@pytest.mark.parametrize(
    ("overrides", "rule", "points"),
    [
        ({"champ_pool_size": 3}, "small_champion_pool", 1),
        ({"avg_kda": 4.0}, "high_kda", 2),
        ({"avg_cs_per_min": 7.5}, "high_cs_per_min", 2),
        ({"avg_gold_per_min": 300.0}, "high_gold_per_min", 1),
        ({"avg_gold_diff_at_10": 1000.0}, "early_gold_lead", 2),
        ({"winrate": 0.65}, "high_winrate", 3),
        ({"avg_dmg_per_min": 300.0}, "high_damage_per_min", 1),
        ({"avg_kill_participation": 0.55}, "high_kill_participation", 1),
    ],
)
def test_each_rule_fires_at_its_threshold(overrides, rule, points):
    hits = evaluate_rules(_agg(**overrides))

    assert [(h.name, h.points) for h in hits] == [(rule, points)]
    assert score(_agg(**overrides)) == points


@pytest.mark.parametrize(
    "overrides",
    [
        {"champ_pool_size": 4},
        {"avg_kda": 3.99},
        {"avg_cs_per_min": 7.49},
        {"avg_gold_per_min": 299.9},
        {"avg_gold_diff_at_10": 999.0},
        {"winrate": 0.64},
        {"avg_dmg_per_min": 299.9},
        {"avg_kill_participation": 0.549},
    ],
)
def test_rules_do_not_fire_just_below_threshold(overrides):
    assert score(_agg(**overrides)) == 0


def test_missing_gold_diff_never_fires_early_lead_rule():
    assert score(_agg(avg_gold_diff_at_10=None)) == 0


def test_max_score_matches_rule_weights():
    assert thresholds.MAX_SCORE == sum(rule.points for rule in SCORING_RULES)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, Verdict.LIKELY_LEGIT),
        (4, Verdict.LIKELY_LEGIT),
        (5, Verdict.POSSIBLY_SMURF),
        (8, Verdict.POSSIBLY_SMURF),
        (9, Verdict.LIKELY_SMURF),
        (13, Verdict.LIKELY_SMURF),
        (14, Verdict.ALMOST_CERTAINLY_SMURF),
        (20, Verdict.ALMOST_CERTAINLY_SMURF),
    ],
)
def test_verdict_tiers(value, expected):
    assert verdict(value) == expected


def test_verdict_labels():
    assert Verdict.ALMOST_CERTAINLY_SMURF.value == "Almost Certainly Smurf"
    assert Verdict.LIKELY_SMURF.value == "Likely Smurf"
    assert Verdict.POSSIBLY_SMURF.value == "Possibly Smurf"
    assert Verdict.LIKELY_LEGIT.value == "Likely Legit"
