"""Smurf scoring thresholds.

Every rule threshold and verdict cut-off lives here so the scorer never
carries inline literals. Gold/min and damage/min values are the working
recommendations (300 each); the intended product values are still open.
"""

from smurfscan.core.scoring.models import Verdict

# Rule thresholds
MAX_CHAMP_POOL_SIZE = 3
MIN_AVG_KDA = 4.0
MIN_AVG_CS_PER_MIN = 7.5
MIN_AVG_GOLD_PER_MIN = 300.0
MIN_AVG_GOLD_DIFF_AT_10 = 1000.0
MIN_WINRATE = 0.65
MIN_AVG_DMG_PER_MIN = 300.0
MIN_AVG_KILL_PARTICIPATION = 0.55

# Rule weights
SMALL_CHAMP_POOL_POINTS = 1
HIGH_KDA_POINTS = 2
HIGH_CS_POINTS = 2
HIGH_GOLD_POINTS = 1
EARLY_GOLD_LEAD_POINTS = 2
HIGH_WINRATE_POINTS = 3
HIGH_DAMAGE_POINTS = 1
HIGH_KILL_PARTICIPATION_POINTS = 1

# Verdict cut-offs, highest first
VERDICT_TIERS: tuple[tuple[int, Verdict], ...] = (
    (14, Verdict.ALMOST_CERTAINLY_SMURF),
    (9, Verdict.LIKELY_SMURF),
    (5, Verdict.POSSIBLY_SMURF),
)
DEFAULT_VERDICT = Verdict.LIKELY_LEGIT

# Upper bound of score(); all rule weights summed
MAX_SCORE = (
    SMALL_CHAMP_POOL_POINTS
    + HIGH_KDA_POINTS
    + HIGH_CS_POINTS
    + HIGH_GOLD_POINTS
    + EARLY_GOLD_LEAD_POINTS
    + HIGH_WINRATE_POINTS
    + HIGH_DAMAGE_POINTS
    + HIGH_KILL_PARTICIPATION_POINTS
)
