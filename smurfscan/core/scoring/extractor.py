"""Per-match metric extraction - pure functions over a parsed Match-V5 payload.

This module MUST NOT perform any I/O; the payload is fetched by the adapter layer.
"""

import logging

from smurfscan.contracts.match import MatchSummary, Participant
from smurfscan.core.scoring.models import ParticipantMetrics

logger = logging.getLogger(__name__)

_MIN_DURATION_MINUTES = 1.0
_MIN_DEATHS = 1


def duration_minutes(game_duration_seconds: float) -> float:
    """Match length in minutes, floored at one minute for aborted games."""
    return max(_MIN_DURATION_MINUTES, game_duration_seconds / 60)


def calculate_kda(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths with deaths floored to 1."""
    return (kills + assists) / max(_MIN_DEATHS, deaths)


def calculate_kill_participation(kills: int, assists: int, team_kills: int) -> float:
    if team_kills <= 0:
        return 0.0
    return (kills + assists) / team_kills


def _gold_total(participant: Participant, minutes: float) -> float:
    if participant.gold_earned is not None:
        return float(participant.gold_earned)
    challenges = participant.challenges
    if challenges is not None and challenges.gold_per_minute is not None:
        return challenges.gold_per_minute * minutes
    return 0.0


def metrics_from_participant(participant: Participant, match: MatchSummary) -> ParticipantMetrics:
    """Derive the per-match metrics for one participant record."""
    minutes = duration_minutes(match.info.game_duration)

    kills = participant.kills
    deaths = participant.deaths
    assists = participant.assists

    cs = participant.total_minions_killed + participant.neutral_minions_killed
    gold_diff_at_10 = (
        participant.challenges.gold_diff_at_10 if participant.challenges is not None else None
    )

    return ParticipantMetrics(
        match_id=match.match_id or None,
        champion=participant.champion_name,
        win=participant.win,
        kills=kills,
        deaths=deaths,
        assists=assists,
        kda=calculate_kda(kills, deaths, assists),
        cs_per_min=cs / minutes,
        gold_per_min=_gold_total(participant, minutes) / minutes,
        dmg_per_min=participant.total_damage_dealt_to_champions / minutes,
        gold_diff_at_10=gold_diff_at_10,
        kill_participation=calculate_kill_participation(
            kills, assists, match.info.team_kills(participant.team_id)
        ),
    )


def extract(match: MatchSummary, puuid: str) -> ParticipantMetrics | None:
    """Locate ``puuid`` in the match and derive its metrics.

    Returns None (and logs a warning) when the player is not a participant,
    e.g. identity mismatch or upstream data lag.
    """
    participant = match.find_participant(puuid)
    if participant is None:
        logger.warning(
            "PUUID not found in match %s; skipping", match.match_id or "(unknown)"
        )
        return None
    return metrics_from_participant(participant, match)
