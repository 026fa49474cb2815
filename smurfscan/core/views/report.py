"""Plain-text rendering of a SmurfReport for the terminal."""

from __future__ import annotations

from smurfscan.contracts.report import SmurfReport
from smurfscan.core.scoring.models import Verdict
from smurfscan.core.scoring.thresholds import MAX_SCORE

VERDICT_MARKERS = {
    Verdict.ALMOST_CERTAINLY_SMURF.value: "🟥",
    Verdict.LIKELY_SMURF.value: "🟧",
    Verdict.POSSIBLY_SMURF.value: "🟨",
    Verdict.LIKELY_LEGIT.value: "🟩",
}


def _pct(v: float) -> str:
    return f"{v * 100:.1f}%"


def render_report(report: SmurfReport, ascii_safe: bool = False) -> str:
    agg = report.aggregate
    verdict = Verdict(report.verdict).value

    lines: list[str] = []
    lines.append(f"--- Smurf Index: {report.identity.riot_id} ---")

    if report.ranked_entries:
        for entry in report.ranked_entries:
            lines.append(
                f"Ranked {entry.queue_type}: {entry.label} {entry.league_points} LP "
                f"({entry.wins}W/{entry.losses}L, {_pct(entry.win_rate)})"
            )
    else:
        lines.append("Ranked: no entries")

    skipped = f" ({report.matches_skipped} skipped)" if report.matches_skipped else ""
    lines.append(f"Matches analyzed: {agg.games} of {report.matches_requested}{skipped}")
    lines.append(f"Winrate: {_pct(agg.winrate)}")
    lines.append(f"Avg KDA: {agg.avg_kda:.2f}")
    lines.append(f"Avg CS/min: {agg.avg_cs_per_min:.2f}")
    lines.append(f"Avg Gold/min: {agg.avg_gold_per_min:.1f}")
    gold_diff = "N/A" if agg.avg_gold_diff_at_10 is None else f"{round(agg.avg_gold_diff_at_10)}"
    lines.append(f"Avg GoldDiff@10: {gold_diff}")
    lines.append(f"Avg Kill Participation: {_pct(agg.avg_kill_participation)}")
    lines.append(f"Avg Damage/min: {agg.avg_dmg_per_min:.1f}")
    lines.append(f"Champ pool size (unique champs in sampled games): {agg.champ_pool_size}")

    if report.rule_hits:
        lines.append("Signals:")
        for hit in report.rule_hits:
            lines.append(f"  +{hit.points} {hit.description or hit.name}")
    else:
        lines.append("Signals: none")

    marker = "" if ascii_safe else f"{VERDICT_MARKERS.get(verdict, '')} "
    arrow = "->" if ascii_safe else "→"
    lines.append(f"Smurf Index: {report.score}/{MAX_SCORE} {arrow} {marker}{verdict}")
    return "\n".join(lines)
