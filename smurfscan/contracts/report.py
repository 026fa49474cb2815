"""
Smurf scan report contract - the output of one full scan.
"""

from pydantic import Field, computed_field

from smurfscan.core.scoring.models import AggregateStats, RuleHit, Verdict

from .account import LeagueEntry, PlayerIdentity
from .common import BaseContract


class SmurfReport(BaseContract):
    """Everything the CLI and the HTTP endpoint render for one player."""

    identity: PlayerIdentity
    ranked_entries: list[LeagueEntry] = Field(default_factory=list)
    aggregate: AggregateStats
    score: int = Field(..., ge=0)
    verdict: Verdict
    rule_hits: list[RuleHit] = Field(default_factory=list)

    matches_requested: int = Field(..., ge=0, description="Match ids returned by upstream")
    matches_analyzed: int = Field(..., ge=1, description="Matches that contributed metrics")
    failed_match_ids: list[str] = Field(
        default_factory=list, description="Matches whose detail fetch failed"
    )
    missing_player_match_ids: list[str] = Field(
        default_factory=list, description="Matches that did not contain the player"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matches_skipped(self) -> int:
        """Requested matches that failed to load or did not contain the player."""
        return self.matches_requested - self.matches_analyzed
