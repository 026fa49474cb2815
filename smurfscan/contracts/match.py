"""
Match-V5 payload contracts.

Only the fields the scoring pipeline reads are declared; everything else in the
upstream document is ignored.
"""

from pydantic import Field

from .common import UpstreamContract


class Challenges(UpstreamContract):
    """Optional advanced stats attached to a participant."""

    gold_per_minute: float | None = Field(None, alias="goldPerMinute")
    gold_diff_at_10: float | None = Field(None, alias="goldDiffAt10")


class Participant(UpstreamContract):
    """One player's record within a single match."""

    puuid: str = Field(..., description="Player's PUUID")
    team_id: int = Field(0, alias="teamId", description="100 (blue) or 200 (red)")
    champion_name: str = Field("", alias="championName")
    win: bool = Field(False)

    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)

    total_minions_killed: int = Field(0, ge=0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, ge=0, alias="neutralMinionsKilled")
    gold_earned: int | None = Field(None, ge=0, alias="goldEarned")
    total_damage_dealt_to_champions: int = Field(0, ge=0, alias="totalDamageDealtToChampions")

    challenges: Challenges | None = Field(None)


class MatchMetadata(UpstreamContract):
    match_id: str = Field("", alias="matchId")
    participants: list[str] = Field(default_factory=list, description="Participant PUUIDs")


class MatchInfo(UpstreamContract):
    game_duration: float = Field(0, ge=0, alias="gameDuration", description="Seconds")
    queue_id: int | None = Field(None, alias="queueId")
    participants: list[Participant] = Field(default_factory=list)

    def team_kills(self, team_id: int) -> int:
        """Sum of kills for every participant on ``team_id``."""
        return sum(p.kills for p in self.participants if p.team_id == team_id)


class MatchSummary(UpstreamContract):
    """Parsed match-detail payload. Fetched fresh each run, never persisted."""

    metadata: MatchMetadata = Field(default_factory=MatchMetadata)
    info: MatchInfo

    @property
    def match_id(self) -> str:
        return self.metadata.match_id

    def find_participant(self, puuid: str) -> Participant | None:
        for participant in self.info.participants:
            if participant.puuid == puuid:
                return participant
        return None
