"""
Account and ranked-entry data contracts.
"""

from pydantic import Field

from .common import BaseContract, UpstreamContract


class PlayerIdentity(BaseContract):
    """A Riot ID resolved to its stable PUUID."""

    game_name: str = Field(..., min_length=1, description="Game name")
    tag_line: str = Field(..., min_length=1, description="Tag line (without '#')")
    puuid: str = Field(..., min_length=1, description="Player's PUUID")
    region: str = Field("americas", description="Regional routing used for the lookup")

    @property
    def riot_id(self) -> str:
        """Get full Riot ID with tagline."""
        return f"{self.game_name}#{self.tag_line}"


class LeagueEntry(UpstreamContract):
    """League/Ranked information from league-v4."""

    queue_type: str = Field(
        ..., alias="queueType", description="Queue type (e.g., RANKED_SOLO_5x5)"
    )
    tier: str | None = Field(None, description="Tier (IRON to CHALLENGER)")
    rank: str | None = Field(None, description="Division within tier")
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = Field(0, ge=0)
    losses: int = Field(0, ge=0)

    @property
    def games(self) -> int:
        return self.wins + self.losses

    @property
    def win_rate(self) -> float:
        """Win rate as a 0..1 fraction (0 when no games were played)."""
        if self.games == 0:
            return 0.0
        return self.wins / self.games

    @property
    def label(self) -> str:
        if not self.tier:
            return "Unranked"
        if self.rank:
            return f"{self.tier} {self.rank}"
        return self.tier
