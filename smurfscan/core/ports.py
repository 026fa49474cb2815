"""Port interfaces for hexagonal architecture.

These ports define the contracts between the core domain and external adapters.
Services depend on the port, so tests can substitute a fake without patching
module globals.
"""

from abc import ABC, abstractmethod
from typing import Any


class RiotAPIPort(ABC):
    """Port for Riot Games API operations.

    Implementations raise ``UpstreamError`` for any non-2xx answer.
    """

    @abstractmethod
    async def get_account_by_riot_id(
        self, game_name: str, tag_line: str, region: str
    ) -> dict[str, Any]:
        """Get account (puuid, gameName, tagLine) by Riot ID from Account-V1."""
        pass

    @abstractmethod
    async def get_ranked_entries(self, puuid: str, platform: str) -> list[dict[str, Any]]:
        """Get ranked league entries for a PUUID from League-V4."""
        pass

    @abstractmethod
    async def get_match_ids(
        self, puuid: str, region: str, count: int = 10, queue: int | None = None
    ) -> list[str]:
        """Get recent match IDs (newest first) from Match-V5."""
        pass

    @abstractmethod
    async def get_match_details(self, match_id: str, region: str) -> dict[str, Any]:
        """Get match details from Match-V5 API."""
        pass

    async def close(self) -> None:
        """Release any held transport resources."""
        return None
