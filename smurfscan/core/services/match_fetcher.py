"""Match Fetcher - recent match ids and their detail payloads.

Detail payloads are fetched concurrently. A failed fetch (non-2xx, transport
error or unparseable payload) is logged and skipped; it never aborts the batch.
"""

import asyncio
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from smurfscan.contracts.match import MatchSummary
from smurfscan.core.errors import UpstreamError
from smurfscan.core.ports import RiotAPIPort

logger = logging.getLogger(__name__)


@dataclass
class MatchBatch:
    """Result of a concurrent detail fetch."""

    matches: list[MatchSummary] = field(default_factory=list)
    failed_ids: list[str] = field(default_factory=list)


class MatchFetcher:
    def __init__(self, riot_api: RiotAPIPort, region: str = "americas"):
        self.riot_api = riot_api
        self.region = region

    async def list_recent_match_ids(
        self, puuid: str, count: int = 10, queue: int | None = None
    ) -> list[str]:
        """Recent match ids, newest first, in the order upstream returned them."""
        match_ids = await self.riot_api.get_match_ids(puuid, self.region, count=count, queue=queue)
        logger.info("Found %d recent matches", len(match_ids))
        return match_ids

    async def _fetch_one(self, match_id: str) -> MatchSummary:
        payload = await self.riot_api.get_match_details(match_id, self.region)
        return MatchSummary.model_validate(payload)

    async def fetch_match_details(self, match_ids: list[str]) -> MatchBatch:
        """Fetch every match concurrently; completion order is irrelevant downstream."""
        results = await asyncio.gather(
            *(self._fetch_one(match_id) for match_id in match_ids), return_exceptions=True
        )

        batch = MatchBatch()
        for match_id, result in zip(match_ids, results):
            if isinstance(result, MatchSummary):
                batch.matches.append(result)
            elif isinstance(result, (UpstreamError, ValidationError)):
                logger.warning("Skipping match %s: %s", match_id, result)
                batch.failed_ids.append(match_id)
            else:
                # Anything else is a programming error, not a per-match failure
                raise result
        return batch
