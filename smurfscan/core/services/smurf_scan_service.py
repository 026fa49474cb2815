"""Smurf Scan Service - end-to-end orchestration of one scan.

Flow: resolve identity -> ranked entries -> recent match ids -> match details
(concurrent) -> per-match metrics -> aggregate -> score -> verdict.

Error policy:
- InvalidIdentifierError is raised before any port call.
- UpstreamError from identity resolution or the match list is fatal.
- Ranked entries are informational; their failure only logs a warning.
- Per-match failures are skipped; an empty sample raises NoDataError.
"""

import logging

from pydantic import ValidationError

from smurfscan.config.settings import Settings, get_settings
from smurfscan.contracts.account import LeagueEntry, PlayerIdentity
from smurfscan.contracts.report import SmurfReport
from smurfscan.core.errors import NoDataError, UpstreamError
from smurfscan.core.observability import traced
from smurfscan.core.ports import RiotAPIPort
from smurfscan.core.scoring import aggregate, evaluate_rules, extract, verdict
from smurfscan.core.scoring.models import ParticipantMetrics
from smurfscan.core.services.account_resolver import AccountResolver, parse_riot_id
from smurfscan.core.services.match_fetcher import MatchFetcher

logger = logging.getLogger(__name__)


class SmurfScanService:
    """Runs the scan pipeline against a RiotAPIPort."""

    def __init__(
        self,
        riot_api: RiotAPIPort,
        settings: Settings | None = None,
        region: str | None = None,
        platform: str | None = None,
    ):
        self.riot_api = riot_api
        self.settings = settings or get_settings()
        self.region = region or self.settings.riot_region
        self.platform = platform or self.settings.riot_platform
        self.resolver = AccountResolver(riot_api)
        self.fetcher = MatchFetcher(riot_api, region=self.region)

    async def scan_riot_id(
        self, riot_id: str, count: int | None = None, queue: int | None = None
    ) -> SmurfReport:
        """Scan a ``GameName#TAG`` string."""
        game_name, tag_line = parse_riot_id(riot_id)
        return await self.scan(game_name, tag_line, count=count, queue=queue)

    @traced(log_level="INFO", add_metadata={"flow": "smurf_scan"})
    async def scan(
        self,
        game_name: str,
        tag_line: str,
        count: int | None = None,
        queue: int | None = None,
    ) -> SmurfReport:
        count = count if count is not None else self.settings.match_count
        queue = queue if queue is not None else self.settings.match_queue

        identity = await self.resolver.resolve(game_name, tag_line, self.region)
        ranked_entries = await self._ranked_entries(identity)

        match_ids = await self.fetcher.list_recent_match_ids(identity.puuid, count, queue)
        if not match_ids:
            raise NoDataError(f"No recent matches found for {identity.riot_id}")

        batch = await self.fetcher.fetch_match_details(match_ids)

        metrics: list[ParticipantMetrics] = []
        missing_player_ids: list[str] = []
        for match in batch.matches:
            m = extract(match, identity.puuid)
            if m is None:
                missing_player_ids.append(match.match_id)
                continue
            metrics.append(m)

        if not metrics:
            raise NoDataError(
                f"No matches contained {identity.riot_id} "
                f"({len(match_ids)} requested, {len(batch.failed_ids)} failed to load)"
            )

        agg = aggregate(metrics)
        rule_hits = evaluate_rules(agg)
        total = sum(hit.points for hit in rule_hits)

        report = SmurfReport(
            identity=identity,
            ranked_entries=ranked_entries,
            aggregate=agg,
            score=total,
            verdict=verdict(total),
            rule_hits=rule_hits,
            matches_requested=len(match_ids),
            matches_analyzed=len(metrics),
            failed_match_ids=batch.failed_ids,
            missing_player_match_ids=missing_player_ids,
        )
        logger.info(
            "Scan complete for %s: score=%d verdict=%s games=%d",
            identity.riot_id,
            report.score,
            report.verdict,
            agg.games,
        )
        return report

    async def _ranked_entries(self, identity: PlayerIdentity) -> list[LeagueEntry]:
        try:
            raw = await self.riot_api.get_ranked_entries(identity.puuid, self.platform)
            return [LeagueEntry.model_validate(entry) for entry in raw]
        except (UpstreamError, ValidationError) as e:
            logger.warning("Ranked entries unavailable for %s: %s", identity.riot_id, e)
            return []
