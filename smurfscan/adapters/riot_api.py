"""Riot API adapter over aiohttp.

Provides:
- Account-V1 by Riot ID (regional host)
- League-V4 entries by PUUID (platform host)
- Match-V5 IDs/Match (regional host)

Implements RiotAPIPort with consistent async semantics and session reuse.
Every non-2xx answer raises UpstreamError carrying status and a body snippet.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import quote, urlencode

import aiohttp

from smurfscan.config.settings import (
    MAX_MATCH_COUNT,
    MIN_MATCH_COUNT,
    Settings,
    get_settings,
    require_api_key,
)
from smurfscan.contracts.common import Platform, Region
from smurfscan.core.errors import UpstreamError
from smurfscan.core.ports import RiotAPIPort

logger = logging.getLogger(__name__)


class RiotAPIAdapter(RiotAPIPort):
    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        # Fails fast with MissingConfigurationError before any request
        self._api_key = require_api_key(self._settings)
        self._timeout = aiohttp.ClientTimeout(total=self._settings.request_timeout_seconds)
        self._session: Any | None = None
        self._session_loop: asyncio.AbstractEventLoop | None = None
        logger.info("Riot API adapter initialized")

    async def _ensure_session(self):
        loop = asyncio.get_running_loop()
        needs_new_session = (
            self._session is None
            or getattr(self._session, "closed", True)
            or self._session_loop is None
            or self._session_loop is not loop
        )
        if needs_new_session:
            if self._session and not getattr(self._session, "closed", True):
                try:
                    await self._session.close()
                except Exception:
                    logger.warning("Failed to close stale Riot API session", exc_info=True)
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._session_loop = loop
        return self._session

    async def close(self) -> None:
        try:
            if self._session and not self._session.closed:
                await self._session.close()
        finally:
            self._session = None
            self._session_loop = None

    async def _get_json(self, url: str) -> Any:
        headers = {"X-Riot-Token": self._api_key}
        logger.info("Fetching %s", url)
        try:
            session = await self._ensure_session()
            async with session.get(url, headers=headers) as resp:
                logger.debug("Riot API responded %s for %s", resp.status, url)
                if not 200 <= resp.status < 300:
                    body = await resp.text()
                    logger.error(
                        "Riot API error %s %s for %s: %s", resp.status, resp.reason, url, body
                    )
                    raise UpstreamError.from_response(resp.status, resp.reason, body, url)
                try:
                    return await resp.json()
                except ValueError as e:
                    logger.error("Riot API returned invalid JSON for %s: %s", url, e)
                    raise UpstreamError(
                        f"Invalid JSON from {url}", status_code=resp.status, url=url
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("Riot API request failed for %s: %r", url, e)
            raise UpstreamError(f"Request failed for {url}: {e!r}", url=url) from e

    async def get_account_by_riot_id(
        self, game_name: str, tag_line: str, region: str = "americas"
    ) -> dict[str, Any]:
        url = (
            f"https://{region}.api.riotgames.com/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected account payload for {url}", url=url)
        return data

    async def get_ranked_entries(self, puuid: str, platform: str = "na1") -> list[dict[str, Any]]:
        url = (
            f"https://{platform.lower()}.api.riotgames.com/lol/league/v4/entries/by-puuid/"
            f"{quote(puuid, safe='')}"
        )
        data = await self._get_json(url)
        return [e for e in data if isinstance(e, dict)] if isinstance(data, list) else []

    async def get_match_ids(
        self, puuid: str, region: str = "americas", count: int = 10, queue: int | None = None
    ) -> list[str]:
        count = max(MIN_MATCH_COUNT, min(count, MAX_MATCH_COUNT))
        params: dict[str, Any] = {"start": 0, "count": count}
        if queue is not None:
            params["queue"] = queue
        url = (
            f"https://{region}.api.riotgames.com/lol/match/v5/matches/by-puuid/"
            f"{quote(puuid, safe='')}/ids?{urlencode(params)}"
        )
        data = await self._get_json(url)
        return [str(m) for m in data] if isinstance(data, list) else []

    async def get_match_details(self, match_id: str, region: str = "americas") -> dict[str, Any]:
        url = f"https://{region}.api.riotgames.com/lol/match/v5/matches/{quote(match_id, safe='')}"
        data = await self._get_json(url)
        if not isinstance(data, dict):
            raise UpstreamError(f"Unexpected match payload for {url}", url=url)
        return data


_PLATFORM_REGIONS: dict[Platform, Region] = {
    Platform.NA1: Region.AMERICAS,
    Platform.BR1: Region.AMERICAS,
    Platform.LA1: Region.AMERICAS,
    Platform.LA2: Region.AMERICAS,
    Platform.EUW1: Region.EUROPE,
    Platform.EUN1: Region.EUROPE,
    Platform.RU: Region.EUROPE,
    Platform.TR1: Region.EUROPE,
    Platform.ME1: Region.EUROPE,
    Platform.KR: Region.ASIA,
    Platform.JP1: Region.ASIA,
    Platform.OC1: Region.SEA,
    Platform.PH2: Region.SEA,
    Platform.SG2: Region.SEA,
    Platform.TH2: Region.SEA,
    Platform.TW2: Region.SEA,
    Platform.VN2: Region.SEA,
}


def regional_routing(platform_region: str) -> str:
    """Map a platform (e.g. 'euw1') to its regional routing host.

    Unknown platforms fall back to americas.
    """
    try:
        platform = Platform(platform_region.lower())
    except ValueError:
        logger.warning("Unknown platform %r; routing via americas", platform_region)
        return Region.AMERICAS.value
    return _PLATFORM_REGIONS[platform].value
