"""Pytest configuration and fixtures for SmurfScan tests.

Match payloads are built in Riot's camelCase wire format so the contracts'
aliases are exercised exactly as in production.
"""

from collections.abc import Callable
from typing import Any

import pytest

from smurfscan.config.settings import Settings, reset_settings
from smurfscan.core.errors import UpstreamError
from smurfscan.core.ports import RiotAPIPort

PLAYER_PUUID = "player-puuid-0001"


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep host env vars and the cached singleton out of every test."""
    for name in ("RIOT_API_KEY", "RIOT_REGION", "RIOT_PLATFORM", "SMURFSCAN_MATCH_COUNT"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, riot_api_key="test_api_key")


def participant(
    puuid: str = PLAYER_PUUID,
    team_id: int = 100,
    champion: str = "Ahri",
    win: bool = True,
    kills: int = 10,
    deaths: int = 2,
    assists: int = 8,
    minions: int = 200,
    neutral: int = 50,
    gold: int | None = 12000,
    damage: int = 15000,
    challenges: dict[str, Any] | None = None,
) -> dict[str, Any]:
    p: dict[str, Any] = {
        "puuid": puuid,
        "teamId": team_id,
        "championName": champion,
        "win": win,
        "kills": kills,
        "deaths": deaths,
        "assists": assists,
        "totalMinionsKilled": minions,
        "neutralMinionsKilled": neutral,
        "totalDamageDealtToChampions": damage,
        # Fields the pipeline does not read must be tolerated
        "summonerName": "whatever",
        "visionScore": 20,
    }
    if gold is not None:
        p["goldEarned"] = gold
    if challenges is not None:
        p["challenges"] = challenges
    return p


def match_payload(
    match_id: str = "NA1_1000000",
    duration: float = 1800,
    participants: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    parts = participants if participants is not None else [participant()]
    return {
        "metadata": {
            "dataVersion": "2",
            "matchId": match_id,
            "participants": [p["puuid"] for p in parts],
        },
        "info": {
            "gameDuration": duration,
            "gameMode": "CLASSIC",
            "queueId": 420,
            "participants": parts,
        },
    }


def standard_match(match_id: str = "NA1_1000000", **player_overrides: Any) -> dict[str, Any]:
    """A 30 minute match where the player's team totals 30 kills."""
    player = participant(**player_overrides)
    team_id = player["teamId"]
    teammates = [
        participant(puuid=f"ally-{i}", team_id=team_id, champion=f"Ally{i}", kills=5)
        for i in range(4)
    ]
    # Team kills = player kills + 20 from allies
    enemies = [
        participant(puuid=f"enemy-{i}", team_id=300 - team_id, champion=f"Enemy{i}", kills=3)
        for i in range(5)
    ]
    return match_payload(match_id=match_id, participants=[player, *teammates, *enemies])


@pytest.fixture
def make_participant() -> Callable[..., dict[str, Any]]:
    return participant


@pytest.fixture
def make_match() -> Callable[..., dict[str, Any]]:
    return match_payload


@pytest.fixture
def make_standard_match() -> Callable[..., dict[str, Any]]:
    return standard_match


class FakeRiotAPI(RiotAPIPort):
    """In-memory RiotAPIPort. Values that are exceptions are raised instead of returned."""

    def __init__(
        self,
        account: dict[str, Any] | Exception | None = None,
        ranked: list[dict[str, Any]] | Exception | None = None,
        match_ids: list[str] | Exception | None = None,
        matches: dict[str, dict[str, Any] | Exception] | None = None,
    ) -> None:
        self.account = account if account is not None else {
            "puuid": PLAYER_PUUID,
            "gameName": "Summoner",
            "tagLine": "NA1",
        }
        self.ranked = ranked if ranked is not None else []
        self.matches = matches if matches is not None else {}
        self.match_ids = match_ids if match_ids is not None else list(self.matches)
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.closed = False

    @staticmethod
    def _answer(value: Any) -> Any:
        if isinstance(value, Exception):
            raise value
        return value

    async def get_account_by_riot_id(self, game_name: str, tag_line: str, region: str):
        self.calls.append(("account", (game_name, tag_line, region)))
        return self._answer(self.account)

    async def get_ranked_entries(self, puuid: str, platform: str):
        self.calls.append(("ranked", (puuid, platform)))
        return self._answer(self.ranked)

    async def get_match_ids(
        self, puuid: str, region: str, count: int = 10, queue: int | None = None
    ):
        self.calls.append(("match_ids", (puuid, region, count, queue)))
        return self._answer(self.match_ids)[:count]

    async def get_match_details(self, match_id: str, region: str):
        self.calls.append(("match", (match_id, region)))
        if match_id not in self.matches:
            raise UpstreamError(f"404 Not Found for {match_id}", status_code=404)
        return self._answer(self.matches[match_id])

    async def close(self) -> None:
        self.closed = True


class ForbiddenRiotAPI(RiotAPIPort):
    """Fails the test on any network call."""

    async def get_account_by_riot_id(self, *args: Any, **kwargs: Any):
        pytest.fail("network call attempted: get_account_by_riot_id")

    async def get_ranked_entries(self, *args: Any, **kwargs: Any):
        pytest.fail("network call attempted: get_ranked_entries")

    async def get_match_ids(self, *args: Any, **kwargs: Any):
        pytest.fail("network call attempted: get_match_ids")

    async def get_match_details(self, *args: Any, **kwargs: Any):
        pytest.fail("network call attempted: get_match_details")


@pytest.fixture
def fake_riot_api_factory() -> Callable[..., FakeRiotAPI]:
    return FakeRiotAPI


@pytest.fixture
def forbidden_riot_api() -> ForbiddenRiotAPI:
    return ForbiddenRiotAPI()
