"""Account Resolver - Riot ID (GameName#TAG) to PUUID resolution.

Validation happens before the port is touched, so a malformed Riot ID never
costs an API call.
"""

import logging

from smurfscan.contracts.account import PlayerIdentity
from smurfscan.core.errors import InvalidIdentifierError, UpstreamError
from smurfscan.core.ports import RiotAPIPort

logger = logging.getLogger(__name__)


def parse_riot_id(riot_id: str) -> tuple[str, str]:
    """Split ``GameName#TAG`` into its parts.

    Game names may themselves contain '#', so the split happens on the last one.

    Raises:
        InvalidIdentifierError: When either part is empty or there is no '#'.
    """
    if not riot_id or "#" not in riot_id:
        raise InvalidIdentifierError("Invalid Riot ID. Must be GameName#TagLine")
    game_name, _, tag_line = riot_id.rpartition("#")
    game_name, tag_line = game_name.strip(), tag_line.strip()
    if not game_name or not tag_line:
        raise InvalidIdentifierError("Invalid Riot ID. Must be GameName#TagLine")
    return game_name, tag_line


class AccountResolver:
    """Resolves a display name and tag to a stable player identity."""

    def __init__(self, riot_api: RiotAPIPort):
        self.riot_api = riot_api

    async def resolve(
        self, display_name: str, tag: str, region: str = "americas"
    ) -> PlayerIdentity:
        """Resolve ``display_name#tag`` via Account-V1.

        Raises:
            InvalidIdentifierError: When display_name or tag is empty.
            UpstreamError: When the API answers non-2xx or omits the puuid.
        """
        display_name = (display_name or "").strip()
        tag = (tag or "").strip()
        if not display_name:
            raise InvalidIdentifierError("Game name missing")
        if not tag:
            raise InvalidIdentifierError("Tag line missing")

        account = await self.riot_api.get_account_by_riot_id(display_name, tag, region)
        puuid = account.get("puuid")
        if not puuid:
            raise UpstreamError(f"Account response for {display_name}#{tag} has no puuid")

        identity = PlayerIdentity(
            game_name=account.get("gameName") or display_name,
            tag_line=account.get("tagLine") or tag,
            puuid=puuid,
            region=region,
        )
        logger.info("Resolved %s to puuid %s...", identity.riot_id, puuid[:8])
        return identity
