"""Service layer implementing business logic.

Services connect the RiotAPIPort with the pure scoring functions,
providing high-level operations to the CLI and the HTTP server.
"""

from smurfscan.core.services.account_resolver import AccountResolver, parse_riot_id
from smurfscan.core.services.match_fetcher import MatchBatch, MatchFetcher
from smurfscan.core.services.smurf_scan_service import SmurfScanService

__all__ = [
    "AccountResolver",
    "MatchBatch",
    "MatchFetcher",
    "SmurfScanService",
    "parse_riot_id",
]
