"""
Data contracts for SmurfScan.

Upstream payloads (Riot API) are parsed leniently; values derived here are frozen.
"""

from .account import LeagueEntry, PlayerIdentity
from .common import BaseContract, Platform, Region, UpstreamContract
from .match import Challenges, MatchInfo, MatchMetadata, MatchSummary, Participant
from .report import SmurfReport

__all__ = [
    "BaseContract",
    "UpstreamContract",
    "Region",
    "Platform",
    "PlayerIdentity",
    "LeagueEntry",
    "Challenges",
    "Participant",
    "MatchMetadata",
    "MatchInfo",
    "MatchSummary",
    "SmurfReport",
]
