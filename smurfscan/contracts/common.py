"""
Common data types and base models for SmurfScan.
All models use Pydantic V2.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Region(str, Enum):
    """Riot API regional routing values (account-v1, match-v5)."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"
    SEA = "sea"


class Platform(str, Enum):
    """Riot API Platforms (game servers)."""

    BR1 = "br1"  # Brazil
    EUN1 = "eun1"  # Europe Nordic & East
    EUW1 = "euw1"  # Europe West
    JP1 = "jp1"  # Japan
    KR = "kr"  # Korea
    LA1 = "la1"  # Latin America North
    LA2 = "la2"  # Latin America South
    ME1 = "me1"  # Middle East
    NA1 = "na1"  # North America
    OC1 = "oc1"  # Oceania
    PH2 = "ph2"  # Philippines
    RU = "ru"  # Russia
    SG2 = "sg2"  # Singapore
    TH2 = "th2"  # Thailand
    TR1 = "tr1"  # Turkey
    TW2 = "tw2"  # Taiwan
    VN2 = "vn2"  # Vietnam


class BaseContract(BaseModel):
    """Base model for values this project derives itself."""

    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        extra="forbid",
    )


class UpstreamContract(BaseModel):
    """Base model for Riot API payloads.

    Upstream owns these shapes, so unknown fields are ignored rather than rejected.
    Fields are declared in snake_case with the camelCase wire name as alias.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
