"""Adapter implementations for external services."""

from .riot_api import RiotAPIAdapter, regional_routing

__all__ = ["RiotAPIAdapter", "regional_routing"]
