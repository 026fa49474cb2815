"""HTTP surface for SmurfScan."""

from smurfscan.api.server import SmurfScanServer

__all__ = ["SmurfScanServer"]
