"""SmurfScan: heuristic smurf detection over Riot Match-V5 data."""

__version__ = "0.1.0"
