"""Scoring, note state, ranking-server client and highway layout logic for a BMS rhythm game player."""

__version__ = "0.1.0"