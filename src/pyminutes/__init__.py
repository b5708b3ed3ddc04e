"""Projection ingestion and minute reallocation for NBA stat projections."""

__version__ = "0.1.0"
