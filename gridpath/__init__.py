"""Weighted grid pathfinder with live terrain editing."""

__version__ = "0.1.0"
