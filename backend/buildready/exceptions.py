"""Custom exception hierarchy for BuildReady."""

from __future__ import annotations


class BuildReadyError(Exception):
    """Base exception for all BuildReady errors."""


class InvalidLocationError(BuildReadyError):
    """Raised when a market location string cannot be parsed."""


class MarketDataError(BuildReadyError):
    """Raised when a city, state or default market band has no positive rate."""
