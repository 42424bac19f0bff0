"""Factory functions for creating pre-configured BuildReady collaborators."""

from __future__ import annotations

from buildready.data.market_rates import (
    CITY_MARKET_BANDS,
    DEFAULT_MARKET_BAND,
    STATE_MARKET_BANDS,
)
from buildready.data.repository import MarketDataRepository


def create_default_repository() -> MarketDataRepository:
    """Create a MarketDataRepository loaded with the built-in market bands.

    Example::

        from buildready import create_default_repository

        repo = create_default_repository()
        band = repo.lookup("Austin, TX")
    """
    return MarketDataRepository(
        city_bands=CITY_MARKET_BANDS,
        state_bands=STATE_MARKET_BANDS,
        default_band=DEFAULT_MARKET_BAND,
    )
