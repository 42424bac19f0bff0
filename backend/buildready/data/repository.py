"""Market-rate repository for looking up local $/SF bands."""

from __future__ import annotations

import logging

from buildready.data.market_rates import (
    CITY_MARKET_BANDS,
    DEFAULT_MARKET_BAND,
    STATE_MARKET_BANDS,
)
from buildready.exceptions import InvalidLocationError, MarketDataError
from buildready.models.budget import MarketBand

logger = logging.getLogger(__name__)


def parse_location(location: str) -> tuple[str, str]:
    """Split a 'City, ST' string into lowercased (city, state).

    The state part is optional; a bare city returns an empty state.

    Raises:
        InvalidLocationError: If the string has no city.
    """
    city, _, state = location.partition(",")
    city = city.strip().lower()
    state = state.strip().lower()
    if not city:
        msg = f"Location must name a city, got {location!r}"
        raise InvalidLocationError(msg)
    return city, state


class MarketDataRepository:
    """Repository for market $/SF bands.

    Wraps in-memory band tables and resolves a location with fallback
    from city to state to a national default.
    """

    def __init__(
        self,
        city_bands: dict[tuple[str, str], MarketBand] | None = None,
        state_bands: dict[str, MarketBand] | None = None,
        default_band: MarketBand = DEFAULT_MARKET_BAND,
    ) -> None:
        self._city_bands = {
            (city.lower(), state.lower()): band
            for (city, state), band in (
                CITY_MARKET_BANDS if city_bands is None else city_bands
            ).items()
        }
        self._state_bands = {
            state.lower(): band
            for state, band in (
                STATE_MARKET_BANDS if state_bands is None else state_bands
            ).items()
        }
        self._default_band = default_band

        bands: list[tuple[object, MarketBand]] = [
            *self._city_bands.items(),
            *self._state_bands.items(),
            ("national default", self._default_band),
        ]
        for key, band in bands:
            if band.high <= 0:
                msg = f"Market band for {key} has no positive rate"
                raise MarketDataError(msg)

    def get_city_band(self, city: str, state: str) -> MarketBand | None:
        """Exact city + state match (case-insensitive), or None."""
        return self._city_bands.get((city.lower().strip(), state.lower().strip()))

    def get_market_band(self, city: str, state: str = "") -> MarketBand:
        """Get the market band for a location.

        Lookup order:
        1. Exact city + state match (case-insensitive)
        2. City alone, when the state is omitted and the name is unambiguous
        3. State-level average
        4. National average
        """
        city_lower = city.lower().strip()
        state_lower = state.lower().strip()

        band = self._city_bands.get((city_lower, state_lower))
        if band is not None:
            return band

        if not state_lower:
            matches = [b for (c, _), b in self._city_bands.items() if c == city_lower]
            if len(matches) == 1:
                return matches[0]

        state_band = self._state_bands.get(state_lower)
        if state_band is not None:
            logger.debug("No band for %s, %s; using state average", city, state)
            return state_band

        logger.info("No market data for %r, %r; using national average", city, state)
        return self._default_band

    def lookup(self, location: str) -> MarketBand:
        """Resolve a free-text 'City, ST' location to a market band."""
        city, state = parse_location(location)
        return self.get_market_band(city, state)

    def cities(self) -> list[tuple[str, str]]:
        """All (city, state) keys with city-level data, sorted."""
        return sorted(self._city_bands)
