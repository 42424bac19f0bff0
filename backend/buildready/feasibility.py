"""Feasibility classification of a hard-cost rate against the local market."""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildready.formatting import format_currency
from buildready.models.budget import FeasibilityResult
from buildready.models.enums import FeasibilityStatus

if TYPE_CHECKING:
    from buildready.models.budget import MarketBand

# Absolute $/SF width of the "Tight" window above the market floor. This is
# a fixed offset, not a share of the band, so narrow and wide markets get
# the same window.
TIGHT_BAND_WIDTH = 50


def classify(cost_per_sqft: float, market_low: float, market_high: float) -> FeasibilityResult:
    """Classify a $/SF rate against a market's low-high band.

    Rules are checked in order, first match wins, on unrounded values:

    - below ``market_low`` -> Unrealistic
    - below ``market_low + 50`` -> Tight
    - above ``market_high`` -> Luxury
    - otherwise -> Comfortable

    ``market_low <= market_high`` is trusted, not checked.
    """
    rate = format_currency(cost_per_sqft)

    if cost_per_sqft < market_low:
        return FeasibilityResult(
            status=FeasibilityStatus.UNREALISTIC,
            message=(
                f"At {rate}/ft, you are below the local minimum of "
                f"{format_currency(market_low)}/ft. This is high risk."
            ),
        )

    if cost_per_sqft < market_low + TIGHT_BAND_WIDTH:
        return FeasibilityResult(
            status=FeasibilityStatus.TIGHT,
            message=f"At {rate}/ft, you are in the entry-level range. Standard finishes only.",
        )

    if cost_per_sqft > market_high:
        return FeasibilityResult(
            status=FeasibilityStatus.LUXURY,
            message=(
                f"At {rate}/ft, you can build a true luxury home with premium finishes."
            ),
        )

    return FeasibilityResult(
        status=FeasibilityStatus.COMFORTABLE,
        message=f"At {rate}/ft, you are in the sweet spot for a quality custom home.",
    )


def classify_against(cost_per_sqft: float, band: MarketBand) -> FeasibilityResult:
    """Classify a $/SF rate against a MarketBand."""
    return classify(cost_per_sqft, band.low, band.high)
