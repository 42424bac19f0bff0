"""Formatting helpers for budget, report, and timeline output.

Display values round half-up to whole dollars (so $332.50 shows as $333),
matching how the calculators have always presented numbers to clients.
Classification never uses these rounded values.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


def round_whole(amount: float) -> int:
    """Round to the nearest whole unit, halves rounding up."""
    return math.floor(amount + 0.5)


def format_currency(amount: float) -> str:
    """Format a currency amount in whole dollars (e.g. '$1,500,000')."""
    return f"${round_whole(amount):,}"


def format_per_sqft(rate: float) -> str:
    """Format a $/SF rate as '$333/sqft'."""
    return f"${round_whole(rate):,}/sqft"


def format_square_feet(square_feet: float) -> str:
    """Format a floor area as '3,000 sq ft'."""
    return f"{round_whole(square_feet):,} sq ft"


def format_month_year(d: date) -> str:
    """Format a date as a short month/year label (e.g. 'Oct 2026')."""
    return d.strftime("%b %Y")


def first_name(full_name: str) -> str:
    """Return the first word of a name, or 'there' when it is blank."""
    parts = full_name.split()
    return parts[0] if parts else "there"


def describe_home_size(square_feet: float) -> str:
    """Describe what a target square footage typically buys."""
    if square_feet < 2000:
        return "Comfortable 2-3 Bed, Small Lot"
    if square_feet < 3000:
        return "Spacious Family Home, 3-4 Bed, Office"
    if square_feet < 4500:
        return "Luxury Size, 4+ Bed, Rec Room, Large Garage"
    return "Estate Size, Extensive Amenities"
