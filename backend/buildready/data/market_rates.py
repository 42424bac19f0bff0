"""Custom-home construction $/SF bands by market.

Bands are typical hard-cost ranges for a quality custom single-family home
(excluding land and soft costs), 2025 dollars.
"""

from __future__ import annotations

from buildready.models.budget import MarketBand

# Maps (city_lower, state_lower) -> band.
CITY_MARKET_BANDS: dict[tuple[str, str], MarketBand] = {
    # Texas
    ("austin", "tx"): MarketBand(
        low=250.0,
        high=450.0,
        description="Strong demand and Hill Country sites push costs above the state average.",
    ),
    ("dallas", "tx"): MarketBand(
        low=225.0,
        high=400.0,
        description="Competitive builder market with good trade availability.",
    ),
    ("houston", "tx"): MarketBand(
        low=210.0,
        high=380.0,
        description="Flat lots keep site work cheap; flood-zone lots add foundation cost.",
    ),
    ("san antonio", "tx"): MarketBand(
        low=200.0,
        high=360.0,
        description="One of the more affordable large Texas markets for custom builds.",
    ),
    # Southeast
    ("nashville", "tn"): MarketBand(
        low=240.0,
        high=425.0,
        description="Fast growth has tightened labor; sloped lots are common.",
    ),
    ("miami", "fl"): MarketBand(
        low=325.0,
        high=600.0,
        description="Hurricane code, impact glazing, and elevation requirements drive costs.",
    ),
    ("tampa", "fl"): MarketBand(
        low=260.0,
        high=450.0,
        description="Wind-load requirements add structural cost on most builds.",
    ),
    ("atlanta", "ga"): MarketBand(
        low=220.0,
        high=400.0,
        description="Broad builder base; costs rise quickly inside the perimeter.",
    ),
    ("charlotte", "nc"): MarketBand(
        low=215.0,
        high=390.0,
        description="Steady market with reasonable land and labor costs.",
    ),
    # Mountain / West
    ("denver", "co"): MarketBand(
        low=275.0,
        high=500.0,
        description="Snow loads, expansive soils, and a short season raise costs.",
    ),
    ("boise", "id"): MarketBand(
        low=240.0,
        high=420.0,
        description="Rapid in-migration has pushed trade pricing up.",
    ),
    ("phoenix", "az"): MarketBand(
        low=230.0,
        high=425.0,
        description="Year-round building season; desert lots may need extra grading.",
    ),
    ("seattle", "wa"): MarketBand(
        low=350.0,
        high=650.0,
        description="High labor rates, steep lots, and strict energy code.",
    ),
    ("portland", "or"): MarketBand(
        low=320.0,
        high=575.0,
        description="Energy code and seismic requirements add to typical costs.",
    ),
    ("los angeles", "ca"): MarketBand(
        low=400.0,
        high=750.0,
        description="Seismic design, hillside sites, and long permit queues.",
    ),
    ("san diego", "ca"): MarketBand(
        low=375.0,
        high=700.0,
        description="Coastal commission and seismic requirements on many lots.",
    ),
    # Northeast / Midwest
    ("boston", "ma"): MarketBand(
        low=375.0,
        high=700.0,
        description="Dense, older neighborhoods and union labor raise costs.",
    ),
    ("chicago", "il"): MarketBand(
        low=275.0,
        high=500.0,
        description="Deep frost footings and a shorter season add cost.",
    ),
    ("columbus", "oh"): MarketBand(
        low=210.0,
        high=375.0,
        description="Affordable land and a steady trade base.",
    ),
}

# State-level bands used when the city is not listed.
STATE_MARKET_BANDS: dict[str, MarketBand] = {
    "tx": MarketBand(low=215.0, high=390.0, description="Texas statewide average."),
    "tn": MarketBand(low=220.0, high=390.0, description="Tennessee statewide average."),
    "fl": MarketBand(low=250.0, high=450.0, description="Florida statewide average."),
    "ga": MarketBand(low=210.0, high=380.0, description="Georgia statewide average."),
    "nc": MarketBand(low=210.0, high=375.0, description="North Carolina statewide average."),
    "co": MarketBand(low=260.0, high=470.0, description="Colorado statewide average."),
    "id": MarketBand(low=225.0, high=400.0, description="Idaho statewide average."),
    "az": MarketBand(low=220.0, high=410.0, description="Arizona statewide average."),
    "wa": MarketBand(low=300.0, high=550.0, description="Washington statewide average."),
    "or": MarketBand(low=290.0, high=520.0, description="Oregon statewide average."),
    "ca": MarketBand(low=350.0, high=650.0, description="California statewide average."),
    "ma": MarketBand(low=325.0, high=600.0, description="Massachusetts statewide average."),
    "il": MarketBand(low=240.0, high=440.0, description="Illinois statewide average."),
    "oh": MarketBand(low=200.0, high=360.0, description="Ohio statewide average."),
}

# National band when neither city nor state is found.
DEFAULT_MARKET_BAND = MarketBand(
    low=225.0,
    high=425.0,
    description="National average for custom single-family construction.",
)
