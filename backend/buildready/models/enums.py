"""Enums for the BuildReady domain models.

Timeline status values are the exact labels the selection UI posts, so a
request body can be validated straight into these enums.
"""

from enum import StrEnum


class FeasibilityStatus(StrEnum):
    """Qualitative tier of a hard-cost rate against the local market band."""

    UNREALISTIC = "Unrealistic"
    TIGHT = "Tight"
    COMFORTABLE = "Comfortable"
    LUXURY = "Luxury"


class ProjectState(StrEnum):
    """Where a client stands, in report priority order."""

    UNREALISTIC = "unrealistic"
    NO_LAND = "no_land"
    DESIGN_NEEDED = "design_needed"
    ENGINEERING_NEEDED = "engineering_needed"
    READY_TO_BUILD = "ready_to_build"


class Urgency(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CtaAction(StrEnum):
    """Routing tag for the report's call to action."""

    BOOK_CONSULT = "book_consult"
    FIND_LAND = "find_land"
    GET_BID = "get_bid"
    ASSESS_VIABILITY = "assess_viability"


class LandStatus(StrEnum):
    YES = "Yes"
    NOT_YET = "Not yet"
    IN_PROCESS = "In process"


class DesignStatus(StrEnum):
    COMPLETE = "Complete"
    IN_PROGRESS = "In progress"
    NOT_STARTED = "Not started"


class FinancingStatus(StrEnum):
    CASH = "Cash"
    PREAPPROVED = "Pre-approved with lender"
    STILL_EXPLORING = "Still exploring options"


class PhaseKey(StrEnum):
    """The four schedule phases, in chronological order."""

    PREP = "prep"
    DESIGN_BIDDING = "design_bidding"
    PERMITS = "permits"
    CONSTRUCTION = "construction"
