"""Construction timeline estimator.

Each of the four phases gets its own min/max duration lookup:

- **Prep** depends on land status; still shopping for financing adds a
  month to the upper bound only.
- **Design & Bidding** depends on design status.
- **Permits** and **Construction** are fixed ranges, each with a standing
  delay warning.

The headline range sums the mins and the maxes. Calendar dates are laid
out differently on purpose: every phase is dated on its *max* duration, so
the dated schedule is the conservative one. The move-in window is computed
separately from the two totals.
"""

from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta

from buildready.models.enums import (
    DesignStatus,
    FinancingStatus,
    LandStatus,
    PhaseKey,
)
from buildready.models.timeline import (
    Phase,
    ScheduledPhase,
    TimelineInputs,
    TimelineResult,
)

# (min_months, max_months)
_PREP_MONTHS: dict[LandStatus, tuple[int, int]] = {
    LandStatus.YES: (1, 1),
    LandStatus.IN_PROCESS: (1, 2),
    LandStatus.NOT_YET: (3, 5),
}

_DESIGN_MONTHS: dict[DesignStatus, tuple[int, int]] = {
    DesignStatus.COMPLETE: (1, 1),
    DesignStatus.IN_PROGRESS: (2, 4),
    DesignStatus.NOT_STARTED: (3, 6),
}

_PERMIT_MONTHS = (2, 4)
_CONSTRUCTION_MONTHS = (10, 13)

_FINANCING_EXTRA_MAX_MONTHS = 1

_PREP_DESCRIPTIONS: dict[LandStatus, str] = {
    LandStatus.YES: "Survey, soil tests, and utility checks on the lot you already own.",
    LandStatus.IN_PROCESS: "Close on your lot, then survey and test the site.",
    LandStatus.NOT_YET: "Find and secure the right lot, then survey and test the site.",
}

_DESIGN_DESCRIPTIONS: dict[DesignStatus, str] = {
    DesignStatus.COMPLETE: "Final plan review and collecting builder bids.",
    DesignStatus.IN_PROGRESS: "Finish floor plans and elevations, then collect builder bids.",
    DesignStatus.NOT_STARTED: "Floor plans, elevations, revisions, and builder bids.",
}

_LAND_SEARCH_WARNING = (
    "Land searches vary widely. The right lot can take weeks or many months to find."
)
_PERMIT_WARNING = (
    "Permit review is controlled by the city and can run longer than expected."
)
_CONSTRUCTION_WARNING = (
    "Weather and material lead times can extend the build."
)


def add_months(start: date, months: int) -> date:
    """Add calendar months, clamping to the last day of the target month."""
    return start + relativedelta(months=months)


def phase_durations(
    land_status: LandStatus,
    design_status: DesignStatus,
    financing: FinancingStatus,
) -> list[Phase]:
    """Return the four phases with their month ranges, in schedule order."""
    prep_min, prep_max = _PREP_MONTHS[land_status]
    if financing == FinancingStatus.STILL_EXPLORING:
        prep_max += _FINANCING_EXTRA_MAX_MONTHS

    design_min, design_max = _DESIGN_MONTHS[design_status]

    return [
        Phase(
            key=PhaseKey.PREP,
            name="Land & Financing Prep",
            min_months=prep_min,
            max_months=prep_max,
            description=_PREP_DESCRIPTIONS[land_status],
            delay_warning=(
                _LAND_SEARCH_WARNING if land_status == LandStatus.NOT_YET else None
            ),
            color_tag="blue",
        ),
        Phase(
            key=PhaseKey.DESIGN_BIDDING,
            name="Design & Bidding",
            min_months=design_min,
            max_months=design_max,
            description=_DESIGN_DESCRIPTIONS[design_status],
            color_tag="purple",
        ),
        Phase(
            key=PhaseKey.PERMITS,
            name="Engineering & Permits",
            min_months=_PERMIT_MONTHS[0],
            max_months=_PERMIT_MONTHS[1],
            description="Structural engineering, plan review, and city approval.",
            delay_warning=_PERMIT_WARNING,
            color_tag="orange",
        ),
        Phase(
            key=PhaseKey.CONSTRUCTION,
            name="Construction",
            min_months=_CONSTRUCTION_MONTHS[0],
            max_months=_CONSTRUCTION_MONTHS[1],
            description="Foundation, framing, systems, and interior finishes.",
            delay_warning=_CONSTRUCTION_WARNING,
            color_tag="green",
        ),
    ]


def estimate_timeline(
    land_status: LandStatus,
    design_status: DesignStatus,
    financing: FinancingStatus,
    start: date | None = None,
) -> TimelineResult:
    """Estimate the build schedule from where the client stands today.

    Args:
        land_status: Whether the client owns land.
        design_status: How far along the house design is.
        financing: How the build will be paid for.
        start: Day the schedule starts from. Defaults to today.

    Returns:
        Totals, the move-in window, and each phase dated on the
        max-duration clock.
    """
    if start is None:
        start = date.today()

    phases = phase_durations(land_status, design_status, financing)
    min_total = sum(p.min_months for p in phases)
    max_total = sum(p.max_months for p in phases)

    scheduled: list[ScheduledPhase] = []
    elapsed = 0
    for phase in phases:
        phase_start = add_months(start, elapsed)
        elapsed += phase.max_months
        scheduled.append(
            ScheduledPhase(
                **phase.model_dump(),
                start_date=phase_start,
                end_date=add_months(start, elapsed),
            )
        )

    return TimelineResult(
        start_date=start,
        min_total_months=min_total,
        max_total_months=max_total,
        move_in_date_min=add_months(start, min_total),
        move_in_date_max=add_months(start, max_total),
        phases=scheduled,
    )


def estimate_timeline_for(inputs: TimelineInputs, start: date | None = None) -> TimelineResult:
    """Convenience wrapper taking a validated TimelineInputs record."""
    return estimate_timeline(
        inputs.land_status,
        inputs.design_status,
        inputs.financing,
        start=start,
    )
