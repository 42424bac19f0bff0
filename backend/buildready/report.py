"""Narrative client report built from the budget and readiness answers.

Which report a client gets is a strict priority chain; the first matching
state wins, so a budget problem always outranks missing land, plans, or
engineering. The wording for each state lives in
:mod:`buildready.data.report_templates`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildready.data.report_templates import REPORT_TEMPLATES
from buildready.formatting import (
    first_name,
    format_currency,
    format_per_sqft,
    format_square_feet,
)
from buildready.models.enums import FeasibilityStatus, ProjectState
from buildready.models.report import GeneratedReport

if TYPE_CHECKING:
    from collections.abc import Callable

    from buildready.models.budget import BudgetBreakdown, FeasibilityResult
    from buildready.models.report import ReportInputs

    _StatePredicate = Callable[[FeasibilityResult | None, ReportInputs], bool]

DEFAULT_COMPANY_NAME = "BuilderProject"

# Checked top to bottom; READY_TO_BUILD is the fallthrough.
_STATE_PRIORITY: list[tuple[ProjectState, _StatePredicate]] = [
    (
        ProjectState.UNREALISTIC,
        lambda feas, _: feas is not None and feas.status == FeasibilityStatus.UNREALISTIC,
    ),
    # An unanswered land question counts as not owning land.
    (ProjectState.NO_LAND, lambda _, inp: not inp.has_land),
    (ProjectState.DESIGN_NEEDED, lambda _, inp: not inp.has_plans),
    (ProjectState.ENGINEERING_NEEDED, lambda _, inp: not inp.has_engineering),
]


def select_project_state(
    feasibility: FeasibilityResult | None,
    inputs: ReportInputs,
) -> ProjectState:
    """Pick the single project state a report is written for.

    When ``feasibility`` is None (no market data yet) the Unrealistic state
    cannot be selected and the chain starts at the land check.
    """
    for state, applies in _STATE_PRIORITY:
        if applies(feasibility, inputs):
            return state
    return ProjectState.READY_TO_BUILD


def generate_report(
    breakdown: BudgetBreakdown,
    feasibility: FeasibilityResult | None,
    inputs: ReportInputs,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> GeneratedReport:
    """Render the client report for the state the inputs resolve to."""
    state = select_project_state(feasibility, inputs)
    template = REPORT_TEMPLATES[state]

    fields = {
        "city": inputs.city,
        "total_budget": format_currency(breakdown.total_budget),
        "cost_per_sqft": format_per_sqft(breakdown.hard_cost_per_sqft),
        "target_sqft": format_square_feet(inputs.target_square_feet),
        "company": company_name,
    }

    return GeneratedReport(
        state=state,
        title=template.title,
        greeting=f"Hi {first_name(inputs.name)},",
        paragraphs=[p.format(**fields) for p in template.paragraphs],
        action_plan=list(template.action_plan),
        cta=template.cta,
        urgency=template.urgency,
        closing=template.closing.format(**fields),
    )
