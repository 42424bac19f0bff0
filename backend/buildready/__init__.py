"""BuildReady budget, feasibility, and timeline estimation core.

Usage::

    from buildready import classify, compute_breakdown, SoftCostReadiness

    breakdown = compute_breakdown(1_500_000, 300_000, 3_000, SoftCostReadiness())
    result = classify(breakdown.hard_cost_per_sqft, 250, 450)
"""

__version__ = "0.1.0"

from buildready.budget import compute_breakdown, soft_cost_pct
from buildready.factory import create_default_repository
from buildready.feasibility import classify, classify_against
from buildready.models.budget import (
    BudgetBreakdown,
    BudgetInputs,
    FeasibilityResult,
    MarketBand,
    SoftCostReadiness,
)
from buildready.models.enums import (
    CtaAction,
    DesignStatus,
    FeasibilityStatus,
    FinancingStatus,
    LandStatus,
    PhaseKey,
    ProjectState,
    Urgency,
)
from buildready.models.report import GeneratedReport, ReportInputs
from buildready.models.timeline import Phase, ScheduledPhase, TimelineInputs, TimelineResult
from buildready.report import generate_report, select_project_state
from buildready.services.planner import BudgetPlan, plan_budget
from buildready.timeline import estimate_timeline

__all__ = [
    "BudgetBreakdown",
    "BudgetInputs",
    "BudgetPlan",
    "CtaAction",
    "DesignStatus",
    "FeasibilityResult",
    "FeasibilityStatus",
    "FinancingStatus",
    "GeneratedReport",
    "LandStatus",
    "MarketBand",
    "Phase",
    "PhaseKey",
    "ProjectState",
    "ReportInputs",
    "ScheduledPhase",
    "SoftCostReadiness",
    "TimelineInputs",
    "TimelineResult",
    "Urgency",
    "classify",
    "classify_against",
    "compute_breakdown",
    "create_default_repository",
    "estimate_timeline",
    "generate_report",
    "plan_budget",
    "select_project_state",
    "soft_cost_pct",
]
