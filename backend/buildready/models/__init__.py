"""Domain models for the BuildReady estimation core."""

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
from buildready.models.report import (
    ActionStep,
    CallToAction,
    GeneratedReport,
    ReportInputs,
)
from buildready.models.timeline import (
    Phase,
    ScheduledPhase,
    TimelineInputs,
    TimelineResult,
)

__all__ = [
    "ActionStep",
    "BudgetBreakdown",
    "BudgetInputs",
    "CallToAction",
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
]
