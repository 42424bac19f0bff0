"""Budget planner: wires breakdown -> feasibility -> report in a single call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildready.budget import compute_breakdown
from buildready.feasibility import classify_against
from buildready.models.report import ReportInputs
from buildready.report import DEFAULT_COMPANY_NAME, generate_report

if TYPE_CHECKING:
    from buildready.models.budget import (
        BudgetBreakdown,
        BudgetInputs,
        FeasibilityResult,
        MarketBand,
    )
    from buildready.models.report import GeneratedReport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetPlan:
    """Everything the budget calculator shows a client."""

    breakdown: BudgetBreakdown
    market: MarketBand | None
    feasibility: FeasibilityResult | None
    report: GeneratedReport


def plan_budget(
    inputs: BudgetInputs,
    *,
    has_land: bool | None,
    market: MarketBand | None,
    city: str = "",
    name: str = "",
    company_name: str = DEFAULT_COMPANY_NAME,
) -> BudgetPlan:
    """Run the budget calculator end to end.

    Land cost only counts when the client does not already own land.
    Feasibility is only classified once there is a market band to compare
    against and either a positive hard-cost rate or a land cost that eats
    the whole budget. The latter classifies the clamped zero rate, so the
    report is written as Unrealistic. Otherwise the report is written
    without feasibility.
    """
    land_cost = 0.0 if has_land else inputs.land_cost

    breakdown = compute_breakdown(
        total_budget=inputs.total_budget,
        land_cost=land_cost,
        target_square_feet=inputs.target_square_feet,
        readiness=inputs.readiness,
    )
    if breakdown.land_exceeds_budget:
        logger.warning(
            "Land cost %.0f exceeds total budget %.0f; construction budget clamped to zero",
            land_cost,
            inputs.total_budget,
        )

    feasibility: FeasibilityResult | None = None
    rated = breakdown.hard_cost_per_sqft > 0 or breakdown.land_exceeds_budget
    if rated and market is not None:
        feasibility = classify_against(breakdown.hard_cost_per_sqft, market)
        logger.debug(
            "Classified %.2f/sqft against %s-%s: %s",
            breakdown.hard_cost_per_sqft,
            market.low,
            market.high,
            feasibility.status,
        )

    report = generate_report(
        breakdown,
        feasibility,
        ReportInputs(
            has_land=has_land,
            has_plans=inputs.readiness.has_plans,
            has_engineering=inputs.readiness.has_engineering,
            city=city,
            name=name,
            target_square_feet=inputs.target_square_feet,
        ),
        company_name=company_name,
    )

    return BudgetPlan(
        breakdown=breakdown,
        market=market,
        feasibility=feasibility,
        report=report,
    )
