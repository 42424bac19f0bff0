"""Budget waterfall for custom home builds.

Turns a client's total investment cap into the money actually available
for physical construction:

1. **Deduct land**: ``max(0, total - land)``; land never drives the
   remainder negative. An overrun is flagged, not raised.
2. **Soft-cost rate**: 5% base overhead, plus 5 points for each of plans,
   engineering, and utilities that is not yet done (5%..20%).
3. **Split**: soft cost is a markup on hard cost, so the remainder is
   divided by ``1 + rate`` rather than multiplied by ``1 - rate``.
4. **Per SF**: hard construction budget over target square footage, or 0
   when no square footage is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildready.models.budget import BudgetBreakdown, SoftCostReadiness

if TYPE_CHECKING:
    from buildready.models.budget import BudgetInputs

# Percentage points; kept integral so rates come out as exact decimals.
BASE_SOFT_COST_POINTS = 5
MISSING_ITEM_SOFT_COST_POINTS = 5


def soft_cost_pct(readiness: SoftCostReadiness) -> float:
    """Soft-cost rate as a fraction of hard cost (0.05 to 0.20)."""
    missing = sum(
        1
        for done in (
            readiness.has_plans,
            readiness.has_engineering,
            readiness.has_utilities,
        )
        if not done
    )
    return (BASE_SOFT_COST_POINTS + MISSING_ITEM_SOFT_COST_POINTS * missing) / 100


def compute_breakdown(
    total_budget: float,
    land_cost: float,
    target_square_feet: float,
    readiness: SoftCostReadiness | None = None,
) -> BudgetBreakdown:
    """Split a total budget into land, soft, and hard construction costs.

    Args:
        total_budget: The client's all-in investment cap.
        land_cost: Land purchase cost; pass 0 when the land is already owned.
        target_square_feet: Planned heated floor area. Zero yields a
            per-SF rate of 0 rather than an error.
        readiness: Which soft-cost items are already done. Defaults to none.

    Returns:
        The budget waterfall.
    """
    if readiness is None:
        readiness = SoftCostReadiness()

    budget_after_land = max(0.0, total_budget - land_cost)
    pct = soft_cost_pct(readiness)

    hard_construction_budget = budget_after_land / (1 + pct)
    soft_cost_estimate = budget_after_land - hard_construction_budget

    hard_cost_per_sqft = (
        hard_construction_budget / target_square_feet if target_square_feet > 0 else 0.0
    )

    return BudgetBreakdown(
        total_budget=total_budget,
        land_cost=land_cost,
        soft_cost_pct=pct,
        soft_cost_estimate=soft_cost_estimate,
        hard_construction_budget=hard_construction_budget,
        hard_cost_per_sqft=hard_cost_per_sqft,
        land_exceeds_budget=land_cost > total_budget,
    )


def compute_breakdown_for(inputs: BudgetInputs) -> BudgetBreakdown:
    """Convenience wrapper taking a validated BudgetInputs record."""
    return compute_breakdown(
        total_budget=inputs.total_budget,
        land_cost=inputs.land_cost,
        target_square_feet=inputs.target_square_feet,
        readiness=inputs.readiness,
    )
