"""End-to-end scenarios with realistic custom-home clients.

Each scenario runs the full budget planner against the built-in market data
and checks the tier and report a builder would expect to send.
"""

from __future__ import annotations

import pytest

from buildready import (
    BudgetInputs,
    FeasibilityStatus,
    ProjectState,
    SoftCostReadiness,
    create_default_repository,
    plan_budget,
)
from buildready.data.repository import MarketDataRepository


@pytest.fixture()
def repo() -> MarketDataRepository:
    return create_default_repository()


class TestScenarios:
    def test_first_time_builder_in_austin(self, repo: MarketDataRepository) -> None:
        """$1.5M all-in, still needs a $300K lot, nothing designed yet."""
        plan = plan_budget(
            BudgetInputs(total_budget=1_500_000, land_cost=300_000, target_square_feet=3_000),
            has_land=False,
            market=repo.lookup("Austin, TX"),
            city="Austin",
            name="Maria Lopez",
        )
        assert plan.feasibility is not None
        assert plan.feasibility.status == FeasibilityStatus.COMFORTABLE
        assert plan.report.state == ProjectState.NO_LAND
        assert plan.report.greeting == "Hi Maria,"

    def test_stretch_budget_in_seattle(self, repo: MarketDataRepository) -> None:
        """$900K on an owned lot for 3,200 SF is below Seattle's floor."""
        plan = plan_budget(
            BudgetInputs(total_budget=900_000, target_square_feet=3_200),
            has_land=True,
            market=repo.lookup("Seattle, WA"),
            city="Seattle",
        )
        assert plan.feasibility is not None
        assert plan.feasibility.status == FeasibilityStatus.UNREALISTIC
        assert plan.report.state == ProjectState.UNREALISTIC

    def test_entry_level_in_columbus(self, repo: MarketDataRepository) -> None:
        """Owned lot and plans drawn; $241/SF lands in the Tight window."""
        plan = plan_budget(
            BudgetInputs(
                total_budget=583_220,
                target_square_feet=2_200,
                readiness=SoftCostReadiness(has_plans=True, has_utilities=True),
            ),
            has_land=True,
            market=repo.lookup("Columbus, OH"),
            city="Columbus",
        )
        # 583,220 / 1.10 / 2,200 = 241 $/SF against a 210-375 band
        assert plan.breakdown.hard_cost_per_sqft == pytest.approx(241.0)
        assert plan.feasibility is not None
        assert plan.feasibility.status == FeasibilityStatus.TIGHT
        assert plan.report.state == ProjectState.ENGINEERING_NEEDED

    def test_fully_ready_luxury_build(self, repo: MarketDataRepository) -> None:
        plan = plan_budget(
            BudgetInputs(
                total_budget=2_100_000,
                target_square_feet=3_500,
                readiness=SoftCostReadiness(
                    has_plans=True, has_engineering=True, has_utilities=True
                ),
            ),
            has_land=True,
            market=repo.lookup("Nashville, TN"),
            city="Nashville",
        )
        # 2,100,000 / 1.05 / 3,500 = 571 $/SF, above Nashville's 425 high
        assert plan.feasibility is not None
        assert plan.feasibility.status == FeasibilityStatus.LUXURY
        assert plan.report.state == ProjectState.READY_TO_BUILD
        assert plan.report.cta.text == "Request a Construction Bid"
