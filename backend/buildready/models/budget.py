"""Budget and feasibility models for the BuildReady estimation core."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from buildready.models.enums import FeasibilityStatus


class SoftCostReadiness(BaseModel):
    """Which soft-cost prerequisites are already done.

    Every flag defaults to "not ready" until the user answers.
    """

    model_config = ConfigDict(frozen=True)

    has_plans: bool = False
    has_engineering: bool = False
    has_utilities: bool = False


class BudgetInputs(BaseModel):
    """Caller-supplied facts for a single budget calculation."""

    model_config = ConfigDict(frozen=True)

    total_budget: float = Field(ge=0)
    land_cost: float = Field(default=0.0, ge=0)
    target_square_feet: float = Field(ge=0)
    readiness: SoftCostReadiness = Field(default_factory=SoftCostReadiness)


class BudgetBreakdown(BaseModel):
    """The budget waterfall: total -> land -> soft costs -> hard construction.

    ``soft_cost_estimate + hard_construction_budget`` always equals the
    budget left after land, floored at zero. When land alone exceeds the
    total budget the remainder is clamped and ``land_exceeds_budget`` is set.
    """

    model_config = ConfigDict(frozen=True)

    total_budget: float
    land_cost: float
    soft_cost_pct: float
    soft_cost_estimate: float
    hard_construction_budget: float
    hard_cost_per_sqft: float
    land_exceeds_budget: bool = False

    @property
    def budget_after_land(self) -> float:
        return self.soft_cost_estimate + self.hard_construction_budget

    def to_summary_dict(self, target_square_feet: float | None = None) -> dict[str, Any]:
        """Produce a flat summary dict of display-ready strings."""
        from buildready.formatting import (
            describe_home_size,
            format_currency,
            format_per_sqft,
            format_square_feet,
        )

        summary: dict[str, Any] = {
            "total_budget_formatted": format_currency(self.total_budget),
            "land_cost_formatted": format_currency(self.land_cost),
            "soft_cost_formatted": format_currency(self.soft_cost_estimate),
            "soft_cost_pct": round(self.soft_cost_pct * 100),
            "hard_construction_formatted": format_currency(self.hard_construction_budget),
            "hard_cost_per_sqft_formatted": format_per_sqft(self.hard_cost_per_sqft),
            "land_exceeds_budget": self.land_exceeds_budget,
        }
        if target_square_feet is not None:
            summary["target_square_feet_formatted"] = format_square_feet(target_square_feet)
            summary["home_size_description"] = describe_home_size(target_square_feet)
        return summary


class MarketBand(BaseModel):
    """Typical low-high construction $/SF for a market."""

    model_config = ConfigDict(frozen=True)

    low: float = Field(ge=0)
    high: float = Field(ge=0)
    description: str = ""

    @model_validator(mode="after")
    def low_le_high(self) -> MarketBand:
        if self.low > self.high:
            msg = f"Must satisfy low <= high, got {self.low} > {self.high}"
            raise ValueError(msg)
        return self


class FeasibilityResult(BaseModel):
    """Feasibility tier plus the client-facing explanation."""

    model_config = ConfigDict(frozen=True)

    status: FeasibilityStatus
    message: str
