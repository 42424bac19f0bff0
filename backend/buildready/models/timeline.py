"""Timeline models for the construction schedule estimator."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, model_validator

from buildready.models.enums import (
    DesignStatus,
    FinancingStatus,
    LandStatus,
    PhaseKey,
)


class TimelineInputs(BaseModel):
    """Where the client stands on land, design, and financing."""

    model_config = ConfigDict(frozen=True)

    land_status: LandStatus = LandStatus.NOT_YET
    design_status: DesignStatus = DesignStatus.NOT_STARTED
    financing: FinancingStatus = FinancingStatus.STILL_EXPLORING


class Phase(BaseModel):
    """A schedule phase with its duration range in months."""

    model_config = ConfigDict(frozen=True)

    key: PhaseKey
    name: str
    min_months: int = Field(ge=0)
    max_months: int = Field(ge=0)
    description: str
    delay_warning: str | None = None
    color_tag: str

    @model_validator(mode="after")
    def min_le_max(self) -> Phase:
        if self.min_months > self.max_months:
            msg = (
                f"Must satisfy min_months <= max_months, "
                f"got {self.min_months} > {self.max_months}"
            )
            raise ValueError(msg)
        return self

    @property
    def spread_months(self) -> int:
        return self.max_months - self.min_months


class ScheduledPhase(Phase):
    """A phase pinned to calendar dates on the max-duration clock."""

    start_date: date
    end_date: date


class TimelineResult(BaseModel):
    """Headline month range, move-in window, and the dated phase list.

    The move-in window comes from the min/max totals, while phase dates are
    laid out on max durations only, so the dated schedule never promises
    more than the upper end of the range.
    """

    model_config = ConfigDict(frozen=True)

    start_date: date
    min_total_months: int
    max_total_months: int
    move_in_date_min: date
    move_in_date_max: date
    phases: list[ScheduledPhase]
