"""Narrative report models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from buildready.models.enums import CtaAction, ProjectState, Urgency


class ReportInputs(BaseModel):
    """Client readiness answers and the scalars interpolated into a report.

    ``has_land`` is None while the client has not answered the land question.
    """

    model_config = ConfigDict(frozen=True)

    has_land: bool | None = None
    has_plans: bool = False
    has_engineering: bool = False
    city: str = ""
    name: str = ""
    target_square_feet: float = Field(default=0.0, ge=0)


class ActionStep(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: str
    description: str


class CallToAction(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    primary: bool = True
    action: CtaAction


class GeneratedReport(BaseModel):
    """A rendered client report for one project state."""

    model_config = ConfigDict(frozen=True)

    state: ProjectState
    title: str
    greeting: str
    paragraphs: list[str]
    action_plan: list[ActionStep]
    cta: CallToAction
    urgency: Urgency
    closing: str
