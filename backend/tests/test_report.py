"""Tests for project-state selection and narrative report generation."""

from __future__ import annotations

import pytest

from buildready.budget import compute_breakdown
from buildready.data.report_templates import REPORT_TEMPLATES
from buildready.models.budget import BudgetBreakdown, FeasibilityResult
from buildready.models.enums import CtaAction, FeasibilityStatus, ProjectState, Urgency
from buildready.models.report import ReportInputs
from buildready.report import DEFAULT_COMPANY_NAME, generate_report, select_project_state

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _feasibility(status: FeasibilityStatus) -> FeasibilityResult:
    return FeasibilityResult(status=status, message=f"{status} message")


def _inputs(
    has_land: bool | None = True,
    has_plans: bool = True,
    has_engineering: bool = True,
    city: str = "Austin",
    name: str = "Jane Doe",
    target_square_feet: float = 3_000,
) -> ReportInputs:
    return ReportInputs(
        has_land=has_land,
        has_plans=has_plans,
        has_engineering=has_engineering,
        city=city,
        name=name,
        target_square_feet=target_square_feet,
    )


@pytest.fixture()
def breakdown() -> BudgetBreakdown:
    return compute_breakdown(1_500_000, 300_000, 3_000)


# ---------------------------------------------------------------------------
# State selection
# ---------------------------------------------------------------------------


class TestSelectProjectState:
    def test_unrealistic_outranks_missing_land(self) -> None:
        state = select_project_state(
            _feasibility(FeasibilityStatus.UNREALISTIC),
            _inputs(has_land=False, has_plans=False, has_engineering=False),
        )
        assert state == ProjectState.UNREALISTIC

    def test_no_land(self) -> None:
        state = select_project_state(
            _feasibility(FeasibilityStatus.COMFORTABLE),
            _inputs(has_land=False, has_plans=False),
        )
        assert state == ProjectState.NO_LAND

    def test_unanswered_land_counts_as_no_land(self) -> None:
        assert select_project_state(None, _inputs(has_land=None)) == ProjectState.NO_LAND

    def test_design_needed(self) -> None:
        state = select_project_state(None, _inputs(has_plans=False, has_engineering=False))
        assert state == ProjectState.DESIGN_NEEDED

    def test_engineering_needed(self) -> None:
        state = select_project_state(None, _inputs(has_engineering=False))
        assert state == ProjectState.ENGINEERING_NEEDED

    def test_ready_to_build(self) -> None:
        state = select_project_state(_feasibility(FeasibilityStatus.LUXURY), _inputs())
        assert state == ProjectState.READY_TO_BUILD

    @pytest.mark.parametrize(
        "status",
        [FeasibilityStatus.TIGHT, FeasibilityStatus.COMFORTABLE, FeasibilityStatus.LUXURY],
    )
    def test_only_unrealistic_feasibility_selects_unrealistic(
        self, status: FeasibilityStatus
    ) -> None:
        assert select_project_state(_feasibility(status), _inputs()) == (
            ProjectState.READY_TO_BUILD
        )

    def test_missing_feasibility_skips_budget_check(self) -> None:
        state = select_project_state(None, _inputs(has_land=False))
        assert state == ProjectState.NO_LAND


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------


class TestTemplates:
    def test_every_state_has_a_template(self) -> None:
        assert set(REPORT_TEMPLATES) == set(ProjectState)

    @pytest.mark.parametrize("state", list(ProjectState))
    def test_three_step_action_plan(self, state: ProjectState) -> None:
        assert len(REPORT_TEMPLATES[state].action_plan) == 3

    @pytest.mark.parametrize(
        ("state", "urgency"),
        [
            (ProjectState.UNREALISTIC, Urgency.HIGH),
            (ProjectState.NO_LAND, Urgency.MEDIUM),
            (ProjectState.DESIGN_NEEDED, Urgency.MEDIUM),
            (ProjectState.ENGINEERING_NEEDED, Urgency.MEDIUM),
            (ProjectState.READY_TO_BUILD, Urgency.HIGH),
        ],
    )
    def test_urgency(self, state: ProjectState, urgency: Urgency) -> None:
        assert REPORT_TEMPLATES[state].urgency == urgency

    @pytest.mark.parametrize(
        ("state", "action"),
        [
            (ProjectState.UNREALISTIC, CtaAction.ASSESS_VIABILITY),
            (ProjectState.NO_LAND, CtaAction.FIND_LAND),
            (ProjectState.DESIGN_NEEDED, CtaAction.BOOK_CONSULT),
            (ProjectState.ENGINEERING_NEEDED, CtaAction.BOOK_CONSULT),
            (ProjectState.READY_TO_BUILD, CtaAction.GET_BID),
        ],
    )
    def test_cta_action(self, state: ProjectState, action: CtaAction) -> None:
        assert REPORT_TEMPLATES[state].cta.action == action


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestGenerateReport:
    def test_state_and_title(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(
            breakdown,
            _feasibility(FeasibilityStatus.UNREALISTIC),
            _inputs(has_land=False),
        )
        assert report.state == ProjectState.UNREALISTIC
        assert report.title == "Budget Feasibility Analysis"
        assert report.urgency == Urgency.HIGH

    def test_greeting_uses_first_name(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(name="Jane Doe"))
        assert report.greeting == "Hi Jane,"

    def test_greeting_without_name(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(name=""))
        assert report.greeting == "Hi there,"

    def test_unrealistic_interpolates_budget_city_and_rate(
        self, breakdown: BudgetBreakdown
    ) -> None:
        report = generate_report(
            breakdown, _feasibility(FeasibilityStatus.UNREALISTIC), _inputs()
        )
        assert "$1,500,000" in report.paragraphs[0]
        assert "Austin" in report.paragraphs[0]
        assert "$333/sqft" in report.paragraphs[1]

    def test_no_land_interpolates_square_footage(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(has_land=False))
        assert "3,000 sq ft home in Austin" in report.paragraphs[0]

    def test_engineering_mentions_city_codes(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(has_engineering=False))
        assert report.title == "Project Roadmap: Technical Execution"
        assert "Austin codes" in report.paragraphs[1]

    def test_ready_to_build_mentions_budget(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs())
        assert report.cta.text == "Request a Construction Bid"
        assert "$1,500,000" in report.paragraphs[1]

    def test_default_company_in_closing(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(has_plans=False))
        assert DEFAULT_COMPANY_NAME in report.closing

    def test_custom_company_in_closing(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(
            breakdown, None, _inputs(), company_name="Homestead Home Builders"
        )
        assert "Homestead Home Builders" in report.closing
        assert DEFAULT_COMPANY_NAME not in report.closing

    @pytest.mark.parametrize(
        "inputs",
        [
            _inputs(has_land=False),
            _inputs(has_plans=False),
            _inputs(has_engineering=False),
            _inputs(),
        ],
    )
    def test_no_unfilled_placeholders(
        self, breakdown: BudgetBreakdown, inputs: ReportInputs
    ) -> None:
        report = generate_report(breakdown, None, inputs)
        for text in [*report.paragraphs, report.closing]:
            assert "{" not in text
            assert "}" not in text

    def test_action_plan_is_ordered_copy(self, breakdown: BudgetBreakdown) -> None:
        report = generate_report(breakdown, None, _inputs(has_land=False))
        assert [s.step for s in report.action_plan] == [
            "Land Acquisition",
            "Feasibility Study",
            "Initial Design Concepts",
        ]
