"""Report content for each project state.

Paragraphs and closings are ``str.format`` templates. Available fields:
``{city}``, ``{total_budget}``, ``{cost_per_sqft}``, ``{target_sqft}`` and
``{company}``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from buildready.models.enums import CtaAction, ProjectState, Urgency
from buildready.models.report import ActionStep, CallToAction


class ReportTemplate(BaseModel):
    """Static content for one project state."""

    model_config = ConfigDict(frozen=True)

    title: str
    paragraphs: tuple[str, ...]
    action_plan: tuple[ActionStep, ...]
    cta: CallToAction
    urgency: Urgency
    closing: str


REPORT_TEMPLATES: dict[ProjectState, ReportTemplate] = {
    ProjectState.UNREALISTIC: ReportTemplate(
        title="Budget Feasibility Analysis",
        paragraphs=(
            "I've analyzed your target budget of {total_budget} against current "
            "market rates in {city}.",
            "At {cost_per_sqft}, we are currently below the robust building "
            "standard for this area. This doesn't mean your project is impossible, "
            "but it does mean we need to be strategic about scope, size, or "
            "selections to align with reality.",
        ),
        action_plan=(
            ActionStep(
                step="Budget Reality Check",
                description=(
                    "Review line-item costs to identify where we can save "
                    "without sacrificing quality."
                ),
            ),
            ActionStep(
                step="Scope Adjustment",
                description=(
                    "Explore adjusting the square footage or finish levels "
                    "to fit the budget."
                ),
            ),
            ActionStep(
                step="Land Search Strategy",
                description=(
                    "Find a lot that requires less site work to free up "
                    "budget for the build."
                ),
            ),
        ),
        cta=CallToAction(
            text="Book a Budget Viability Call",
            action=CtaAction.ASSESS_VIABILITY,
        ),
        urgency=Urgency.HIGH,
        closing=(
            "{company} specializes in value engineering tailored to your specific "
            "financial goals. We can help you identify exactly where to adjust your "
            "scope to make this project viable without losing the features you "
            "love. We'd love to walk you through a few options."
        ),
    ),
    ProjectState.NO_LAND: ReportTemplate(
        title="Project Roadmap: The Foundation Phase",
        paragraphs=(
            "Your budget looks healthy for a {target_sqft} home in {city}. The "
            "biggest variable right now is the land.",
            "A house is designed for a specific lot: its slope, views, and solar "
            "orientation. Designing before you have land often leads to costly "
            "redesigns later.",
        ),
        action_plan=(
            ActionStep(
                step="Land Acquisition",
                description="Identify and secure a lot that supports your vision and budget.",
            ),
            ActionStep(
                step="Feasibility Study",
                description="Before closing, verify utilities, zoning, and topography.",
            ),
            ActionStep(
                step="Initial Design Concepts",
                description=(
                    "Once the land is secured, we begin sketching your home "
                    "to fit the terrain."
                ),
            ),
        ),
        cta=CallToAction(text="Start Your Land Search", action=CtaAction.FIND_LAND),
        urgency=Urgency.MEDIUM,
        closing=(
            "Finding the perfect lot is the first step to a successful build, and "
            "it's something we help clients with every day. {company} can help you "
            "evaluate potential properties for hidden costs before you make an "
            "offer. Let's chat about what you're looking for."
        ),
    ),
    ProjectState.DESIGN_NEEDED: ReportTemplate(
        title="Project Roadmap: Design & Vision",
        paragraphs=(
            "You have the land, which is a huge milestone! Based on your budget of "
            "{total_budget}, you are in a great position to build a fantastic "
            "custom home in {city}.",
            "The next critical step is translating your ideas into buildable "
            "plans. This is where we define the flow, the look, and the lifestyle "
            "of your new home.",
        ),
        action_plan=(
            ActionStep(
                step="Architectural Design",
                description=(
                    "Create floor plans and elevations that maximize your "
                    "lot's potential."
                ),
            ),
            ActionStep(
                step="Preliminary Pricing",
                description="Get cost feedback early in the design process to stay on budget.",
            ),
            ActionStep(
                step="Selections",
                description="Choose finishes and fixtures that define your style.",
            ),
        ),
        cta=CallToAction(
            text="Schedule Free Design Consultation",
            action=CtaAction.BOOK_CONSULT,
        ),
        urgency=Urgency.MEDIUM,
        closing=(
            "At {company}, we believe design should be driven by both creativity "
            "and cost-awareness. We can help you start the design process with a "
            "clear budget in mind so you don't fall in love with a home that's "
            "expensive to build. We'd love to hear your ideas."
        ),
    ),
    ProjectState.ENGINEERING_NEEDED: ReportTemplate(
        title="Project Roadmap: Technical Execution",
        paragraphs=(
            "It's great that you already have design plans! That puts you ahead "
            "of 80% of aspiring homeowners.",
            "To turn those drawings into a standing structure, we need to bridge "
            "the gap with engineering. This ensures your home is structurally "
            "sound and compliant with {city} codes.",
        ),
        action_plan=(
            ActionStep(
                step="Structural Engineering",
                description="Calculate load paths, foundation design, and framing details.",
            ),
            ActionStep(
                step="Civil & Soils",
                description="Address drainage, grading, and soil bearing capacity.",
            ),
            ActionStep(
                step="Permit Submission",
                description="Compile all technical documents for city approval.",
            ),
        ),
        cta=CallToAction(
            text="Get Your Engineering Quote",
            action=CtaAction.BOOK_CONSULT,
        ),
        urgency=Urgency.MEDIUM,
        closing=(
            "Navigating the technical requirements of engineering and permitting "
            "can be complex, but we handle it all the time. {company} can "
            "coordinate the entire pre-construction team to get your project "
            "permit-ready faster. Let's discuss your timeline."
        ),
    ),
    ProjectState.READY_TO_BUILD: ReportTemplate(
        title="Project Roadmap: Pre-Construction",
        paragraphs=(
            "Impressive! You have land, plans, and engineering. You represent the "
            "ideal client who is ready to move efficiently.",
            "Your budget of {total_budget} is workable. The next step is to get a "
            "hard construction bid and secure your slot in the build schedule.",
        ),
        action_plan=(
            ActionStep(
                step="Hard Bid Construction",
                description=(
                    "Finalize a fixed-price or cost-plus contract for construction."
                ),
            ),
            ActionStep(
                step="Permit Acquisition",
                description="Pull the final building permits from the city.",
            ),
            ActionStep(
                step="Ground Breaking",
                description="Mobilize the site and begin construction.",
            ),
        ),
        cta=CallToAction(text="Request a Construction Bid", action=CtaAction.GET_BID),
        urgency=Urgency.HIGH,
        closing=(
            "Since you're ready to build, we're ready to bid. {company} offers "
            "transparent, detailed construction management to bring your "
            "fully-formed vision to life on time and on budget. We'd love to "
            "review your plans and give you a firm number."
        ),
    ),
}
