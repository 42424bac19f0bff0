"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from datetime import date  # noqa: TCH003 (FastAPI resolves at runtime)
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from buildready import __version__
from buildready.api.deps import Settings, load_settings
from buildready.exceptions import BuildReadyError
from buildready.formatting import format_month_year
from buildready.models.budget import BudgetInputs, MarketBand
from buildready.models.enums import DesignStatus, FinancingStatus, LandStatus
from buildready.services.planner import plan_budget
from buildready.timeline import estimate_timeline

if TYPE_CHECKING:
    from buildready.data.repository import MarketDataRepository

logger = logging.getLogger(__name__)


class BudgetRequest(BudgetInputs):
    """Budget calculator form submission."""

    has_land: bool | None = None
    city: str = ""
    name: str = ""
    market_low: float | None = Field(default=None, ge=0)
    market_high: float | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def market_bounds_paired(self) -> BudgetRequest:
        if (self.market_low is None) != (self.market_high is None):
            msg = "market_low and market_high must be given together"
            raise ValueError(msg)
        if self.market_low is not None and self.market_high is not None:
            if self.market_low > self.market_high:
                msg = (
                    f"Must satisfy market_low <= market_high, "
                    f"got {self.market_low} > {self.market_high}"
                )
                raise ValueError(msg)
        return self


class TimelineRequest(BaseModel):
    """Timeline generator answers."""

    land_status: LandStatus
    design_status: DesignStatus
    financing: FinancingStatus
    start_date: date | None = None


def create_app(
    *,
    settings: Settings | None = None,
    market_repository: MarketDataRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings (e.g. tests). Read from the environment when
        not provided.
    market_repository
        Optional pre-built market-rate repository. If not provided, one is
        created via create_default_repository on first use.
    """
    settings = settings or load_settings()
    app = FastAPI(title="BuildReady", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own data
    app.state.settings = settings
    app.state.market_repository = market_repository

    def _get_market_repository() -> MarketDataRepository:
        repo: MarketDataRepository | None = app.state.market_repository
        if repo is not None:
            return repo
        from buildready.factory import create_default_repository

        repo = create_default_repository()
        app.state.market_repository = repo
        return repo

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    # ------------------------------------------------------------------
    # GET /api/markets
    # ------------------------------------------------------------------

    @app.get("/api/markets")
    def market(location: str = Query(...)) -> dict[str, Any]:
        try:
            band = _get_market_repository().lookup(location)
        except BuildReadyError as exc:
            logger.warning("Market lookup failed for %r: %s", location, exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {"location": location, **band.model_dump(mode="json")}

    # ------------------------------------------------------------------
    # POST /api/budget
    # ------------------------------------------------------------------

    @app.post("/api/budget")
    def budget(request: BudgetRequest) -> dict[str, Any]:
        band: MarketBand | None = None
        if request.market_low is not None and request.market_high is not None:
            band = MarketBand(low=request.market_low, high=request.market_high)
        elif request.city.strip():
            try:
                band = _get_market_repository().lookup(request.city)
            except BuildReadyError as exc:
                logger.warning("Market lookup failed for %r: %s", request.city, exc)
                raise HTTPException(status_code=400, detail=str(exc)) from exc

        plan = plan_budget(
            request,
            has_land=request.has_land,
            market=band,
            city=request.city,
            name=request.name,
            company_name=app.state.settings.company_name,
        )
        return {
            "breakdown": plan.breakdown.model_dump(mode="json"),
            "summary": plan.breakdown.to_summary_dict(request.target_square_feet),
            "market": plan.market.model_dump(mode="json") if plan.market else None,
            "feasibility": (
                plan.feasibility.model_dump(mode="json") if plan.feasibility else None
            ),
            "report": plan.report.model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # POST /api/timeline
    # ------------------------------------------------------------------

    @app.post("/api/timeline")
    def timeline(request: TimelineRequest) -> dict[str, Any]:
        result = estimate_timeline(
            request.land_status,
            request.design_status,
            request.financing,
            start=request.start_date,
        )
        return {
            "timeline": result.model_dump(mode="json"),
            "move_in_range_formatted": (
                f"{format_month_year(result.move_in_date_min)} - "
                f"{format_month_year(result.move_in_date_max)}"
            ),
            "phase_ranges_formatted": [
                f"{format_month_year(p.start_date)} - {format_month_year(p.end_date)}"
                for p in result.phases
            ],
        }

    return app
