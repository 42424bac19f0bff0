"""Settings and dependency construction for the FastAPI app."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from buildready.report import DEFAULT_COMPANY_NAME

logger = logging.getLogger(__name__)

_DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment."""

    company_name: str = DEFAULT_COMPANY_NAME
    cors_origins: tuple[str, ...] = field(default=_DEFAULT_CORS_ORIGINS)


def load_settings() -> Settings:
    """Build Settings from environment variables.

    - ``BUILDREADY_COMPANY_NAME``: builder name used in report closings.
    - ``BUILDREADY_CORS_ORIGINS``: comma-separated allowed origins.
    """
    company_name = os.environ.get("BUILDREADY_COMPANY_NAME", "").strip()
    raw_origins = os.environ.get("BUILDREADY_CORS_ORIGINS", "")
    origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

    if not company_name:
        logger.debug("BUILDREADY_COMPANY_NAME not set; using %r", DEFAULT_COMPANY_NAME)

    return Settings(
        company_name=company_name or DEFAULT_COMPANY_NAME,
        cors_origins=origins or _DEFAULT_CORS_ORIGINS,
    )
