"""Market and report content data for BuildReady."""

from buildready.data.report_templates import REPORT_TEMPLATES, ReportTemplate
from buildready.data.repository import MarketDataRepository, parse_location

__all__ = [
    "MarketDataRepository",
    "REPORT_TEMPLATES",
    "ReportTemplate",
    "parse_location",
]
