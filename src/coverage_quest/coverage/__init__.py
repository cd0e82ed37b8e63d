"""Coverage reports: naming conventions and per-class line counts."""

from .lookup import CoverageReportLookup, lookup_report, parse_report, read_report
from .models import CoverageReport, ReportLocation
from .naming import JacocoHtmlNaming, ReportNamingStrategy

__all__ = [
    "CoverageReport",
    "CoverageReportLookup",
    "JacocoHtmlNaming",
    "ReportLocation",
    "ReportNamingStrategy",
    "lookup_report",
    "parse_report",
    "read_report",
]
