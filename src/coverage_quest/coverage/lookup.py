"""Coverage report lookup: locate and parse a source file's JaCoCo HTML page.

JaCoCo marks every source line of the page with a CSS class::

    <span class="fc" id="L12">...</span>       fully covered
    <span class="pc bpc" id="L13">...</span>   partially covered
    <span class="nc" id="L14">...</span>       not covered

A missing page is normal (the class never ran under test) and, like an
unreadable one, yields a zero-count report instead of an error.
"""

from html.parser import HTMLParser
from pathlib import Path
from typing import Optional, Union

from ..logging_config import get_logger
from .models import CoverageReport, ReportLocation
from .naming import JacocoHtmlNaming, ReportNamingStrategy

logger = get_logger(__name__)

COVERED_CLASS = "fc"
PARTIAL_CLASS = "pc"
UNCOVERED_CLASS = "nc"


class _LineStatusCounter(HTMLParser):
    """Counts elements tagged with each line-status class."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.counts = {COVERED_CLASS: 0, PARTIAL_CLASS: 0, UNCOVERED_CLASS: 0}

    def handle_starttag(self, tag, attrs):
        for name, value in attrs:
            if name != "class" or not value:
                continue
            for token in value.split():
                if token in self.counts:
                    self.counts[token] += 1


def parse_report(text: str, source: Optional[Path] = None) -> CoverageReport:
    """Parse the text of a JaCoCo HTML source page into line counts."""
    counter = _LineStatusCounter()
    counter.feed(text)
    counter.close()
    return CoverageReport(
        covered=counter.counts[COVERED_CLASS],
        partial=counter.counts[PARTIAL_CLASS],
        uncovered=counter.counts[UNCOVERED_CLASS],
        source=source,
    )


def read_report(path: Path, encoding: str = "utf-8") -> CoverageReport:
    """Read and parse a report file; absent or unreadable files give no data."""
    try:
        text = path.read_text(encoding=encoding)
    except FileNotFoundError:
        logger.debug("No coverage report at %s", path)
        return CoverageReport.missing(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Unreadable coverage report %s: %s", path, e)
        return CoverageReport.missing(path)

    return parse_report(text, source=path)


class CoverageReportLookup:
    """Maps source paths to their coverage reports under ``report_root``."""

    def __init__(
        self,
        report_root: Union[str, Path],
        naming: Optional[ReportNamingStrategy] = None,
    ):
        self.report_root = Path(report_root)
        self.naming: ReportNamingStrategy = naming if naming is not None else JacocoHtmlNaming()

    def locate(self, source_path: str) -> Optional[ReportLocation]:
        return self.naming.locate(self.report_root, source_path)

    def lookup(self, source_path: str) -> CoverageReport:
        """Line counts for ``source_path``, or the no-data report."""
        location = self.locate(source_path)
        if location is None:
            logger.debug("No report naming for %s", source_path)
            return CoverageReport.missing()
        return self.lookup_location(location)

    def lookup_location(self, location: ReportLocation) -> CoverageReport:
        return read_report(location.report_path)


def lookup_report(
    report_root: Union[str, Path],
    source_path: str,
    naming: Optional[ReportNamingStrategy] = None,
) -> CoverageReport:
    """Line counts for ``source_path`` under ``report_root``, or the no-data report."""
    return CoverageReportLookup(report_root, naming=naming).lookup(source_path)
