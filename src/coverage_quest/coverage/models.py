"""Data models for coverage report lookup."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ReportLocation:
    """Where the coverage report of one source file is expected to live."""

    package_name: str  # dotted, "" for the default package
    class_name: str
    extension: str  # "java" for Foo.java, "" when the file has none
    report_path: Path


@dataclass(frozen=True)
class CoverageReport:
    """Per-class line counts parsed from a coverage report.

    A report that does not exist (the class never ran under test) or that
    could not be read is represented with ``found=False`` and zero counts.
    """

    covered: int = 0
    partial: int = 0
    uncovered: int = 0
    source: Optional[Path] = None
    found: bool = True

    def __post_init__(self) -> None:
        for name in ("covered", "partial", "uncovered"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def missing(cls, source: Optional[Path] = None) -> "CoverageReport":
        """The "no data" result for an absent or unreadable report."""
        return cls(source=source, found=False)

    @property
    def has_missed_lines(self) -> bool:
        """True when at least one line is partially covered or not covered."""
        return self.partial > 0 or self.uncovered > 0

    @property
    def total_lines(self) -> int:
        return self.covered + self.partial + self.uncovered

    @property
    def coverage(self) -> float:
        """Fraction of lines that are fully covered."""
        if self.total_lines == 0:
            return 0.0
        return self.covered / self.total_lines
