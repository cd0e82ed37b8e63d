"""Challenge model: the output of a successful selection."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..coverage.models import CoverageReport

# Fully-covered share above which a class earns the higher score
HIGH_COVERAGE_THRESHOLD = 0.8


@dataclass(frozen=True)
class Challenge:
    """Asks a user to raise the coverage of one class they recently changed."""

    package_name: str
    class_name: str
    source_path: str  # repository-relative, as found in the diff
    report_path: Path
    report: CoverageReport  # counts at generation time

    @property
    def qualified_name(self) -> str:
        if not self.package_name:
            return self.class_name
        return f"{self.package_name}.{self.class_name}"

    @property
    def score(self) -> int:
        """Points for solving: classes that are already well covered are harder."""
        return 2 if self.report.coverage > HIGH_COVERAGE_THRESHOLD else 1

    def describe(self) -> str:
        if not self.package_name:
            return f"Write a test to cover more lines in class {self.class_name}"
        return (
            f"Write a test to cover more lines in class {self.class_name} "
            f"in package {self.package_name}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "package": self.package_name,
            "class": self.class_name,
            "qualified_name": self.qualified_name,
            "source_path": self.source_path,
            "report_path": str(self.report_path),
            "covered_lines": self.report.covered,
            "partially_covered_lines": self.report.partial,
            "uncovered_lines": self.report.uncovered,
            "coverage": round(self.report.coverage, 4),
            "score": self.score,
            "description": self.describe(),
        }

    def __str__(self) -> str:
        return self.describe()
