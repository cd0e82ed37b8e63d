"""Naming strategies mapping a source path to its coverage report path.

JaCoCo writes one HTML page per source file, grouped by package::

    target/site/jacoco/com.example.shop/Cart.java.html

for the source file ``src/main/java/com/example/shop/Cart.java``. Other
coverage tools lay their reports out differently, so the mapping is a
strategy object rather than part of the selection algorithm.
"""

from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from .models import ReportLocation

# JaCoCo's directory name for classes without a package
DEFAULT_PACKAGE_DIR = "default"


class ReportNamingStrategy(Protocol):
    """Maps a repository-relative source path to a report location."""

    def locate(
        self, report_root: Union[str, Path], source_path: str
    ) -> Optional[ReportLocation]:
        """Return the expected report location, or None if the path names no class."""
        ...


class JacocoHtmlNaming:
    """JaCoCo HTML report layout.

    The leading run of source-root segments (``src/main/java`` by default) is
    stripped, the remaining directories form the package name, and the report
    file is the source file name plus ``report_suffix``.

    Args:
        source_root_segments: Segments skipped at the start of the path
        report_suffix: Appended to the source file name
        package_separator: ``"."`` for JaCoCo's one-directory-per-package
            layout, ``"/"`` for nested package directories
    """

    def __init__(
        self,
        source_root_segments: Iterable[str] = ("src", "main", "java"),
        report_suffix: str = ".html",
        package_separator: str = ".",
    ):
        self.source_root_segments = frozenset(source_root_segments)
        self.report_suffix = report_suffix
        self.package_separator = package_separator

    def split(self, source_path: str) -> Optional[tuple[list[str], str]]:
        """Split a source path into package segments and file name."""
        parts = [part for part in source_path.split("/") if part]
        if not parts or source_path.endswith("/"):
            return None

        *directories, file_name = parts
        start = 0
        while start < len(directories) and directories[start] in self.source_root_segments:
            start += 1
        return directories[start:], file_name

    def locate(
        self, report_root: Union[str, Path], source_path: str
    ) -> Optional[ReportLocation]:
        split = self.split(source_path)
        if split is None:
            return None
        package_parts, file_name = split

        class_name, _, extension = file_name.partition(".")
        if not class_name:
            return None

        package_dir = self.package_separator.join(package_parts) or DEFAULT_PACKAGE_DIR
        report_path = Path(report_root) / package_dir / f"{file_name}{self.report_suffix}"

        return ReportLocation(
            package_name=".".join(package_parts),
            class_name=class_name,
            extension=extension,
            report_path=report_path,
        )

    def __repr__(self) -> str:
        return (
            f"JacocoHtmlNaming(source_root_segments={sorted(self.source_root_segments)!r}, "
            f"report_suffix={self.report_suffix!r}, package_separator={self.package_separator!r})"
        )
