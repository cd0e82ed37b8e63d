"""Path filtering for changed-file candidates."""

from typing import Iterable

DEFAULT_EXCLUDED_SEGMENTS = ("test",)


def is_test_path(path: str, excluded_segments: Iterable[str] = DEFAULT_EXCLUDED_SEGMENTS) -> bool:
    """True if a ``/``-separated segment of ``path`` equals an excluded name.

    Matching is exact and case-sensitive: ``src/test/Foo.java`` is a test
    path, ``src/testing/Foo.java`` and ``src/Test/Foo.java`` are not.
    """
    excluded = set(excluded_segments)
    return any(segment in excluded for segment in path.split("/"))


def exclude_test_paths(
    paths: Iterable[str], excluded_segments: Iterable[str] = DEFAULT_EXCLUDED_SEGMENTS
) -> list[str]:
    """Drop test paths, keeping the order of the rest."""
    excluded = tuple(excluded_segments)
    return [path for path in paths if not is_test_path(path, excluded)]
