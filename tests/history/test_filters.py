"""Tests for test-path filtering."""

import pytest

from coverage_quest.history.filters import exclude_test_paths, is_test_path
from coverage_quest.history.models import ChangedFileSet


class TestIsTestPath:
    """Test exact-segment matching."""

    @pytest.mark.parametrize(
        "path",
        [
            "src/test/java/p/FooTest.java",
            "test/Foo.java",
            "module/src/test/Foo.java",
            "a/b/test",
        ],
    )
    def test_test_segment_excluded(self, path):
        assert is_test_path(path)

    @pytest.mark.parametrize(
        "path",
        [
            "src/main/java/p/Foo.java",
            "src/testing/Foo.java",
            "src/Test/Foo.java",
            "src/tests/Foo.java",
            "src/main/java/p/FooTest.java",
            "src/main/test.java",
        ],
    )
    def test_other_paths_kept(self, path):
        assert not is_test_path(path)

    def test_custom_segments(self):
        assert is_test_path("src/it/Foo.java", excluded_segments=("it", "test"))
        assert not is_test_path("src/test/Foo.java", excluded_segments=("it",))


class TestExcludeTestPaths:
    """Test exclude_test_paths."""

    def test_non_test_paths_pass_through_unchanged(self):
        paths = [
            "src/main/x/Foo.ext",
            "src/test/x/FooTest.ext",
            "src/main/x/Bar.ext",
            "src/testing/Util.ext",
        ]

        result = exclude_test_paths(paths)

        assert result == ["src/main/x/Foo.ext", "src/main/x/Bar.ext", "src/testing/Util.ext"]
        assert not any("test" in path.split("/") for path in result)

    def test_empty_input(self):
        assert exclude_test_paths([]) == []


class TestChangedFileSet:
    """Test the ordered set of changed paths."""

    def test_keeps_first_insertion_order(self):
        changed = ChangedFileSet(["b", "a"])
        changed.update(["c", "b"])
        changed.add("a")

        assert changed.to_list() == ["b", "a", "c"]
        assert len(changed) == 3
        assert "c" in changed

    def test_filtered_returns_new_set(self):
        changed = ChangedFileSet(["src/main/A.java", "src/test/ATest.java"])

        kept = changed.filtered(lambda path: not is_test_path(path))

        assert kept.to_list() == ["src/main/A.java"]
        assert len(changed) == 2

    def test_equality(self):
        assert ChangedFileSet(["a", "b"]) == ChangedFileSet(["a", "b", "a"])
        assert ChangedFileSet(["a", "b"]) != ChangedFileSet(["b", "a"])
