"""Commit history: git access, diff extraction, and the bounded author walk."""

from .diff import CommitDiffExtractor, extract_changed_paths
from .filters import exclude_test_paths, is_test_path
from .git import GitRepository
from .models import ChangedFileSet, Commit, DiffRecord
from .walker import RepositoryHistoryWalker, scan_user_changes

__all__ = [
    "ChangedFileSet",
    "Commit",
    "CommitDiffExtractor",
    "DiffRecord",
    "GitRepository",
    "RepositoryHistoryWalker",
    "exclude_test_paths",
    "extract_changed_paths",
    "is_test_path",
    "scan_user_changes",
]
