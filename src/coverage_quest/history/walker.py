"""Bounded walk over a user's recent commits, collecting the files they changed."""

from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from ..config import DEFAULT_CONFIG, ChallengeConfig
from ..logging_config import get_logger
from .diff import CommitDiffExtractor
from .filters import DEFAULT_EXCLUDED_SEGMENTS, is_test_path
from .git import GitRepository
from .models import ChangedFileSet, Commit

logger = get_logger(__name__)

DEFAULT_MAX_AUTHORED_COMMITS = 10
DEFAULT_MAX_VISITED_COMMITS = 100


class HistoryRepository(Protocol):
    """The read operations the walker needs from a repository."""

    def head(self) -> Commit: ...

    def commit(self, sha: str) -> Commit: ...

    def diff(self, old_sha: str, new_sha: str) -> str: ...


class RepositoryHistoryWalker:
    """Walks first-parent ancestry from HEAD and gathers one author's changes.

    The walk stops at the root commit, after ``max_authored_commits`` commits
    by the author, or after ``max_visited_commits`` commits in total,
    whichever comes first.

    Only parent 0 of each commit is followed. Commits reachable solely
    through the second parent of a merge are never visited, and a merge is
    diffed against its first parent only.
    """

    def __init__(
        self,
        repository: HistoryRepository,
        max_authored_commits: int = DEFAULT_MAX_AUTHORED_COMMITS,
        max_visited_commits: int = DEFAULT_MAX_VISITED_COMMITS,
        excluded_segments: Iterable[str] = DEFAULT_EXCLUDED_SEGMENTS,
    ):
        self.repository = repository
        self.extractor = CommitDiffExtractor(repository)
        self.max_authored_commits = max_authored_commits
        self.max_visited_commits = max_visited_commits
        self.excluded_segments = tuple(excluded_segments)

    def scan(self, author: str) -> ChangedFileSet:
        """Changed, non-test paths from the author's recent commits."""
        changed = ChangedFileSet()
        authored = 0
        visited = 0

        current: Optional[Commit] = self.repository.head()
        while (
            current is not None
            and authored < self.max_authored_commits
            and visited < self.max_visited_commits
        ):
            visited += 1
            parent: Optional[Commit] = None

            if current.author == author:
                parent = self._first_parent(current)
                if current.is_merge:
                    logger.debug(
                        "%s is a merge; diffing against its first parent only", current.hash[:12]
                    )
                paths = self.extractor.diff(parent, current)
                logger.debug("%s by %s changed %d file(s)", current.hash[:12], author, len(paths))
                changed.update(paths)
                authored += 1

            if authored >= self.max_authored_commits or visited >= self.max_visited_commits:
                break
            current = parent if parent is not None else self._first_parent(current)

        logger.info(
            "Visited %d commit(s), %d by %s, %d changed file(s)",
            visited,
            authored,
            author,
            len(changed),
        )

        if changed:
            changed = changed.filtered(lambda path: not is_test_path(path, self.excluded_segments))
        return changed

    def _first_parent(self, commit: Commit) -> Optional[Commit]:
        if commit.first_parent is None:
            return None
        return self.repository.commit(commit.first_parent)


def scan_user_changes(
    workspace: Union[str, Path],
    author: str,
    config: Optional[ChallengeConfig] = None,
    repository: Optional[HistoryRepository] = None,
) -> ChangedFileSet:
    """Collect the filtered set of files ``author`` recently changed in ``workspace``.

    Raises:
        RepositoryAccessError: If the workspace has no git metadata or HEAD
            cannot be resolved
    """
    if config is None:
        config = DEFAULT_CONFIG

    if repository is None:
        repository = GitRepository(workspace, timeout=config.git_timeout_seconds)

    walker = RepositoryHistoryWalker(
        repository,
        max_authored_commits=config.max_authored_commits,
        max_visited_commits=config.max_visited_commits,
        excluded_segments=config.excluded_segments,
    )
    return walker.scan(author)
