"""Data models for commit history traversal."""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional


@dataclass(frozen=True)
class Commit:
    hash: str
    author: str  # display name, matched verbatim against the user identity
    parents: tuple[str, ...]  # ordered; index 0 is the first parent
    tree: str

    @property
    def first_parent(self) -> Optional[str]:
        return self.parents[0] if self.parents else None

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass(frozen=True)
class DiffRecord:
    old: Optional[Commit]  # None at the root of history
    new: Commit
    text: str  # unified diff


class ChangedFileSet:
    """Insertion-ordered set of distinct changed file paths.

    Paths keep the order in which the walk first saw them, most recent
    commit first.
    """

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: dict[str, None] = {}
        self.update(paths)

    def add(self, path: str) -> None:
        self._paths.setdefault(path, None)

    def update(self, paths: Iterable[str]) -> None:
        for path in paths:
            self.add(path)

    def filtered(self, keep: Callable[[str], bool]) -> "ChangedFileSet":
        """New set holding the paths for which ``keep`` is true, order preserved."""
        return ChangedFileSet(path for path in self._paths if keep(path))

    def to_list(self) -> list[str]:
        return list(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._paths

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ChangedFileSet):
            return self.to_list() == other.to_list()
        return NotImplemented

    def __repr__(self) -> str:
        return f"ChangedFileSet({self.to_list()!r})"
