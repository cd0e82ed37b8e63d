"""Extract changed file paths from the unified diff of two commits."""

from typing import Optional, Protocol

from .models import Commit, DiffRecord

_SECTION_PREFIX = "diff --git "

_ESCAPES = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}


class DiffSource(Protocol):
    def diff(self, old_sha: str, new_sha: str) -> str: ...


def _unquote(token: str) -> str:
    """Undo git's C-style quoting of a path token (``"b/caf\\303\\251.txt"``)."""
    body = token[1:-1]
    out = bytearray()
    i = 0
    while i < len(body):
        char = body[i]
        if char != "\\" or i + 1 >= len(body):
            out.extend(char.encode("utf-8"))
            i += 1
            continue

        nxt = body[i + 1]
        if nxt in "01234567":
            end = i + 1
            while end < len(body) and end < i + 4 and body[end] in "01234567":
                end += 1
            out.append(int(body[i + 1 : end], 8) & 0xFF)
            i = end
        else:
            out.append(_ESCAPES.get(nxt, ord(nxt)))
            i += 2
    return out.decode("utf-8", errors="replace")


def _split_quoted_tail(rest: str) -> Optional[tuple[str, str]]:
    """Split ``<head> "<quoted>"`` into head and the unquoted last token."""
    i = len(rest) - 2
    while i >= 0:
        if rest[i] == '"':
            backslashes = 0
            j = i - 1
            while j >= 0 and rest[j] == "\\":
                backslashes += 1
                j -= 1
            if backslashes % 2 == 0:
                return rest[:i].rstrip(), _unquote(rest[i:])
        i -= 1
    return None


def _new_path(header: str) -> Optional[str]:
    """The ``b/`` path named by one ``diff --git a/<old> b/<new>`` header."""
    rest = header[len(_SECTION_PREFIX) :].rstrip("\r")

    if rest.endswith('"') and len(rest) > 1:
        split = _split_quoted_tail(rest)
        if split is None:
            return None
        _, new = split
        return new[2:] if new.startswith("b/") else None

    # Unquoted: both names are the same unless the file was renamed, so
    # prefer the split that gives two equal halves.
    if rest.startswith("a/"):
        half = (len(rest) - 1) // 2
        old, sep, new = rest[:half], rest[half : half + 1], rest[half + 1 :]
        if sep == " " and new.startswith("b/") and old[2:] == new[2:]:
            return new[2:]

    marker = rest.rfind(" b/")
    if marker == -1:
        return None
    return rest[marker + 3 :]


def extract_changed_paths(diff_text: str) -> list[str]:
    """Paths opened by ``diff --git`` section headers, in order, without repeats.

    The new-side path is reported, so a renamed file is recorded only under
    its new name.
    """
    paths: dict[str, None] = {}
    for line in diff_text.split("\n"):
        if not line.startswith(_SECTION_PREFIX):
            continue
        path = _new_path(line)
        if path:
            paths.setdefault(path, None)
    return list(paths)


class CommitDiffExtractor:
    """Computes the changed paths between two adjacent commits."""

    def __init__(self, source: DiffSource):
        self.source = source

    def record(self, old: Optional[Commit], new: Commit) -> DiffRecord:
        """The raw diff of ``new`` against ``old``; empty text at the root."""
        if old is None:
            return DiffRecord(old=None, new=new, text="")
        return DiffRecord(old=old, new=new, text=self.source.diff(old.hash, new.hash))

    def diff(self, old: Optional[Commit], new: Commit) -> list[str]:
        if old is None:
            return []
        return extract_changed_paths(self.record(old, new).text)
