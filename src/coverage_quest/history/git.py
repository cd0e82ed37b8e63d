"""Read git commits and tree diffs via subprocess."""

import subprocess
from pathlib import Path
from typing import Union

from ..exceptions import RepositoryAccessError
from ..logging_config import get_logger
from .models import Commit

logger = get_logger(__name__)

# hash, author name, parent hashes (space separated), tree hash
_COMMIT_FORMAT = "%H%x00%an%x00%P%x00%T"


class GitRepository:
    """Read-only access to the commits of a git working copy.

    Every call runs one blocking ``git`` subprocess; nothing is cached and
    nothing is written to the repository.
    """

    def __init__(self, workspace: Union[str, Path], timeout: int = 30):
        self.workspace = Path(workspace).resolve()
        self.timeout = timeout

        # .git is a directory in a clone and a file in a linked worktree
        if not (self.workspace / ".git").exists():
            raise RepositoryAccessError(self.workspace, "no .git metadata directory")

    def head(self) -> Commit:
        """The commit the current branch points at."""
        try:
            sha = self._run("rev-parse", "--verify", "--quiet", "HEAD^{commit}").strip()
        except RepositoryAccessError as e:
            raise RepositoryAccessError(self.workspace, f"cannot resolve HEAD: {e.reason}") from e
        if not sha:
            raise RepositoryAccessError(self.workspace, "cannot resolve HEAD")
        return self.commit(sha)

    def commit(self, sha: str) -> Commit:
        raw = self._run("show", "-s", "--no-show-signature", f"--format={_COMMIT_FORMAT}", sha)
        fields = raw.rstrip("\n").split("\x00")
        if len(fields) != 4:
            raise RepositoryAccessError(self.workspace, f"unexpected commit format for {sha}")

        commit_hash, author, parents, tree = fields
        return Commit(
            hash=commit_hash,
            author=author,
            parents=tuple(parents.split()),
            tree=tree,
        )

    def diff(self, old_sha: str, new_sha: str) -> str:
        """Unified diff between the trees of two commits.

        Rename detection is on, so a moved file appears once under both names
        in a single section. Path prefixes are pinned to a/ and b/ so the
        headers parse the same under diff.noprefix or custom prefix settings.
        """
        return self._run(
            "-c",
            "core.quotePath=false",
            "diff",
            "--no-color",
            "--no-ext-diff",
            "--no-textconv",
            "-M",
            "--src-prefix=a/",
            "--dst-prefix=b/",
            old_sha,
            new_sha,
        )

    def _run(self, *args: str) -> str:
        cmd = ["git", "-C", str(self.workspace), *args]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RepositoryAccessError(self.workspace, "git executable not found") from e
        except subprocess.TimeoutExpired as e:
            raise RepositoryAccessError(
                self.workspace, f"git timed out after {self.timeout}s"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr.strip()
            logger.debug("git %s failed (rc=%d): %s", " ".join(args), result.returncode, stderr)
            raise RepositoryAccessError(self.workspace, stderr or f"git exited with {result.returncode}")

        return result.stdout
