"""Challenge generation exceptions: repository access and candidate exhaustion."""

from pathlib import Path
from typing import Union

from .base import CoverageQuestError


class ChallengeError(CoverageQuestError):
    """Base class for errors raised while generating a challenge."""

    pass


class RepositoryAccessError(ChallengeError):
    """Raised when git metadata is missing, corrupt, or the head is unresolvable."""

    def __init__(self, workspace: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot read repository history: {workspace}",
            details={"workspace": str(workspace), "reason": reason},
        )
        self.workspace = workspace
        self.reason = reason


class NoEligibleCandidateError(ChallengeError):
    """Raised when no recently changed file has partially or non-covered lines.

    Not permanent: generation may succeed after the user commits more changes.
    """

    def __init__(self, author: str, evaluated: int):
        super().__init__(
            f"No challenge could be generated for {author}",
            details={"author": author, "evaluated": str(evaluated)},
        )
        self.author = author
        self.evaluated = evaluated
