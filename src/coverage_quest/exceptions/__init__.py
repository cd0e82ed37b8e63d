"""Exception hierarchy for Coverage Quest."""

from .base import CoverageQuestError
from .challenge import (
    ChallengeError,
    NoEligibleCandidateError,
    RepositoryAccessError,
)
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "CoverageQuestError",
    "ChallengeError",
    "RepositoryAccessError",
    "NoEligibleCandidateError",
    "ConfigurationError",
    "InvalidConfigError",
]
