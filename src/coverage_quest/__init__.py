"""
Coverage Quest - coverage challenges from a developer's own recent commits

Walks a user's recent git history, collects the source files they touched,
and picks one whose coverage report still shows missed lines as a challenge
to write more tests.
"""

__version__ = "0.1.0"

from .api import generate_challenge
from .config import ChallengeConfig, load_config
from .exceptions import (
    CoverageQuestError,
    NoEligibleCandidateError,
    RepositoryAccessError,
)
from .selection import Challenge

__all__ = [
    "generate_challenge",  # Main entry point
    "Challenge",
    "ChallengeConfig",
    "load_config",
    "CoverageQuestError",
    "NoEligibleCandidateError",
    "RepositoryAccessError",
]
