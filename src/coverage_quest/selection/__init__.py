"""Challenge selection over the user's changed files."""

from .models import Challenge
from .selector import ChallengeSelector, select_challenge

__all__ = ["Challenge", "ChallengeSelector", "select_challenge"]
