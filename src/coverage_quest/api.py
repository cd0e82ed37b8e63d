"""Public API for Coverage Quest.

Example:
    >>> from coverage_quest import generate_challenge
    >>>
    >>> challenge = generate_challenge("/path/to/workspace", "Alice Example")
    >>> challenge.describe()
    'Write a test to cover more lines in class Cart in package com.example.shop'
    >>>
    >>> # Reproducible draws and a custom report layout
    >>> import random
    >>> challenge = generate_challenge(
    ...     "/path/to/workspace",
    ...     "Alice Example",
    ...     rng=random.Random(7),
    ...     report_dir="build/reports/jacoco/test/html",
    ... )
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional, Union

from .config import ChallengeConfig, load_config
from .logging_config import get_logger
from .selection import Challenge, select_challenge

logger = get_logger(__name__)


def generate_challenge(
    workspace: Union[str, Path],
    user: str,
    config: Optional[ChallengeConfig] = None,
    rng: Optional[random.Random] = None,
    **overrides,
) -> Challenge:
    """Generate a class coverage challenge for ``user`` in ``workspace``.

    This is the main entry point. It:
    1. Loads configuration (auto-discover TOML + apply overrides) unless
       ``config`` is given
    2. Walks the user's recent commits and collects changed, non-test files
    3. Draws candidates at random until one has missed lines in its report

    Args:
        workspace: Path to the git working copy
        user: Author display name, matched exactly against commit authors
        config: Explicit configuration; skips discovery when given
        rng: Random source for candidate draws (default: a fresh Random)
        **overrides: Configuration overrides (e.g., report_dir="...")

    Returns:
        The selected Challenge

    Raises:
        RepositoryAccessError: If the workspace history cannot be read
        NoEligibleCandidateError: If no recently changed class has missed lines
        ConfigurationError: If configuration is invalid
    """
    if config is None:
        config = load_config(**overrides)

    workspace = Path(workspace)
    logger.info("Generating challenge for %s in %s", user, workspace)
    return select_challenge(workspace, user, config=config, rng=rng)
