"""Randomized selection of one eligible class from the user's changed files."""

import random
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import DEFAULT_CONFIG, ChallengeConfig
from ..coverage.lookup import CoverageReportLookup
from ..exceptions import NoEligibleCandidateError
from ..history.walker import HistoryRepository, scan_user_changes
from ..logging_config import get_logger
from .models import Challenge

logger = get_logger(__name__)


class ChallengeSelector:
    """Draws candidates at random until one has partially or non-covered lines.

    Each rejected candidate is removed from the worklist, so a worklist of N
    paths is evaluated at most N times before selection succeeds or gives up.
    """

    def __init__(self, lookup: CoverageReportLookup, rng: Optional[random.Random] = None):
        self.lookup = lookup
        self.rng = rng if rng is not None else random.Random()

    def select(self, candidates: Iterable[str], author: str = "") -> Challenge:
        """Pick an eligible candidate.

        Raises:
            NoEligibleCandidateError: If no candidate has missed lines,
                including when there are no candidates at all
        """
        worklist = list(candidates)
        evaluated = 0

        while worklist:
            index = self.rng.randrange(len(worklist))
            challenge = self.evaluate(worklist[index])
            evaluated += 1
            if challenge is not None:
                logger.info(
                    "Selected %s after %d evaluation(s)", challenge.qualified_name, evaluated
                )
                return challenge
            del worklist[index]

        logger.info("No eligible candidate for %s after %d evaluation(s)", author, evaluated)
        raise NoEligibleCandidateError(author, evaluated)

    def evaluate(self, source_path: str) -> Optional[Challenge]:
        """A challenge for ``source_path`` if its report shows missed lines."""
        location = self.lookup.locate(source_path)
        if location is None:
            logger.debug("Skipping %s: no class name", source_path)
            return None

        report = self.lookup.lookup_location(location)
        if not report.has_missed_lines:
            logger.debug(
                "Skipping %s: partial=%d uncovered=%d found=%s",
                source_path,
                report.partial,
                report.uncovered,
                report.found,
            )
            return None

        return Challenge(
            package_name=location.package_name,
            class_name=location.class_name,
            source_path=source_path,
            report_path=location.report_path,
            report=report,
        )


def select_challenge(
    workspace: Union[str, Path],
    author: str,
    config: Optional[ChallengeConfig] = None,
    rng: Optional[random.Random] = None,
    repository: Optional[HistoryRepository] = None,
) -> Challenge:
    """Walk the author's recent history and select a coverage challenge.

    Raises:
        RepositoryAccessError: If the workspace history cannot be read
        NoEligibleCandidateError: If no recently changed class has missed lines
    """
    if config is None:
        config = DEFAULT_CONFIG

    candidates = scan_user_changes(workspace, author, config=config, repository=repository)
    lookup = CoverageReportLookup(config.report_root(workspace), naming=config.naming_strategy())
    return ChallengeSelector(lookup, rng=rng).select(candidates, author=author)
