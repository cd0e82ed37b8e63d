"""Configuration loading and management for Coverage Quest.

Configuration sources are merged in priority order:
    1. Defaults (defined in ChallengeConfig)
    2. Global config (~/.coverage-quest.toml)
    3. Project config (./coverage-quest.toml)
    4. Explicit config file
    5. Environment variables (COVERAGE_QUEST_* prefix)
    6. Keyword overrides (typically CLI flags)

Example:
    >>> config = load_config(max_authored_commits=5)
    >>> config.max_authored_commits
    5
    >>> config.report_dir
    'target/site/jacoco'
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, Union, get_type_hints

from .coverage.naming import JacocoHtmlNaming
from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "COVERAGE_QUEST_"
CONFIG_FILE_NAME = "coverage-quest.toml"

_SEQUENCE_FIELDS = ("source_root_segments", "excluded_segments")
_INT_FIELDS = ("max_authored_commits", "max_visited_commits", "git_timeout_seconds")
_STR_FIELDS = ("report_dir", "report_suffix", "package_separator", "verbosity")


@dataclass(frozen=True)
class ChallengeConfig:
    """Configuration for challenge generation.

    Attributes:
        History walk:
            max_authored_commits: Stop after this many commits by the user
            max_visited_commits: Stop after this many commits in total
            git_timeout_seconds: Timeout for each git subprocess

        Coverage reports:
            report_dir: Report directory, relative to the workspace
            source_root_segments: Leading path segments stripped before
                deriving the package name
            report_suffix: Appended to the source file name
            package_separator: Joins package segments into the report directory

        Candidate filtering:
            excluded_segments: Paths with any of these exact segments are dropped

        Output control:
            verbosity: Logging verbosity level
    """

    # History walk
    max_authored_commits: int = 10
    max_visited_commits: int = 100
    git_timeout_seconds: int = 30

    # Coverage reports
    report_dir: str = "target/site/jacoco"
    source_root_segments: tuple[str, ...] = ("src", "main", "java")
    report_suffix: str = ".html"
    package_separator: str = "."

    # Candidate filtering
    excluded_segments: tuple[str, ...] = ("test",)

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # TOML hands us lists; keep the frozen instance hashable
        for name in _SEQUENCE_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise InvalidConfigError(name, value, "expected a list of path segments")
            object.__setattr__(self, name, tuple(value))

        for name in _INT_FIELDS:
            value = getattr(self, name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidConfigError(name, value, "expected an integer")
        for name in _STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidConfigError(name, value, "expected a string")

        if self.max_authored_commits < 1:
            raise InvalidConfigError(
                "max_authored_commits", self.max_authored_commits, "must be at least 1"
            )
        if self.max_visited_commits < 1:
            raise InvalidConfigError(
                "max_visited_commits", self.max_visited_commits, "must be at least 1"
            )
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )

        if not self.report_dir:
            raise InvalidConfigError("report_dir", self.report_dir, "must not be empty")
        if self.package_separator not in (".", "/"):
            raise InvalidConfigError(
                "package_separator", self.package_separator, "must be '.' or '/'"
            )
        if any("/" in segment or not segment for segment in self.excluded_segments):
            raise InvalidConfigError(
                "excluded_segments", list(self.excluded_segments), "segments must be non-empty names"
            )

        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of quiet, normal, verbose"
            )

    def report_root(self, workspace: Union[str, Path]) -> Path:
        """Resolve the coverage report directory for a workspace."""
        return Path(workspace) / self.report_dir

    def naming_strategy(self) -> JacocoHtmlNaming:
        """Build the source-path to report-path naming strategy."""
        return JacocoHtmlNaming(
            source_root_segments=self.source_root_segments,
            report_suffix=self.report_suffix,
            package_separator=self.package_separator,
        )


DEFAULT_CONFIG = ChallengeConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> ChallengeConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so CLI options can be passed through as-is.

    Returns:
        Validated ChallengeConfig instance

    Raises:
        ConfigurationError: If a config file is missing or invalid
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / f".{CONFIG_FILE_NAME}"
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / CONFIG_FILE_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({key: value for key, value in overrides.items() if value is not None})

    known = {f.name for f in fields(ChallengeConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            details={"known": ", ".join(sorted(known))},
        )

    return ChallengeConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from COVERAGE_QUEST_* environment variables.

    Only scalar fields are read; segment lists belong in a TOML file.

    Returns:
        Dict of field_name -> parsed_value for any COVERAGE_QUEST_* vars found.
    """
    type_hints = get_type_hints(ChallengeConfig)

    result: dict[str, Any] = {}

    for field_name in ChallengeConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Returns None for types that cannot be expressed as a single string.
    """
    origin = getattr(type_hint, "__origin__", None)

    if origin in (list, tuple) or type_hint in (list, tuple):
        return None

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load a TOML file and return the parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(
            f"Invalid config file '{path}'", details={"reason": str(e)}
        ) from e
