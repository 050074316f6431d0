"""Runtime configuration for gendoc, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_PATTERN = "*.json"
DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class GenDocConfig:
    """Settings shared by the scanner, loader and writer.

    Attributes:
        pattern: Glob matched against file names when scanning.
        max_depth: How many directory levels below the root to descend.
        encoding: Encoding used to read descriptors and write Markdown.
        log_level: Name of the logging level for the CLI.
    """

    pattern: str = DEFAULT_PATTERN
    max_depth: int = DEFAULT_MAX_DEPTH
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> GenDocConfig:
        """Build a config from GENDOC_* environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Raises:
            ValueError: If GENDOC_MAX_DEPTH is not a non-negative integer.
        """
        env = os.environ if environ is None else environ

        raw_depth = env.get("GENDOC_MAX_DEPTH", str(DEFAULT_MAX_DEPTH))
        try:
            max_depth = int(raw_depth)
        except ValueError:
            raise ValueError(
                f"GENDOC_MAX_DEPTH must be an integer, got {raw_depth!r}"
            ) from None
        if max_depth < 0:
            raise ValueError(f"GENDOC_MAX_DEPTH must be >= 0, got {max_depth}")

        return cls(
            pattern=env.get("GENDOC_PATTERN", DEFAULT_PATTERN) or DEFAULT_PATTERN,
            max_depth=max_depth,
            log_level=env.get("GENDOC_LOG_LEVEL", "WARNING").upper(),
        )
