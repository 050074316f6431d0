"""Recursive discovery of descriptor files."""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from pathlib import Path

from .config import DEFAULT_MAX_DEPTH, DEFAULT_PATTERN

log = logging.getLogger(__name__)


def find_files(
    root: Path,
    pattern: str = DEFAULT_PATTERN,
    depth: int = DEFAULT_MAX_DEPTH,
) -> list[Path]:
    """Find files whose name matches `pattern` under `root`.

    Files directly in `root` are always returned. Subdirectories are searched
    only while `depth` is above zero, with one level consumed per descent, so
    `depth=0` looks at `root` alone.

    Results from subdirectories come first, then the files of `root`; entries
    are visited in name order so repeated runs list files identically.

    Raises:
        OSError: If a directory cannot be listed. The whole scan fails.
    """
    root = Path(root)
    entries = sorted(root.iterdir(), key=lambda p: p.name)

    files: list[Path] = []
    if depth > 0:
        for entry in entries:
            if entry.is_dir():
                files.extend(find_files(entry, pattern, depth - 1))

    for entry in entries:
        if entry.is_file() and fnmatchcase(entry.name, pattern):
            files.append(entry)

    log.debug("Scanned %s: %d matching file(s) so far", root, len(files))
    return files
