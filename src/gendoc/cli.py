"""Command-line entry point.

Usage:
    gendoc <directory>

Every `*.json` descriptor under <directory> (relative to the working
directory, up to 10 levels deep) is turned into a sibling `.md` page.
Set GENDOC_PATTERN, GENDOC_MAX_DEPTH or GENDOC_LOG_LEVEL to override the
defaults.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import GenDocConfig
from .errors import GenDocError
from .generators import generate_markdown, load_functions_tables
from .loader import load_descriptor
from .models import DocKind, GenerationResult
from .scanner import find_files
from .validators import compute_coverage, validate_tables
from .writer import write_markdown

log = logging.getLogger(__name__)


def generate_file(
    path: Path, config: GenDocConfig, result: GenerationResult | None = None
) -> Path | None:
    """Generate the Markdown page for one descriptor.

    Returns:
        The written path, or None if the descriptor no longer exists.
    """
    path = Path(path)
    try:
        descriptor = load_descriptor(path, config.encoding)
    except FileNotFoundError:
        log.debug("Skipping %s: file no longer exists", path)
        if result is not None:
            result.skipped.append(path)
        return None

    try:
        body = generate_markdown(descriptor)
    except GenDocError as e:
        e.path = e.path or path
        raise

    if result is not None and descriptor.kind is DocKind.LUA_FUNCTIONS_TABLE_ARRAY:
        tables = load_functions_tables(descriptor)
        for warning in validate_tables(tables).warnings:
            log.warning("%s: %s", path, warning)
            result.warnings.append(f"{path}: {warning}")
        documented, total = compute_coverage(tables)
        result.documented += documented
        result.total += total

    target = write_markdown(path, body, config.encoding)
    if result is not None:
        result.written.append(target)
    return target


def generate_tree(root: Path, config: GenDocConfig | None = None) -> GenerationResult:
    """Generate pages for every matching descriptor under `root`.

    Files are processed one at a time; the first error aborts the run.
    """
    config = config or GenDocConfig()
    result = GenerationResult()

    files = find_files(Path(root), config.pattern, config.max_depth)
    log.debug("Found %d descriptor(s) under %s", len(files), root)

    for path in files:
        generate_file(path, config, result)

    return result


def main(argv: list[str] | None = None) -> int:
    """Generate all documentation under the given directory."""
    parser = argparse.ArgumentParser(
        prog="gendoc",
        description="Generate Markdown reference pages from JSON descriptors.",
    )
    parser.add_argument("directory", help="Directory to scan, relative to the working directory")
    args = parser.parse_args(argv)

    config = GenDocConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = Path.cwd() / args.directory

    try:
        result = generate_tree(root, config)
    except GenDocError as e:
        where = f"{e.path}: " if e.path else ""
        print(f"  ✗ {where}{e}", file=sys.stderr)
        return 1

    print("Generated:")
    for target in result.written:
        print(f"  {_display_path(target)}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} missing file(s)")

    print(f"\nCoverage: {result.documented}/{result.total} functions ({result.coverage:.0%})")
    return 0


def _display_path(path: Path) -> str:
    """Show `path` relative to the working directory when possible."""
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)
