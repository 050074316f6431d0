"""Writing generated Markdown next to its descriptor."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


def output_path(source: Path) -> Path:
    """Return the sibling `.md` path for a descriptor (same directory and stem)."""
    return Path(source).with_suffix(".md")


def write_markdown(source: Path, body: str, encoding: str = "utf-8") -> Path:
    """Write `body` under a `# <stem>` heading, replacing any existing file.

    Returns:
        The path written to.
    """
    source = Path(source)
    target = output_path(source)
    document = f"# {source.stem}\n\n{body}"

    with open(target, "w", encoding=encoding, newline="\n") as f:
        f.write(document)

    log.info("Wrote %s", target)
    return target
