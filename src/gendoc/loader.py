"""Reading descriptor files into typed models."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import ParseError, UnknownKindError
from .models import Descriptor, DocKind

log = logging.getLogger(__name__)


def _parse_kind(raw: object, path: Path | None) -> DocKind:
    """Resolve the `type` discriminator, matching names exactly."""
    if not isinstance(raw, str):
        raise UnknownKindError(raw, path)
    try:
        return DocKind(raw)
    except ValueError:
        raise UnknownKindError(raw, path) from None


def parse_descriptor(text: str, path: Path | None = None) -> Descriptor:
    """Parse descriptor JSON text.

    Args:
        text: Full contents of a descriptor file.
        path: Source path, attached to errors for reporting.

    Raises:
        ParseError: If the text is not JSON, or its root is not an object
            with an array payload.
        UnknownKindError: If `type` is missing or not a known kind.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}", path) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Descriptor root must be an object, got {type(data).__name__}", path
        )

    kind = _parse_kind(data.get("type"), path)

    try:
        descriptor = Descriptor.model_validate({**data, "type": kind})
    except ValidationError as e:
        raise ParseError(f"Malformed descriptor: {e}", path) from e

    log.debug("Parsed %s descriptor with %d entries", kind.value, len(descriptor.payload))
    return descriptor


def load_descriptor(path: Path, encoding: str = "utf-8") -> Descriptor:
    """Read and parse a descriptor file.

    A UTF-8 byte order mark at the start of the file is ignored.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ParseError: If the file cannot be decoded, or see parse_descriptor.
        UnknownKindError: See parse_descriptor.
    """
    path = Path(path)
    if encoding.lower().replace("_", "-") in ("utf-8", "utf8"):
        encoding = "utf-8-sig"
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise ParseError(f"Cannot decode as {encoding}: {e}", path) from e
    return parse_descriptor(text, path)
