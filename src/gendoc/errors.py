"""Exceptions raised while turning descriptors into Markdown."""

from __future__ import annotations

from pathlib import Path


class GenDocError(Exception):
    """Base exception for gendoc operations."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class ParseError(GenDocError):
    """Raised when a descriptor is not valid JSON or cannot be cast to its shape."""

    pass


class UnknownKindError(GenDocError):
    """Raised when the `type` discriminator is not a known documentation kind."""

    def __init__(self, kind: object, path: Path | None = None):
        super().__init__(f"Unknown documentation kind: {kind!r}", path)
        self.kind = kind


class UnsupportedKindError(GenDocError):
    """Raised when a known kind has no rendering routine."""

    def __init__(self, kind: object, path: Path | None = None):
        super().__init__(f"No renderer for documentation kind: {kind}", path)
        self.kind = kind
