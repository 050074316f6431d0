"""gendoc - Markdown reference pages from JSON API descriptors."""

from gendoc.cli import generate_file, generate_tree
from gendoc.config import GenDocConfig
from gendoc.errors import (
    GenDocError,
    ParseError,
    UnknownKindError,
    UnsupportedKindError,
)
from gendoc.generators import generate_markdown, is_supported, ordinal
from gendoc.loader import load_descriptor, parse_descriptor
from gendoc.models import (
    Admonition,
    Descriptor,
    DocKind,
    FunctionArgument,
    FunctionReturn,
    FunctionsTable,
    GenerationResult,
    LuaFunction,
)
from gendoc.scanner import find_files
from gendoc.writer import output_path, write_markdown

__all__ = [
    "Admonition",
    "Descriptor",
    "DocKind",
    "FunctionArgument",
    "FunctionReturn",
    "FunctionsTable",
    "GenDocConfig",
    "GenDocError",
    "GenerationResult",
    "LuaFunction",
    "ParseError",
    "UnknownKindError",
    "UnsupportedKindError",
    "find_files",
    "generate_file",
    "generate_markdown",
    "generate_tree",
    "is_supported",
    "load_descriptor",
    "ordinal",
    "output_path",
    "parse_descriptor",
    "write_markdown",
]
