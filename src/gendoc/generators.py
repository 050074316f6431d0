"""Markdown generators for documentation descriptors.

Each documentation kind owns one generator. Dispatch goes through a
read-only registry, so a kind without a generator fails loudly instead of
producing an empty page.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from pydantic import TypeAdapter, ValidationError

from .errors import ParseError, UnsupportedKindError
from .models import (
    Admonition,
    Descriptor,
    DocKind,
    FunctionArgument,
    FunctionReturn,
    FunctionsTable,
    LuaFunction,
)

_FUNCTIONS_TABLES = TypeAdapter(list[FunctionsTable])

_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd"}


def ordinal(position: int) -> str:
    """Label a 1-based return position: 1st, 2nd, 3rd, then <N>th.

    Only the first three positions are irregular; 21 becomes "21th".
    """
    return _ORDINALS.get(position, f"{position}th")


def _format_arguments(arguments: list[FunctionArgument]) -> str:
    """Format the argument list of a call signature.

    From the first optional argument after the leading one, every argument is
    wrapped in an opening `[`; all brackets are closed after the last one.
    """
    parts: list[str] = []
    in_optional = False
    opened = 0

    for i, arg in enumerate(arguments):
        pair = f"{arg.alias}: {arg.type}"
        if i == 0:
            parts.append(pair)
            continue

        if arg.optional:
            in_optional = True

        if in_optional:
            parts.append(f" [, {pair}")
            opened += 1
        else:
            parts.append(f", {pair}")

    return "".join(parts) + "]" * opened


def _format_returns(returns: list[FunctionReturn]) -> str:
    if not returns:
        return ""
    return " : " + ", ".join(r.type for r in returns)


def format_signature(table: FunctionsTable, function: LuaFunction) -> str:
    """Build `Table.func(args) : returns`, using `:` for instance tables."""
    separator = ":" if table.is_instance_table else "."
    return (
        f"{table.alias}{separator}{function.alias}"
        f"({_format_arguments(function.arguments)})"
        f"{_format_returns(function.returns)}"
    )


def _arguments_table(arguments: list[FunctionArgument]) -> list[str]:
    lines = ["|Argument|Type|Optional|Description|", "|-|-|-|-|"]
    for arg in arguments:
        optional = "Yes" if arg.optional else "No"
        lines.append(f"|{arg.alias}|{arg.type}|{optional}|{arg.description}|")
    lines.append("")
    return lines


def _returns_table(returns: list[FunctionReturn]) -> list[str]:
    lines = ["|Return|Type|Description|", "|-|-|-|"]
    for position, ret in enumerate(returns, start=1):
        lines.append(f"|{ordinal(position)}|{ret.type}|{ret.description}|")
    lines.append("")
    return lines


def _admonition_block(admonition: Admonition) -> list[str]:
    return [
        f'!!! {admonition.type} "{admonition.title}"',
        f"    {admonition.data}",
        "",
    ]


def _function_lines(table: FunctionsTable, function: LuaFunction) -> list[str]:
    lines = [f"### {function.alias}", ""]

    if function.description:
        lines.extend([function.description, ""])

    lines.extend([f"`{format_signature(table, function)}`", ""])

    if function.arguments:
        lines.extend(_arguments_table(function.arguments))

    if function.returns:
        lines.extend(_returns_table(function.returns))

    for admonition in function.admonitions:
        lines.extend(_admonition_block(admonition))

    return lines


def generate_tables_markdown(tables: list[FunctionsTable]) -> str:
    """Render function tables in input order.

    Every emitted line ends with a newline; an empty list renders as "".
    """
    lines: list[str] = []
    for table in tables:
        lines.extend([f"## {table.alias}", "", "---", ""])
        for function in table.functions:
            lines.extend(_function_lines(table, function))

    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def load_functions_tables(descriptor: Descriptor) -> list[FunctionsTable]:
    """Cast a descriptor payload to function tables.

    Raises:
        ParseError: If the payload entries do not have the function-table shape.
    """
    try:
        return _FUNCTIONS_TABLES.validate_python(descriptor.payload)
    except ValidationError as e:
        raise ParseError(f"Malformed function table payload: {e}") from e


def generate_functions_table_markdown(descriptor: Descriptor) -> str:
    """Generate Markdown for a LuaFunctionsTableArray descriptor."""
    return generate_tables_markdown(load_functions_tables(descriptor))


GENERATORS: Mapping[DocKind, Callable[[Descriptor], str]] = MappingProxyType(
    {
        DocKind.LUA_FUNCTIONS_TABLE_ARRAY: generate_functions_table_markdown,
    }
)


def is_supported(kind: DocKind) -> bool:
    """Check whether `kind` has a generator."""
    return kind in GENERATORS


def generate_markdown(descriptor: Descriptor) -> str:
    """Dispatch a descriptor to the generator for its kind.

    Raises:
        UnsupportedKindError: If the kind is known but has no generator.
        ParseError: If the payload does not match the kind's shape.
    """
    try:
        generator = GENERATORS[descriptor.kind]
    except KeyError:
        raise UnsupportedKindError(descriptor.kind.value) from None
    return generator(descriptor)
