"""Documentation quality checks.

Nothing here blocks generation: gaps are reported as warnings only.
"""

from __future__ import annotations

from .models import FunctionsTable, ValidationResult


def validate_tables(tables: list[FunctionsTable]) -> ValidationResult:
    """Look for undocumented functions and untyped arguments or returns.

    Args:
        tables: Function tables from one descriptor

    Returns:
        ValidationResult whose warnings name each gap
    """
    result = ValidationResult()

    for table in tables:
        for function in table.functions:
            name = f"{table.alias}.{function.alias}"

            if not function.description:
                result.warnings.append(f"{name}: missing description")

            for arg in function.arguments:
                if not arg.type:
                    result.warnings.append(f"{name}: argument {arg.alias!r} has no type")

            for position, ret in enumerate(function.returns, start=1):
                if not ret.type:
                    result.warnings.append(f"{name}: return #{position} has no type")

    return result


def compute_coverage(tables: list[FunctionsTable]) -> tuple[int, int]:
    """Count described functions.

    Returns:
        (documented, total) function counts
    """
    total = 0
    documented = 0
    for table in tables:
        for function in table.functions:
            total += 1
            if function.description:
                documented += 1
    return documented, total
