"""Data models for documentation descriptors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class DocKind(str, Enum):
    """Known descriptor shapes, keyed by the JSON `type` value."""

    LUA_FUNCTIONS_TABLE_ARRAY = "LuaFunctionsTableArray"
    LUA_EVENTS_ARRAY = "LuaEventsArray"
    LUA_NET_PROPS_TABLE_ARRAY = "LuaNetPropsTableArray"


class _Record(BaseModel):
    # Best-effort casting: stray keys are ignored, numbers become strings
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
        populate_by_name=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat JSON null like a missing key."""
        model_field = cls.model_fields[info.field_name]
        if value is None and not model_field.is_required():
            return model_field.get_default(call_default_factory=True)
        return value


class Admonition(_Record):
    """Callout block attached to a function (note, warning, tip...)."""

    type: str = ""
    title: str = ""
    data: str = ""


class FunctionArgument(_Record):
    alias: str = ""
    type: str = ""
    optional: bool = False
    description: str = ""


class FunctionReturn(_Record):
    type: str = ""
    description: str = ""


class LuaFunction(_Record):
    """A documented function. Argument and return order is the call order."""

    alias: str = ""
    description: str = ""
    arguments: list[FunctionArgument] = Field(default_factory=list)
    returns: list[FunctionReturn] = Field(default_factory=list)
    admonitions: list[Admonition] = Field(default_factory=list)


class FunctionsTable(_Record):
    """A named table of functions (a namespace or an instance's methods)."""

    alias: str = ""
    functions: list[LuaFunction] = Field(default_factory=list)

    @property
    def is_instance_table(self) -> bool:
        """Instance tables are marked with `{}` in their alias, e.g. `Player{}`."""
        return "{}" in self.alias


class Descriptor(_Record):
    """Root of a descriptor file: a discriminator plus an uncast payload."""

    kind: DocKind = Field(alias="type")
    payload: list[Any] = Field(default_factory=list, alias="MyArray")


@dataclass
class ValidationResult:
    """Documentation gaps found in a descriptor."""

    warnings: list[str] = field(default_factory=list)  # Logged, never fatal


@dataclass
class GenerationResult:
    """Outcome of a generation run over a directory tree."""

    written: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)  # Vanished before reading
    warnings: list[str] = field(default_factory=list)
    documented: int = 0
    total: int = 0

    @property
    def coverage(self) -> float:
        return self.documented / self.total if self.total > 0 else 1.0
