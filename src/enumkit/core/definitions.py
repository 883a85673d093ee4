"""
Enum definitions: the data a generator hands to the factories.

A definition names an enum, its flavor, its ordered member names and, per
flavor, its values, numeric offset or deferred variant values. Definitions
can be loaded from TOML:

    [[enum]]
    name = "Status"
    kind = "number"
    keys = ["DRAFT", "REVIEW", "DONE"]
    offset = 1

    [[enum]]
    name = "Shape"
    kind = "object"
    keys = ["POINT", "LINE"]

    [enum.assign]
    LINE = 2

Object members missing from ``assign`` take their own name as value.
"""

from __future__ import annotations

import logging
import tomllib
from enum import StrEnum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .base import BaseEnum
from .errors import EnumDefinitionError, make_definition_error
from .factories import (
    init_enum,
    init_number_enum,
    init_object_enum,
    init_string_enum,
    object_enum_builder,
    set_value,
)

logger = logging.getLogger(__name__)


class EnumKind(StrEnum):
    """Which factory builds the enum."""

    VALUE = "value"
    STRING = "string"
    NUMBER = "number"
    OBJECT = "object"


class EnumDefinition(BaseModel):
    """
    A single enum to build.

    Attributes:
        name: Enum display name (e.g. OrderStatus)
        kind: Factory flavor
        keys: Ordered member names
        values: Member values (value enums only)
        offset: First value (number enums only)
        assign: Deferred values by member name (object enums only)
    """

    name: str
    kind: EnumKind = EnumKind.OBJECT
    keys: list[str] = Field(default_factory=list)
    values: list[Any] | None = None
    offset: int = 0
    assign: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_flavor_fields(self) -> EnumDefinition:
        if self.kind is EnumKind.VALUE and self.values is None:
            raise ValueError("value enums need 'values'")
        if self.kind is not EnumKind.VALUE and self.values is not None:
            raise ValueError(f"'values' is only valid for value enums, not {self.kind}")
        if self.kind is not EnumKind.NUMBER and self.offset != 0:
            raise ValueError(f"'offset' is only valid for number enums, not {self.kind}")
        if self.kind is not EnumKind.OBJECT and self.assign:
            raise ValueError(f"'assign' is only valid for object enums, not {self.kind}")
        return self


class DefinitionFile(BaseModel):
    """Top level of a definitions file."""

    enums: list[EnumDefinition] = Field(default_factory=list, alias="enum")

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def load_definitions(path: Path) -> list[EnumDefinition]:
    """
    Load enum definitions from a TOML file.

    Raises:
        EnumDefinitionError: unreadable file, invalid TOML or invalid definitions
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise EnumDefinitionError(f"{path}: not UTF-8 text: {e}") from e
    except OSError as e:
        raise EnumDefinitionError(f"{path}: cannot read file: {e.strerror or e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise EnumDefinitionError(f"{path}: invalid TOML: {e}") from e

    try:
        parsed = DefinitionFile.model_validate(data)
    except ValidationError as e:
        raise EnumDefinitionError(f"{path}: invalid definitions:\n{e}") from e

    logger.debug("Loaded %d enum definitions from %s", len(parsed.enums), path)
    return parsed.enums


def build_enum(definition: EnumDefinition, *, strict: bool | None = None) -> BaseEnum:
    """Run the factory matching ``definition.kind`` and return the sealed enum."""
    name, keys = definition.name, definition.keys

    if definition.kind is EnumKind.VALUE:
        return init_enum(name, keys, definition.values or [], strict=strict)
    if definition.kind is EnumKind.STRING:
        return init_string_enum(name, keys, strict=strict)
    if definition.kind is EnumKind.NUMBER:
        return init_number_enum(name, keys, definition.offset, strict=strict)

    if not definition.assign:
        return init_object_enum(name, True, keys, strict=strict)

    unknown = [key for key in definition.assign if key not in keys]
    if unknown:
        raise make_definition_error("'assign' names unknown members", name, unknown[0])

    with object_enum_builder(name, keys, strict=strict) as enum:
        for key in keys:
            set_value(enum[key], definition.assign.get(key, key))
    return enum


def build_enums(
    definitions: list[EnumDefinition], *, strict: bool | None = None
) -> dict[str, BaseEnum]:
    """Build every definition, keyed by enum name in file order."""
    built: dict[str, BaseEnum] = {}
    for definition in definitions:
        if definition.name in built:
            raise make_definition_error("enum defined twice", definition.name)
        built[definition.name] = build_enum(definition, strict=strict)
    return built
