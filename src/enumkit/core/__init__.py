"""
Core enum runtime: factories, variants, iteration, errors and settings.

Usage:
    from enumkit.core import init_number_enum

    Level = init_number_enum("Level", ["LOW", "MID", "HIGH"], 1)
    Level.MID            # 2
    Level.get_key(3)     # "HIGH"
    list(Level.entries()) # [("LOW", 1), ("MID", 2), ("HIGH", 3)]
"""

from enumkit.core.base import BaseEnum
from enumkit.core.definitions import (
    EnumDefinition,
    EnumKind,
    build_enum,
    build_enums,
    load_definitions,
)
from enumkit.core.errors import (
    EnumDefinitionError,
    EnumKitError,
    EnumSealedError,
    IncomparableError,
    NotAMemberError,
    NotAVariantError,
    UnboundValueError,
    UninitializedEnumError,
    ValueAlreadyBoundError,
)
from enumkit.core.factories import (
    NumberEnum,
    ObjectEnum,
    StringEnum,
    ValueEnum,
    init_enum,
    init_number_enum,
    init_object_enum,
    init_string_enum,
    object_enum_builder,
    seal_enum,
    set_value,
)
from enumkit.core.iteration import EnumIterator, IterMode, IterStep
from enumkit.core.metadata import Variant, VariantMetadataStore, get_store
from enumkit.core.settings import RuntimeSettings, get_settings

__all__ = [
    "BaseEnum",
    "ValueEnum",
    "StringEnum",
    "NumberEnum",
    "ObjectEnum",
    "Variant",
    "VariantMetadataStore",
    "get_store",
    "EnumIterator",
    "IterMode",
    "IterStep",
    "init_enum",
    "init_string_enum",
    "init_number_enum",
    "init_object_enum",
    "set_value",
    "seal_enum",
    "object_enum_builder",
    "RuntimeSettings",
    "get_settings",
    "EnumDefinition",
    "EnumKind",
    "build_enum",
    "build_enums",
    "load_definitions",
    "EnumKitError",
    "NotAMemberError",
    "IncomparableError",
    "NotAVariantError",
    "UninitializedEnumError",
    "EnumSealedError",
    "UnboundValueError",
    "ValueAlreadyBoundError",
    "EnumDefinitionError",
]
