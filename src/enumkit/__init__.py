"""
enumkit - sealed, strongly distinguished enums built at runtime.

Factories for value, string, number and variant-object enums, plus a
deferred value assignment hook for variants whose values depend on
earlier members.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    BaseEnum,
    EnumDefinitionError,
    EnumKitError,
    EnumSealedError,
    IncomparableError,
    NotAMemberError,
    NotAVariantError,
    UnboundValueError,
    UninitializedEnumError,
    ValueAlreadyBoundError,
    Variant,
    build_enum,
    build_enums,
    get_settings,
    init_enum,
    init_number_enum,
    init_object_enum,
    init_string_enum,
    load_definitions,
    object_enum_builder,
    seal_enum,
    set_value,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "BaseEnum",
    "Variant",
    "init_enum",
    "init_string_enum",
    "init_number_enum",
    "init_object_enum",
    "set_value",
    "seal_enum",
    "object_enum_builder",
    "build_enum",
    "build_enums",
    "load_definitions",
    "get_settings",
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
