"""
Enum factories.

Four construction routines, each picking the cheapest representation for
its value type:

    init_enum          arbitrary hashable values, value -> position/name tables
    init_string_enum   values are the names themselves, one name -> position table
    init_number_enum   consecutive integers from an offset, no tables at all
    init_object_enum   one Variant per member, identity -> position table

Every factory returns a sealed enum, except ``init_object_enum`` with
``init_values`` false: that enum stays open until each variant has a value
bound through ``set_value`` and ``seal_enum`` is called.

Usage:
    Color = init_string_enum("Color", ["RED", "GREEN"])
    Color.RED            # "RED"
    Color.get_key("RED") # "RED"
    "BLUE" in Color      # False

    with object_enum_builder("Foo", ["FOO", "BAR", "BAZ"]) as Foo:
        set_value(Foo.FOO, "FOO")
        set_value(Foo.BAR, 1)
        set_value(Foo.BAZ, Foo.BAR.value + 1)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from .base import BaseEnum, check_definition, check_offset, is_number, to_int32
from .errors import EnumContext, UnboundValueError
from .iteration import EnumIterator, IterMode
from .metadata import UNSET, Variant, get_store
from .settings import resolve_strict

logger = logging.getLogger(__name__)


class ValueEnum(BaseEnum):
    """Enum over arbitrary hashable values."""

    kind = "value"

    def __init__(self, name: str, keys: Sequence[str], values: Sequence[Any]) -> None:
        super().__init__(name, keys)
        positions: dict[Any, int] = {}
        names: dict[Any, str] = {}
        for i, (key, value) in enumerate(zip(self._keys, values)):
            positions[value] = i
            names[value] = key
            self._members[key] = value
        object.__setattr__(self, "_values", tuple(values))
        object.__setattr__(self, "_positions", positions)
        object.__setattr__(self, "_names", names)
        self._seal()

    def _position(self, value: Any) -> int | None:
        try:
            return self._positions.get(value)
        except TypeError:
            return None

    def get_key(self, value: Any) -> str | None:
        try:
            return self._names.get(value)
        except TypeError:
            return None

    def keys(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._keys)

    def values(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._values)

    def entries(self) -> EnumIterator:
        return EnumIterator(IterMode.PAIR, 0, len(self._keys), self._keys, self._values)


class StringEnum(BaseEnum):
    """Enum whose member values are their own names."""

    kind = "string"

    def __init__(self, name: str, keys: Sequence[str]) -> None:
        super().__init__(name, keys)
        positions: dict[str, int] = {}
        for i, key in enumerate(self._keys):
            positions[key] = i
            self._members[key] = key
        object.__setattr__(self, "_positions", positions)
        self._seal()

    def _position(self, value: Any) -> int | None:
        if not isinstance(value, str):
            return None
        return self._positions.get(value)

    def get_key(self, value: Any) -> str | None:
        return value if self._position(value) is not None else None

    def keys(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._keys)

    def values(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._keys)

    def entries(self) -> EnumIterator:
        return EnumIterator(IterMode.PAIR, 0, len(self._keys), self._keys, self._keys)


class NumberEnum(BaseEnum):
    """
    Enum over consecutive integers starting at ``offset``.

    Membership and reverse lookup are range checks: a value is a member when
    it is a number, survives 32-bit truncation and absolute value unchanged,
    and falls in ``offset <= value < offset + len``.
    """

    kind = "number"

    def __init__(self, name: str, keys: Sequence[str], offset: int = 0) -> None:
        super().__init__(name, keys)
        offset = to_int32(offset)
        object.__setattr__(self, "_offset", offset)
        object.__setattr__(self, "_end", offset + len(self._keys))
        for i, key in enumerate(self._keys):
            self._members[key] = offset + i
        self._seal()

    @property
    def offset(self) -> int:
        return self._offset

    def _position(self, value: Any) -> int | None:
        if not is_number(value):
            return None
        index = abs(to_int32(value))
        if value != index or not self._offset <= index < self._end:
            return None
        return index - self._offset

    def get_key(self, value: Any) -> str | None:
        position = self._position(value)
        return None if position is None else self._keys[position]

    def keys(self) -> EnumIterator:
        return EnumIterator(IterMode.OFFSET_ELEMENT, self._offset, self._end, self._keys)

    def values(self) -> EnumIterator:
        return EnumIterator(IterMode.INDEX, self._offset, self._end)

    def entries(self) -> EnumIterator:
        return EnumIterator(IterMode.OFFSET_PAIR, self._offset, self._end, self._keys)


class ObjectEnum(BaseEnum):
    """
    Enum of identity-backed ``Variant`` members.

    Membership, ordering and reverse lookup go by variant identity, never
    by the variant's value. A variant of another enum is never a member.
    """

    kind = "object"

    def __init__(self, name: str, keys: Sequence[str], init_values: bool) -> None:
        super().__init__(name, keys)
        store = get_store()
        variants: list[Variant] = []
        positions: dict[Variant, int] = {}
        for i, key in enumerate(self._keys):
            variant = Variant(self)
            store.register(variant, key, self, key if init_values else UNSET)
            variants.append(variant)
            positions[variant] = i
            self._members[key] = variant
        object.__setattr__(self, "_variants", tuple(variants))
        object.__setattr__(self, "_positions", positions)
        if init_values:
            self._seal()

    def _position(self, value: Any) -> int | None:
        if not isinstance(value, Variant):
            return None
        return self._positions.get(value)

    def get_key(self, value: Any) -> str | None:
        position = self._position(value)
        return None if position is None else self._keys[position]

    def keys(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._keys)

    def values(self) -> EnumIterator:
        return EnumIterator(IterMode.ELEMENT, 0, len(self._keys), self._variants)

    def entries(self) -> EnumIterator:
        return EnumIterator(IterMode.PAIR, 0, len(self._keys), self._keys, self._variants)

    def _seal(self) -> None:
        if self._sealed:
            return
        store = get_store()
        for key, variant in zip(self._keys, self._variants):
            if not store.has_value(variant):
                raise UnboundValueError(
                    "cannot seal before every value is set",
                    EnumContext(enum=str(self._name), member=key),
                )
        super()._seal()

    def __repr__(self) -> str:
        state = "" if self._sealed else " (open)"
        return f"<{type(self).__name__} {self._name}{state}>"


# =============================================================================
# Entry points
# =============================================================================


def init_enum(
    name: str,
    keys: Sequence[str],
    values: Sequence[Any],
    *,
    strict: bool | None = None,
) -> ValueEnum:
    """
    Build a sealed enum over arbitrary hashable values.

    Args:
        name: Display name, used in reprs and error messages
        keys: Ordered member names
        values: Member values, same length as ``keys``
        strict: Override ENUMKIT_STRICT for this call

    Raises:
        EnumDefinitionError: malformed input
    """
    check_definition(name, keys, values, strict=resolve_strict(strict))
    return ValueEnum(name, keys, values)


def init_string_enum(name: str, keys: Sequence[str], *, strict: bool | None = None) -> StringEnum:
    """Build a sealed enum whose values are its member names."""
    check_definition(name, keys, strict=resolve_strict(strict))
    return StringEnum(name, keys)


def init_number_enum(
    name: str,
    keys: Sequence[str],
    offset: int = 0,
    *,
    strict: bool | None = None,
) -> NumberEnum:
    """
    Build a sealed enum valued ``offset, offset + 1, ...`` in declaration order.

    Raises:
        EnumDefinitionError: malformed names, or an offset that is negative or
            pushes the last value past the 32-bit range
    """
    check_definition(name, keys, strict=resolve_strict(strict))
    offset = check_offset(name, offset, len(keys))
    return NumberEnum(name, keys, offset)


def init_object_enum(
    name: str,
    init_values: bool,
    keys: Sequence[str],
    *,
    strict: bool | None = None,
) -> ObjectEnum:
    """
    Build an enum of ``Variant`` members.

    With ``init_values`` true every variant's value is its own name and the
    enum comes back sealed. Otherwise the enum comes back open: bind each
    value with ``set_value``, then call ``seal_enum``.
    """
    check_definition(name, keys, strict=resolve_strict(strict))
    enum = ObjectEnum(name, keys, bool(init_values))
    if not enum.sealed:
        logger.debug("Object enum %s left open for %d deferred values", name, len(enum))
    return enum


def set_value(variant: Variant, value: Any) -> None:
    """
    Bind the value of a variant whose enum is still open.

    Raises:
        NotAVariantError: ``variant`` is not a variant
        EnumSealedError: its enum is already sealed
        ValueAlreadyBoundError: its value was already bound
    """
    get_store().bind_value(variant, value)


def seal_enum(enum: BaseEnum) -> BaseEnum:
    """
    Seal an open enum and return it. Sealing a sealed enum does nothing.

    Raises:
        UnboundValueError: a variant has no value yet
    """
    enum._seal()
    return enum


@contextmanager
def object_enum_builder(
    name: str,
    keys: Sequence[str],
    *,
    strict: bool | None = None,
) -> Iterator[ObjectEnum]:
    """
    Build an object enum with deferred values, sealing it on exit.

    If the block raises, the enum is left open and its variants never
    report a parent.
    """
    enum = init_object_enum(name, False, keys, strict=strict)
    yield enum
    seal_enum(enum)
