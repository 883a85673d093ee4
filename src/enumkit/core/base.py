"""
Shared enum surface and the helpers the factories build on.

``BaseEnum`` holds what every flavor has in common: a display name, the
ordered member names, attribute and item access to members, the sealed
flag, and ``compare`` expressed over a flavor-specific ``_position``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator, Sequence
from typing import Any, ClassVar

from .errors import EnumContext, EnumSealedError, incomparable, make_definition_error
from .iteration import EnumIterator

logger = logging.getLogger(__name__)

# Public attribute names of every enum. Members with these names are still
# reachable through ``enum[name]``, but not as attributes.
SURFACE_NAMES = frozenset(
    {
        "name",
        "kind",
        "sealed",
        "get_key",
        "compare",
        "keys",
        "values",
        "entries",
        "is_member",
    }
)

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_int32(value: float) -> int:
    """Truncate a number to a signed 32-bit integer, wrapping on overflow.

    Non-finite floats become 0.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        value = math.trunc(value)
    result = int(value) & _INT32_MASK
    if result & _INT32_SIGN:
        result -= _INT32_MASK + 1
    return result


def check_offset(name: str, offset: int, length: int) -> int:
    """
    Validate a number enum's offset and return it truncated to int32.

    Every member value must survive the membership check unchanged, so the
    whole range ``offset .. offset + length - 1`` has to be non-negative and
    fit in a signed 32-bit integer.

    Raises:
        EnumDefinitionError: the range would contain unreachable members
    """
    if not is_number(offset):
        raise make_definition_error(f"offset {offset!r} is not a number", str(name))
    start = to_int32(offset)
    if start < 0:
        raise make_definition_error(f"offset {start} is negative", str(name))
    if start + length > _INT32_SIGN:
        raise make_definition_error(
            f"offset {start} with {length} members exceeds the 32-bit range", str(name)
        )
    return start


def order(index_a: int, index_b: int) -> int:
    """Sign of the position difference: -1, 0 or 1."""
    if index_a < index_b:
        return -1
    if index_a > index_b:
        return 1
    return 0


def check_definition(
    name: str,
    keys: Sequence[Any],
    values: Sequence[Any] | None = None,
    *,
    strict: bool = False,
) -> None:
    """
    Validate factory input before an enum is built.

    Length and type checks always run. Duplicate and reserved-name checks
    only run in strict mode, since the generator calling the factories owns
    those rules.

    Raises:
        EnumDefinitionError: on the first problem found
    """
    for key in keys:
        if not isinstance(key, str):
            raise make_definition_error(f"member name {key!r} is not a string", str(name))

    if values is not None:
        if len(values) != len(keys):
            raise make_definition_error(f"{len(keys)} names but {len(values)} values", str(name))
        for key, value in zip(keys, values):
            try:
                hash(value)
            except TypeError:
                raise make_definition_error(
                    f"value {value!r} is not hashable", str(name), key
                ) from None

    if not strict:
        return

    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise make_definition_error("duplicate member name", str(name), key)
        if key in SURFACE_NAMES or key.startswith("_"):
            raise make_definition_error("member name shadows the enum surface", str(name), key)
        seen.add(key)

    if values is not None:
        seen_values: set[Any] = set()
        for key, value in zip(keys, values):
            if value in seen_values:
                raise make_definition_error(f"duplicate value {value!r}", str(name), key)
            seen_values.add(value)


class BaseEnum:
    """
    Common behaviour of all sealed enums.

    Subclasses fill ``_members`` (name -> member value) and implement
    ``_position``, ``get_key``, ``keys``, ``values`` and ``entries``.
    Once constructed, no attribute of an enum can be assigned or deleted.
    """

    kind: ClassVar[str] = "enum"

    def __init__(self, name: str, keys: Sequence[str]) -> None:
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_keys", tuple(keys))
        object.__setattr__(self, "_members", {})
        object.__setattr__(self, "_sealed", False)

    # -- surface -----------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _position(self, value: Any) -> int | None:
        raise NotImplementedError

    def get_key(self, value: Any) -> str | None:
        raise NotImplementedError

    def keys(self) -> EnumIterator:
        raise NotImplementedError

    def values(self) -> EnumIterator:
        raise NotImplementedError

    def entries(self) -> EnumIterator:
        raise NotImplementedError

    def is_member(self, value: Any) -> bool:
        return self._position(value) is not None

    def compare(self, a: Any, b: Any) -> int:
        """
        Order two members by declaration position.

        Returns:
            -1, 0 or 1

        Raises:
            IncomparableError: if either argument is not a member
        """
        index_a = self._position(a)
        index_b = self._position(b)
        if index_a is None or index_b is None:
            raise incomparable(str(self._name))
        return order(index_a, index_b)

    # -- sealing -----------------------------------------------------------

    def _seal(self) -> None:
        if self._sealed:
            return
        object.__setattr__(self, "_sealed", True)
        logger.debug("Sealed %s %s with %d members", self.kind, self._name, len(self._keys))

    # -- python protocols --------------------------------------------------

    def __getattr__(self, attr: str) -> Any:
        # Only reached when normal lookup fails, so methods win over members.
        if attr.startswith("_"):
            raise AttributeError(attr)
        members = self.__dict__.get("_members", {})
        try:
            return members[attr]
        except KeyError:
            raise AttributeError(f"enum {self._name} has no member '{attr}'") from None

    def __getitem__(self, key: str) -> Any:
        try:
            return self._members[key]
        except (KeyError, TypeError):
            raise KeyError(key) from None

    def __setattr__(self, attr: str, value: Any) -> None:
        raise EnumSealedError(f"cannot assign '{attr}'", EnumContext(enum=str(self._name)))

    def __delattr__(self, attr: str) -> None:
        raise EnumSealedError(f"cannot delete '{attr}'", EnumContext(enum=str(self._name)))

    def __contains__(self, value: Any) -> bool:
        return self.is_member(value)

    def __iter__(self) -> Iterator[str]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._keys)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._keys))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._name}>"
