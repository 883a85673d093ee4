"""
Variant metadata store.

Variants of an object enum are bare identity objects: they have no instance
``__dict__`` and expose no own fields. Their name, owning enum and value live
in a side table keyed weakly by variant identity. The accessor properties on
``Variant`` read through that table, so an object that was never registered
is rejected with ``NotAVariantError``.

The table holds only a weak link to each owning enum. A variant pins its own
enum, so the enum lives at least as long as any of its variants.
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .errors import (
    EnumContext,
    EnumKitError,
    EnumSealedError,
    NotAVariantError,
    UnboundValueError,
    UninitializedEnumError,
    ValueAlreadyBoundError,
)

if TYPE_CHECKING:
    from .factories import ObjectEnum


class _Unset:
    """Marker for a value slot that has not been bound yet."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<unset>"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class VariantRecord:
    """Hidden metadata for one variant."""

    name: str
    owner_ref: weakref.ReferenceType[ObjectEnum]
    value: Any = UNSET

    @property
    def owner(self) -> ObjectEnum:
        owner = self.owner_ref()
        if owner is None:
            # Variants pin their owner, so only a detached record gets here.
            raise EnumKitError(f"owning enum of {self.name} no longer exists")
        return owner


class VariantMetadataStore:
    """
    Identity-keyed side table for variant metadata.

    Only the object-enum factory registers variants. Everything else reads.
    """

    def __init__(self) -> None:
        self._records: weakref.WeakKeyDictionary[Variant, VariantRecord] = (
            weakref.WeakKeyDictionary()
        )

    def __len__(self) -> int:
        return len(self._records)

    def register(self, variant: Variant, name: str, owner: ObjectEnum, value: Any = UNSET) -> None:
        """Record metadata for a freshly created variant."""
        self._records[variant] = VariantRecord(name=name, owner_ref=weakref.ref(owner), value=value)

    def is_variant(self, obj: object) -> bool:
        try:
            return obj in self._records
        except TypeError:
            # Not weak-referenceable, so it cannot be a key.
            return False

    def _record(self, obj: object) -> VariantRecord:
        try:
            return self._records[obj]  # type: ignore[index]
        except (KeyError, TypeError):
            raise NotAVariantError(f"{type(obj).__name__} object is not an enum variant") from None

    def bind_value(self, variant: Variant, value: Any) -> None:
        """
        Bind a variant's value slot.

        Raises:
            NotAVariantError: ``variant`` was never registered here
            EnumSealedError: the owning enum is already sealed
            ValueAlreadyBoundError: the slot was bound before
        """
        record = self._record(variant)
        owner = record.owner
        context = EnumContext(enum=owner.name, member=record.name)
        if owner.sealed:
            raise EnumSealedError("cannot set a value once the enum is sealed", context)
        if record.value is not UNSET:
            raise ValueAlreadyBoundError("value is already bound", context)
        record.value = value

    def has_value(self, variant: Variant) -> bool:
        return self._record(variant).value is not UNSET

    def name(self, variant: Variant) -> str:
        return self._record(variant).name

    def owner(self, variant: Variant) -> ObjectEnum:
        """
        Return the enum a variant belongs to.

        Raises:
            NotAVariantError: ``variant`` was never registered here
            UninitializedEnumError: the owning enum is not sealed yet
        """
        record = self._record(variant)
        owner = record.owner
        if not owner.sealed:
            raise UninitializedEnumError(
                "enum not initialized yet", EnumContext(enum=owner.name, member=record.name)
            )
        return owner

    def value(self, variant: Variant) -> Any:
        record = self._record(variant)
        if record.value is UNSET:
            raise UnboundValueError(
                "value has not been set",
                EnumContext(enum=record.owner.name, member=record.name),
            )
        return record.value


_store = VariantMetadataStore()


def get_store() -> VariantMetadataStore:
    """Return the process-wide metadata store."""
    return _store


class Variant:
    """
    Identity-backed member of an object enum.

    A variant carries no visible state of its own: ``name``, ``parent_enum``
    and ``value`` are read from the metadata store. Variants compare and hash
    by identity, and any attribute assignment raises ``EnumSealedError``.
    """

    __slots__ = ("__weakref__", "_pin")

    def __init__(self, owner: ObjectEnum) -> None:
        object.__setattr__(self, "_pin", owner)

    @property
    def type(self) -> Variant:
        """The variant itself, mirroring ``enum.KEY.type is enum.KEY``."""
        return self

    @property
    def name(self) -> str:
        return _store.name(self)

    @property
    def parent_enum(self) -> ObjectEnum:
        return _store.owner(self)

    @property
    def value(self) -> Any:
        return _store.value(self)

    def to_json(self) -> Any:
        """Return the raw stored value."""
        return _store.value(self)

    def __str__(self) -> str:
        return str(_store.value(self))

    def __repr__(self) -> str:
        if not _store.is_variant(self):
            return f"<{type(self).__name__} (unregistered)>"
        record = _store._record(self)
        return f"<{type(self).__name__} {record.owner.name}.{record.name}>"

    def __setattr__(self, name: str, value: Any) -> None:
        raise EnumSealedError(f"cannot assign attribute '{name}' on an enum variant")

    def __delattr__(self, name: str) -> None:
        raise EnumSealedError(f"cannot delete attribute '{name}' on an enum variant")
