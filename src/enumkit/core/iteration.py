"""
Shared iterator engine for all enum flavors.

One ``EnumIterator`` type serves keys, values and entries of every enum.
The mode tag picks what each step yields:

    INDEX           cursor                          (number enum values)
    OFFSET_ELEMENT  first[cursor - start]           (number enum keys)
    OFFSET_PAIR     (first[cursor - start], cursor) (number enum entries)
    ELEMENT         first[cursor]
    PAIR            (first[cursor], second[cursor])

Number enums iterate the implicit range ``offset .. offset + len`` and never
materialize a values list.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum
from typing import Any, NamedTuple


class IterMode(IntEnum):
    """What an iterator session yields per step."""

    OFFSET_ELEMENT = 0
    INDEX = 1
    OFFSET_PAIR = 2
    ELEMENT = 3
    PAIR = 4


class IterStep(NamedTuple):
    """Result of one ``EnumIterator.step()`` call."""

    done: bool
    value: Any = None


class EnumIterator:
    """
    A single forward-only traversal over an enum.

    Sessions are created per ``keys()``/``values()``/``entries()`` call and
    are never reused. Once the cursor reaches ``end`` the session reports
    done on every later call and drops its backing sequences.
    """

    __slots__ = ("_mode", "_start", "_cursor", "_end", "_first", "_second")

    def __init__(
        self,
        mode: IterMode,
        start: int,
        end: int,
        first: Sequence[Any] | None = None,
        second: Sequence[Any] | None = None,
    ) -> None:
        self._mode = IterMode(mode)
        self._start = start
        self._cursor = start
        self._end = end
        self._first = first
        self._second = second

    def step(self) -> IterStep:
        """Advance by one and report ``(done, value)``."""
        cursor = self._cursor
        if cursor >= self._end:
            self._first = self._second = None
            return IterStep(done=True)

        mode = self._mode
        first = self._first
        if mode is IterMode.INDEX:
            value: Any = cursor
        elif mode is IterMode.OFFSET_ELEMENT:
            value = first[cursor - self._start]  # type: ignore[index]
        elif mode is IterMode.OFFSET_PAIR:
            value = (first[cursor - self._start], cursor)  # type: ignore[index]
        elif mode is IterMode.ELEMENT:
            value = first[cursor]  # type: ignore[index]
        else:
            value = (first[cursor], self._second[cursor])  # type: ignore[index]

        self._cursor = cursor + 1
        return IterStep(done=False, value=value)

    @property
    def done(self) -> bool:
        return self._cursor >= self._end

    def __iter__(self) -> EnumIterator:
        return self

    def __next__(self) -> Any:
        result = self.step()
        if result.done:
            raise StopIteration
        return result.value

    def __length_hint__(self) -> int:
        return max(0, self._end - self._cursor)

    def __repr__(self) -> str:
        return f"<EnumIterator {self._mode.name.lower()} {self._cursor}/{self._end}>"
