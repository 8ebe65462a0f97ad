# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Sparse, index-ordered storage for the raw values bound to one argument.

`RawValueSlotMap` keeps a dense list of slots indexed by the position at which a
value was bound during parsing. Slots that were never filled stay empty, so the
indices do not need to be contiguous.

`SlotIter` walks the occupied slots with a pair of cursors. `front` moves up and
`back` moves down; both stop once they meet, which lets callers mix forward and
backward steps on the same iterator without seeing a value twice.

Example:
    slots = RawValueSlotMap()
    slots.insert(0, b"a")
    slots.insert(3, b"b")
    slots.insert(4, b"c")

    it = slots.values()
    next(it)          # b"a"
    it.next_back()    # b"c"
    list(it)          # [b"b"]
"""
from __future__ import annotations

from typing import Iterator


class SlotIter:
    """Double-ended cursor over the occupied slots of a `RawValueSlotMap`."""

    __slots__ = ("_slots", "front", "back")

    def __init__(self, slots: list[bytes | None]) -> None:
        self._slots = slots
        self.front: int = 0
        self.back: int = len(slots)

    def __iter__(self) -> SlotIter:
        return self

    def __next__(self) -> bytes:
        while self.front < self.back:
            value = self._slots[self.front]
            self.front += 1
            if value is not None:
                return value
        raise StopIteration

    def next_back(self) -> bytes | None:
        """Return the next value from the back, or None once exhausted."""
        while self.front < self.back:
            self.back -= 1
            value = self._slots[self.back]
            if value is not None:
                return value
        return None

    def __reversed__(self) -> Iterator[bytes]:
        while (value := self.next_back()) is not None:
            yield value

    def __length_hint__(self) -> int:
        return self.back - self.front


class RawValueSlotMap:
    """Maps occurrence index to raw value, iterated in index order."""

    __slots__ = ("_slots", "_len", "_frozen")

    def __init__(self) -> None:
        self._slots: list[bytes | None] = []
        self._len: int = 0
        self._frozen: bool = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> RawValueSlotMap:
        """Return a read-only copy; `insert` and `push` on it raise `TypeError`."""
        if self._frozen:
            return self
        frozen = RawValueSlotMap()
        frozen._slots = list(self._slots)
        frozen._len = self._len
        frozen._frozen = True
        return frozen

    def insert(self, index: int, value: bytes) -> bytes | None:
        """
        Place `value` at `index` and return whatever was stored there before.

        Indices are expected to grow as values are bound; the order itself is
        the producer's responsibility and is not checked here.
        """
        if self._frozen:
            raise TypeError("RawValueSlotMap is read-only once frozen")
        if index < 0:
            raise ValueError(f"slot index must be non-negative, got {index}")
        if index >= len(self._slots):
            self._slots.extend([None] * (index + 1 - len(self._slots)))
        previous = self._slots[index]
        self._slots[index] = value
        if previous is None:
            self._len += 1
        return previous

    def push(self, value: bytes) -> int:
        """Insert `value` after the highest used index and return its index."""
        index = len(self._slots)
        self.insert(index, value)
        return index

    def get(self, index: int) -> bytes | None:
        if 0 <= index < len(self._slots):
            return self._slots[index]
        return None

    def values(self) -> SlotIter:
        return SlotIter(self._slots)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[bytes]:
        return self.values()

    def __repr__(self) -> str:
        occupied = {
            index: value for index, value in enumerate(self._slots) if value is not None
        }
        return f"RawValueSlotMap({occupied!r})"
