# argmatches — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value views over the raw bytes held by a `MatchedArg`.

Raw values are kept as `bytes` because command-line arguments are not guaranteed
to be valid text on every platform. This module provides the three ways of
reading them back:

- strict: decode as UTF-8 and raise `InvalidUtf8Error` on failure.
- lossy: decode as UTF-8, replacing invalid sequences with U+FFFD.
- raw: hand the bytes back untouched.

`Values` and `OsValues` are the lazy, double-ended iterators returned by
`ArgMatches.values_of()` and `ArgMatches.values_of_os()`. Each instance owns its
own cursor, so asking the store for values twice gives two independent iterators.
"""
from __future__ import annotations

import os
from typing import Iterator

from argmatches.exceptions import InvalidUtf8Error
from argmatches.logger import logger
from argmatches.slot_map import SlotIter

REPLACEMENT_CHARACTER = "\ufffd"


def to_raw(value: str | bytes) -> bytes:
    """
    Convert a producer-supplied value to raw bytes.

    `str` values go through `os.fsencode` so arguments taken from `sys.argv`
    get their original bytes back, including ones Python stored as surrogate
    escapes.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return os.fsencode(value)
    raise TypeError(
        f"Raw values must be str or bytes, got '{type(value).__name__}'"
    )


def decode_strict(name: str, value: bytes) -> str:
    """Decode `value` as UTF-8 or raise `InvalidUtf8Error`."""
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as error:
        logger.error("Invalid UTF-8 in value for '%s': %r", name, value)
        raise InvalidUtf8Error(name, value) from error


def decode_lossy(value: bytes) -> str:
    """Decode `value` as UTF-8, replacing invalid sequences with U+FFFD."""
    return value.decode("utf-8", errors="replace")


class OsValues:
    """
    Lazy iterator over the raw `bytes` values of one argument.

    Supports `next()`, `next_back()` and `reversed()`; all three consume the same
    cursor, so the iterator is single pass.
    """

    __slots__ = ("name", "_iter")

    def __init__(self, name: str, slots: SlotIter) -> None:
        self.name = name
        self._iter = slots

    def __iter__(self) -> OsValues:
        return self

    def __next__(self) -> bytes:
        return next(self._iter)

    def next_back(self) -> bytes | None:
        return self._iter.next_back()

    def __reversed__(self) -> Iterator[bytes]:
        while (value := self.next_back()) is not None:
            yield value

    def __length_hint__(self) -> int:
        return self._iter.__length_hint__()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, remaining<={self.__length_hint__()})"


class Values(OsValues):
    """
    Lazy iterator over the values of one argument as validated `str`.

    Each value is decoded when it is pulled. A value that is not valid UTF-8
    raises `InvalidUtf8Error` at that point; values before it have already been
    handed out.
    """

    __slots__ = ()

    def __next__(self) -> str:  # type: ignore[override]
        return decode_strict(self.name, next(self._iter))

    def next_back(self) -> str | None:  # type: ignore[override]
        value = self._iter.next_back()
        if value is None:
            return None
        return decode_strict(self.name, value)

    def __reversed__(self) -> Iterator[str]:  # type: ignore[override]
        while (value := self.next_back()) is not None:
            yield value
