"""A mutable string with in-place editing helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator

MAX_LEN = 2**32 - 1 - 4 - 1
"""Largest length a :class:`Str` may hold."""


def _checked(value: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    if len(value) > MAX_LEN:
        raise ValueError(f"string longer than {MAX_LEN} characters")
    return value


class Str:
    """A mutable string that supports trimming, substrings, replacement and tokenizing.

    Every editing method either succeeds completely or raises and leaves
    the current value untouched.
    """

    __slots__ = ("_value",)
    __hash__ = None  # mutable

    def __init__(self, value: str) -> None:
        self._value = _checked(value)

    @classmethod
    def from_format(cls, fmt: str, *args: object) -> "Str":
        """Build a string from a printf-style format and its arguments."""
        return cls(_checked(fmt) % args)

    def __len__(self) -> int:
        return len(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Str):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Str({self._value!r})"

    def dup(self) -> "Str":
        """Return an independent copy."""
        return Str(self._value)

    def set(self, value: str) -> None:
        """Replace the content with ``value``."""
        self._value = _checked(value)

    def set_format(self, fmt: str, *args: object) -> None:
        """Replace the content with a printf-style formatted string."""
        self._value = _checked(_checked(fmt) % args)

    def append(self, value: str) -> None:
        """Append ``value`` to the end."""
        value = _checked(value)
        if len(value) > MAX_LEN - len(self._value):
            raise ValueError(f"string longer than {MAX_LEN} characters")
        self._value += value

    def trim(self, chars: str) -> None:
        """Remove any of ``chars`` from both ends."""
        self._value = self._value.strip(_checked(chars))

    def substring(self, start: int, end: int) -> None:
        """Keep only the characters in ``[start, end)``.

        Raises IndexError if the range is out of bounds or reversed.
        """
        length = len(self._value)
        if start < 0 or end < 0 or start > length or end > length or start > end:
            raise IndexError(
                f"invalid substring range [{start}, {end}) for length {length}"
            )
        self._value = self._value[start:end]

    def replace(self, old: str, new: str) -> None:
        """Replace every non-overlapping occurrence of ``old`` with ``new``."""
        old = _checked(old)
        new = _checked(new)
        if not old:
            raise ValueError("cannot replace an empty string")
        count = self._value.count(old)
        if count == 0:
            return
        size = len(self._value) + count * (len(new) - len(old))
        if size > MAX_LEN:
            raise ValueError(f"string longer than {MAX_LEN} characters")
        self._value = self._value.replace(old, new)

    def tokens(self, delims: str) -> Iterator[str]:
        """Yield the pieces between any of the ``delims`` characters.

        Adjacent delimiters produce empty tokens; the string itself is
        never modified.
        """
        delims = _checked(delims)
        value = self._value
        if not delims:
            yield value
            return
        pattern = re.compile("[" + re.escape(delims) + "]")
        pos = 0
        for match in pattern.finditer(value):
            yield value[pos:match.start()]
            pos = match.end()
        yield value[pos:]