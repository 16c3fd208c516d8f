"""Shared base for the four value variants.

Every value is immutable, hashable and totally ordered. Ordering compares the
variant rank first (Symbol < String < Table < Placeholder) and only then the
content, so values of different variants never compare equal even when their
text is identical.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from reduct.errors import ReductTypeError


@total_ordering
class Value:
    __slots__ = ()

    # Variant rank, fixed per subclass
    RANK: int = -1

    def _key(self) -> Any:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self.RANK == other.RANK and self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        if self.RANK != other.RANK:
            return self.RANK < other.RANK
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash((self.RANK, self._key()))

    def __str__(self) -> str:
        # Lazy import to avoid circular imports
        from reduct.printer import to_canonical
        return to_canonical(self)


def as_string(value: Value) -> str:
    """Return the text payload of an atom.

    Tables carry no text payload; asking for one is a contract violation.
    """
    if isinstance(value, Value) and isinstance(value._key(), str):
        return value._key()
    raise ReductTypeError(f"Expected an atom with a text payload, got {value!r}")
