"""The universal table value.

A Table is an immutable ordered mapping from Value to Value. It serves as a
record, a positional list (statements), a one-argument function (when it
holds a Placeholder key) and an error report. Entries are always iterated in
key order; equality ignores the order in which entries were supplied.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from reduct.errors import ReductTypeError
from reduct.types.value import Value
from reduct.types.placeholder import Placeholder


class Table(Value, Mapping):
    __slots__ = ("_entries", "_items", "_hash")
    RANK = 2

    def __init__(
        self, entries: Mapping[Value, Value] | Iterable[tuple[Value, Value]] = ()
    ):
        entries = dict(entries)
        placeholder = None
        for key, value in entries.items():
            if not isinstance(key, Value) or not isinstance(value, Value):
                raise ReductTypeError(f"Table entries must be values, got {key!r} = {value!r}")
            if isinstance(key, Placeholder):
                if placeholder is not None:
                    raise ReductTypeError(
                        f"A table may hold only one placeholder key, got {placeholder!r} and {key!r}"
                    )
                placeholder = key
        self._entries: dict[Value, Value] = entries
        self._items: tuple[tuple[Value, Value], ...] = tuple(
            sorted(entries.items(), key=lambda kv: kv[0])
        )
        self._hash: int | None = None

    def _key(self) -> tuple[tuple[Value, Value], ...]:
        return self._items

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.RANK, self._items))
        return self._hash

    # --- Mapping protocol ---
    def __getitem__(self, key: Value) -> Value:
        return self._entries[key]

    def __iter__(self) -> Iterator[Value]:
        return (k for k, _ in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def items(self):
        return self._items

    def __repr__(self) -> str:
        return f"Table({self})"

    # --- Construction helpers ---
    def with_(self, key: Value, value: Value) -> Table:
        """Return a copy of this table where `key` maps to `value`."""
        entries = dict(self._entries)
        entries[key] = value
        return Table(entries)

    def placeholder_entry(self) -> tuple[Placeholder, Value] | None:
        """Return the (placeholder, body) pair, or None for an ordinary table."""
        # Placeholders rank last, so the only candidate is the final entry
        if self._items and isinstance(self._items[-1][0], Placeholder):
            return self._items[-1]
        return None


def with_(table: Value, key: Value, value: Value) -> Table:
    if not isinstance(table, Table):
        raise ReductTypeError(f"Expected a table, got {table!r}")
    return table.with_(key, value)
