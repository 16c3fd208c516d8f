from __future__ import annotations

from reduct.types.value import Value

PLACEHOLDER_SIGIL = "$"


class Placeholder(Value):
    """A named binder. As a table key it turns the table into a one-argument function."""

    __slots__ = ("name",)
    RANK = 3  # after Table, so it sorts last inside a table

    def __init__(self, name: str):
        self.name = name

    def _key(self) -> str:
        return self.name

    def __repr__(self):
        return f"Placeholder({self.name!r})"
