from __future__ import annotations

from reduct.types.value import Value


class Symbol(Value):
    __slots__ = ("id",)
    RANK = 0

    def __init__(self, name: str):
        self.id = name

    def _key(self) -> str:
        return self.id

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
