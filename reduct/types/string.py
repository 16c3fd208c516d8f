from __future__ import annotations

from reduct.types.value import Value


class String(Value):
    """A text literal. Never equal to a Symbol, whatever the text."""

    __slots__ = ("text",)
    RANK = 1

    def __init__(self, text: str):
        self.text = text

    def _key(self) -> str:
        return self.text

    def __repr__(self):
        return f"String({self.text!r})"
