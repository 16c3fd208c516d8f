"""Canonical and pretty serialization of values.

Canonical form prints every table in brace form with entries in key order.
Pretty form is the same except that statements print as `(e0 e1 ...)`.
"""

from __future__ import annotations

from io import StringIO
from typing import TextIO

from reduct.errors import ReductTypeError
from reduct.types.value import Value
from reduct.types.symbol import Symbol
from reduct.types.string import String
from reduct.types.placeholder import Placeholder, PLACEHOLDER_SIGIL
from reduct.types.table import Table
from reduct.types.statement import is_statement, statement_elements


def quote_string(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _write(value: Value, out: TextIO, pretty: bool) -> None:
    match value:
        case Symbol():
            out.write(value.id)
        case String():
            out.write(quote_string(value.text))
        case Placeholder():
            out.write(PLACEHOLDER_SIGIL + value.name)
        case Table() if pretty and is_statement(value):
            out.write("(")
            for i, element in enumerate(statement_elements(value)):
                if i:
                    out.write(" ")
                _write(element, out, pretty)
            out.write(")")
        case Table():
            out.write("{")
            sep = ""
            for key, item in value.items():
                out.write(sep)
                _write(key, out, pretty)
                out.write(" = ")
                _write(item, out, pretty)
                sep = ", "
            out.write("}")
        case _:
            raise ReductTypeError(f"Cannot print {value!r}")


def write(value: Value, out: TextIO, pretty: bool = True) -> None:
    _write(value, out, pretty)


def to_canonical(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer, False)
        return buffer.getvalue()


def to_pretty(value: Value) -> str:
    with StringIO() as buffer:
        _write(value, buffer, True)
        return buffer.getvalue()
