"""Error values.

Failures in the reader and the reduction engine are reported as ordinary
tables tagged `type = error`, never as exceptions. They carry the error kind,
a message and, for lookups, the map and key that failed.
"""

from __future__ import annotations

from reduct.types.value import Value, as_string
from reduct.types.symbol import Symbol
from reduct.types.string import String
from reduct.types.table import Table
from reduct.types.wellknown import (
    TYPE, ERROR, ERROR_TYPE, MESSAGE, MAP, KEY,
    READ_ERROR, LOOKUP_ERROR, EVAL_ERROR,
)


def make_error(kind: Symbol, message: str, **context: Value) -> Table:
    entries = {TYPE: ERROR, ERROR_TYPE: kind, MESSAGE: String(message)}
    for name, value in context.items():
        entries[Symbol(name)] = value
    return Table(entries)


def read_error(message: str) -> Table:
    return make_error(READ_ERROR, message)


def lookup_error(message: str, map_: Value, key: Value) -> Table:
    return make_error(LOOKUP_ERROR, message, **{MAP.id: map_, KEY.id: key})


def eval_error(message: str, **context: Value) -> Table:
    return make_error(EVAL_ERROR, message, **context)


def is_error(value: Value) -> bool:
    return isinstance(value, Table) and value.get(TYPE) == ERROR


def _field_text(error: Table, field: Symbol) -> str:
    # Hand-written error tables may omit a field or hold a table in it
    value = error.get(field)
    if value is None:
        return ""
    if isinstance(value, Table):
        return str(value)
    return as_string(value)


def error_kind(error: Table) -> str:
    return _field_text(error, ERROR_TYPE)


def error_message(error: Table) -> str:
    return _field_text(error, MESSAGE)
