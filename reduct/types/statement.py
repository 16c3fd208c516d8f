"""Statement shape helpers.

A statement is a Table tagged `type = statement` holding positional keys
`0`, `1`, ... `n-1`. It stands for a pending reduction of its elements.
"""

from __future__ import annotations

from typing import Sequence

from reduct.errors import ReductTypeError
from reduct.types.value import Value
from reduct.types.symbol import Symbol
from reduct.types.table import Table
from reduct.types.wellknown import TYPE, STATEMENT


def position(index: int) -> Symbol:
    return Symbol(str(index))


def make_statement(elements: Sequence[Value]) -> Table:
    if not elements:
        raise ReductTypeError("A statement needs at least one element")
    entries = {position(i): element for i, element in enumerate(elements)}
    entries[TYPE] = STATEMENT
    return Table(entries)


def is_statement(value: Value) -> bool:
    return (
        isinstance(value, Table)
        and value.get(TYPE) == STATEMENT
        and position(0) in value
    )


def statement_length(table: Table) -> int:
    n = 0
    while position(n) in table:
        n += 1
    return n


def statement_elements(table: Table) -> list[Value]:
    return [table[position(i)] for i in range(statement_length(table))]
