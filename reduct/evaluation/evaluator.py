"""Single-step reducer.

`evaluate_step` performs exactly one head reduction of a statement:

    (m k a b ...)  ->  ((m . k) a b ...)

where `m . k` is an ordinary lookup of `k` in `m`, falling back to universal
lookup when `m` is a table. Anything that is not a statement is already in
normal form and is returned as-is.
"""

from __future__ import annotations

from reduct.types.value import Value
from reduct.types.table import Table
from reduct.types.statement import (
    is_statement, make_statement, position, statement_length,
)
from reduct.types.error import is_error
from reduct.evaluation.lookup import lookup, universal_lookup


def evaluate_step(expr: Value) -> Value:
    if not is_statement(expr):
        return expr

    n = statement_length(expr)
    if n == 1:
        return evaluate_step(lookup(expr, position(0)))

    m = evaluate_step(expr[position(0)])
    if is_error(m):
        return m
    k = evaluate_step(expr[position(1)])
    if is_error(k):
        return k

    r = lookup(m, k)
    if is_error(r) and isinstance(m, Table):
        r = universal_lookup(m, k)
    if n == 2 or is_error(r):
        return r

    # Re-apply the reduced head to the untouched remaining arguments
    rest = [expr[position(i)] for i in range(2, n)]
    return make_statement([r, *rest])
