"""Table lookup and universal lookup.

Universal lookup is the fallback used when an ordinary lookup misses: a table
holding a placeholder key acts as a one-argument function whose body is the
value stored under the placeholder. The argument is substituted for the
placeholder in the top-level slots of the body only.
"""

from __future__ import annotations

from reduct.types.value import Value
from reduct.types.placeholder import Placeholder
from reduct.types.table import Table
from reduct.types.statement import is_statement, make_statement, statement_elements
from reduct.types.error import lookup_error


def lookup(map_: Value, key: Value) -> Value:
    if not isinstance(map_, Table):
        return lookup_error("Expected a table for lookup", map_, key)
    value = map_.get(key)
    if value is None:
        return lookup_error("Could not find key in table", map_, key)
    return value


def universal_lookup(map_: Value, key: Value) -> Value:
    if not isinstance(map_, Table):
        return lookup_error("Expected a table for lookup", map_, key)
    entry = map_.placeholder_entry()
    if entry is None:
        return lookup_error("Could not find key in table", map_, key)
    placeholder, body = entry

    # A body may only mention its own table's placeholder
    slots = statement_elements(body) if is_statement(body) else [body]
    if any(isinstance(v, Placeholder) and v != placeholder for v in slots):
        return lookup_error("Mismatch between substitution key and expression", map_, key)

    def substitute(v: Value) -> Value:
        return key if isinstance(v, Placeholder) else v

    if not is_statement(body):
        return substitute(body)
    return make_statement([substitute(v) for v in slots])
