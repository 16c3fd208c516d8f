# Reserved field names and tags, created once at import time.

from reduct.types.symbol import Symbol
from reduct.types.table import Table

EMPTY = Table()

# Tag field and its values
TYPE = Symbol("type")
STATEMENT = Symbol("statement")
ERROR = Symbol("error")

# Error fields
ERROR_TYPE = Symbol("error-type")
MESSAGE = Symbol("message")
MAP = Symbol("map")
KEY = Symbol("key")

# Error kinds
READ_ERROR = Symbol("read-error")
LOOKUP_ERROR = Symbol("lookup-error")
EVAL_ERROR = Symbol("eval-error")
