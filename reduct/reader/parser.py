"""
  Reduct Reader, Lexer and Parser

- Regex lexer, recursive-descent parser with one-token lookahead
- Emits Reduct values:

    - foo      -> Symbol("foo")
    - $x       -> Placeholder("x")
    - "a b"    -> String("a b")    ('single quotes' work too)
    - {k = v}  -> Table
    - a b c    -> statement table {0 = a, 1 = b, 2 = c, type = statement}
    - (a b)    -> the statement `a b`, usable wherever an atom is
    - a single atom is never wrapped in a statement

   n.b. Failures never escape `read`: they come back as read-error values.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from reduct.errors import ReductSyntaxError
from reduct.types.value import Value
from reduct.types.symbol import Symbol
from reduct.types.string import String
from reduct.types.placeholder import Placeholder, PLACEHOLDER_SIGIL
from reduct.types.table import Table
from reduct.types.statement import make_statement
from reduct.types.error import read_error

logger = logging.getLogger(__name__)

SYMBOL_CHARS = r"[\w!?+\-*/%]"

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lbrace>\{)"
    r"|(?P<rbrace>\})"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<equals>=)"
    r"|(?P<comma>,)"
    r'|(?P<string>"(?:\\.|[^\\"])*"|\'(?:\\.|[^\\\'])*\')'  # either quote
    r"|(?P<open_string>[\"'])"  # a quote that never closes
    r"|(?P<placeholder>" + re.escape(PLACEHOLDER_SIGIL) + SYMBOL_CHARS + r"+)"
    r"|(?P<symbol>" + SYMBOL_CHARS + r"+)"
    r"|(?P<unknown>\S)"
    r")",
    re.DOTALL,
)

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

ATOM_TOKENS = frozenset(
    ("symbol", "placeholder", "string", "open_string", "lbrace", "lparen")
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            break  # only trailing whitespace left
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_statement(self) -> Value:
        """Read the longest run of atoms; one atom stands for itself."""
        atoms = []
        while (atom := self.parse_atom()) is not None:
            atoms.append(atom)
        if not atoms:
            raise ReductSyntaxError("Expected a statement")
        if len(atoms) == 1:
            return atoms[0]
        return make_statement(atoms)

    def parse_atom(self) -> Value | None:
        """Read one atom, or return None if the next token cannot start one."""
        tok_type, tok_val = self.peek()
        if tok_type not in ATOM_TOKENS:
            return None

        if tok_type == "symbol":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "placeholder":
            self.advance()
            return Placeholder(tok_val[len(PLACEHOLDER_SIGIL):])

        if tok_type == "string":
            self.advance()
            return String(ESCAPE_RE.sub(r"\1", tok_val[1:-1]))

        if tok_type == "open_string":
            raise ReductSyntaxError("Unexpected eof while reading string")

        if tok_type == "lbrace":
            return self.parse_table()

        return self.parse_group()

    def parse_table(self) -> Table:
        self.advance()  # consume {
        entries: dict[Value, Value] = {}
        placeholder: Placeholder | None = None
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                raise ReductSyntaxError("Unexpected eof while reading table")
            if tok_type == "rbrace":
                self.advance()
                break

            key = self.parse_atom()
            if key is None:
                raise ReductSyntaxError("Expected a key while reading table")
            if isinstance(key, Placeholder):
                if placeholder is not None and key != placeholder:
                    raise ReductSyntaxError("Only one substitution key is allowed per table")
                placeholder = key

            tok_type, _ = self.peek()
            if tok_type is None:
                raise ReductSyntaxError("Unexpected eof while reading table")
            if tok_type != "equals":
                raise ReductSyntaxError("Expected '=' while reading table")
            self.advance()

            if self.peek()[0] is None:
                raise ReductSyntaxError("Unexpected eof while reading table")
            entries[key] = self.parse_statement()

            if self.peek()[0] == "comma":
                self.advance()
        return Table(entries)

    def parse_group(self) -> Value:
        self.advance()  # consume (
        expr = self.parse_statement()
        tok_type, tok_val = self.peek()
        if tok_type is None:
            raise ReductSyntaxError("Unexpected eof while reading statement")
        if tok_type != "rparen":
            raise ReductSyntaxError(f"Expected ')' but found '{tok_val[0]}'")
        self.advance()
        return expr


def parse(source: str) -> Value:
    """Parse one statement from text, raising ReductSyntaxError on failure."""
    stream = TokenStream(lex(source))
    try:
        expr = stream.parse_statement()
    except RecursionError:
        raise ReductSyntaxError("Expression nested too deeply") from None
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise ReductSyntaxError(f"Unexpected character '{tok_val[0]}'")
    return expr


def read(source: str | Value) -> Value:
    """Read one statement from `source`.

    Text (a Python str or a String value) is parsed; any other value is
    returned unchanged. Malformed text yields a read-error value.
    """
    if isinstance(source, String):
        source = source.text
    elif isinstance(source, Value):
        return source

    try:
        return parse(source)
    except ReductSyntaxError as e:
        logger.debug("read error in %r: %s", source, e)
        return read_error(str(e))
