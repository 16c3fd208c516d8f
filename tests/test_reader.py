import pytest

from reduct.types.symbol import Symbol
from reduct.types.string import String
from reduct.types.placeholder import Placeholder
from reduct.types.table import Table
from reduct.types.statement import make_statement
from reduct.types.error import is_error, error_kind, error_message
from reduct.errors import ReductSyntaxError
from reduct.reader.parser import lex, parse, read

a, b, c = Symbol("a"), Symbol("b"), Symbol("c")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("  a  ", [("symbol", "a")]),
        ("{a = $x}", [("lbrace", "{"), ("symbol", "a"), ("equals", "="), ("placeholder", "$x"), ("rbrace", "}")]),
        ("(f x),", [("lparen", "("), ("symbol", "f"), ("symbol", "x"), ("rparen", ")"), ("comma", ",")]),
        ('"a b" \'c\'', [("string", '"a b"'), ("string", "'c'")]),
        ('"abc', [("open_string", '"'), ("symbol", "abc")]),
        ("+-*/%!?_9", [("symbol", "+-*/%!?_9")]),
        ("a#", [("symbol", "a"), ("unknown", "#")]),
        ("", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected

# -----------------------------------------------------
# Atoms and statements
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("x", Symbol("x")),
        ("  hello-world!  ", Symbol("hello-world!")),
        ("42", Symbol("42")),
        ("$x", Placeholder("x")),
        ('"a b"', String("a b")),
        ("'a b'", String("a b")),
        ('""', String("")),
        (r'"say \"hi\""', String('say "hi"')),
        (r"'it\'s'", String("it's")),
        (r'"back\\slash"', String("back\\slash")),
        (r'"\n"', String("n")),
        ("{}", Table()),
        ("(x)", Symbol("x")),
        ("((x))", Symbol("x")),
    ]
)
def test_read_atoms(source, expected):
    assert read(source) == expected

def test_single_atom_is_not_wrapped():
    assert read("x") == Symbol("x")

def test_read_statement():
    assert read("a b c") == make_statement([a, b, c])

def test_read_nested_group():
    assert read("(a b) c") == make_statement([make_statement([a, b]), c])
    assert read("a (b c)") == make_statement([a, make_statement([b, c])])

def test_read_statement_of_mixed_atoms():
    assert read('{a = b} a "s" $p') == make_statement(
        [Table({a: b}), a, String("s"), Placeholder("p")]
    )

# -----------------------------------------------------
# Tables
# -----------------------------------------------------

def test_read_simple_table():
    assert read("{a = 1, b = 2}") == Table({a: Symbol("1"), b: Symbol("2")})
    assert read("{b = 2, a = 1}") == read("{a=1,b=2}")

def test_trailing_comma_is_allowed():
    assert read("{a = 1,}") == Table({a: Symbol("1")})

def test_table_values_are_statements():
    assert read("{a = b c}") == Table({a: make_statement([b, c])})

def test_table_keys_can_be_any_atom():
    t = read('{"s" = 1, {} = 2, (a b) = 3}')
    assert t[String("s")] == Symbol("1")
    assert t[Table()] == Symbol("2")
    assert t[make_statement([a, b])] == Symbol("3")

def test_function_table():
    t = read("{$x = ($x $x)}")
    x = Placeholder("x")
    assert t == Table({x: make_statement([x, x])})

def test_repeated_key_keeps_last_value():
    assert read("{a = 1, a = 2}") == Table({a: Symbol("2")})
    assert read("{$x = 1, $x = 2}") == Table({Placeholder("x"): Symbol("2")})

# -----------------------------------------------------
# Errors
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,message",
    [
        ("{a=1", "Unexpected eof while reading table"),
        ("{", "Unexpected eof while reading table"),
        ("{a", "Unexpected eof while reading table"),
        ("{a =", "Unexpected eof while reading table"),
        ("{a 1}", "Expected '=' while reading table"),
        ("{= 1}", "Expected a key while reading table"),
        ("{a = 1 b = 2}", "Expected a key while reading table"),
        ("{a = }", "Expected a statement"),
        ("{$x = 1, $y = 2}", "Only one substitution key is allowed per table"),
        ('"abc', "Unexpected eof while reading string"),
        ("a 'b", "Unexpected eof while reading string"),
        ("", "Expected a statement"),
        ("   ", "Expected a statement"),
        ("()", "Expected a statement"),
        ("(a b", "Unexpected eof while reading statement"),
        ("(a b}", "Expected ')' but found '}'"),
        ("a }", "Unexpected character '}'"),
        ("a = b", "Unexpected character '='"),
        ("a $", "Unexpected character '$'"),
        ("x # y", "Unexpected character '#'"),
        ("{a = {b = 1}", "Unexpected eof while reading table"),
    ]
)
def test_read_errors(source, message):
    result = read(source)
    assert is_error(result)
    assert error_kind(result) == "read-error"
    assert error_message(result) == message

def test_nested_error_is_returned_unchanged():
    inner = read("{b = }")
    outer = read("{a = {b = }}")
    assert outer == inner

# -----------------------------------------------------
# Already-read input
# -----------------------------------------------------

def test_read_returns_values_unchanged():
    t = Table({a: b})
    assert read(t) is t
    assert read(a) is a
    assert read(Placeholder("x")) == Placeholder("x")

def test_read_string_value_as_source():
    assert read(String("a b")) == make_statement([a, b])
    assert read(String("x")) == Symbol("x")

# -----------------------------------------------------
# Deep nesting
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source",
    [
        "(" * 5000 + "x" + ")" * 5000,
        "{a = " * 5000 + "x" + "}" * 5000,
    ]
)
def test_deep_nesting_is_a_read_error(source):
    result = read(source)
    assert is_error(result)
    assert error_message(result) == "Expression nested too deeply"

def test_parse_raises_on_malformed_text():
    assert parse("a b") == make_statement([a, b])
    with pytest.raises(ReductSyntaxError, match="Unexpected eof while reading table"):
        parse("{a=1")
