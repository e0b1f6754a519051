import pytest

from mlisp.errors import MlispLexError, MlispParseError
from mlisp.reader.parser import TokenStream, lex, parse, read, tokenize
from mlisp.types.expression import ExprList, Number
from mlisp.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("literal", "a")]),
        ("(a b c)", [("lparen", "("), ("literal", "a"), ("literal", "b"), ("literal", "c"), ("rparen", ")")]),
        ("(+ 1(- 3 2))", [("lparen", "("), ("literal", "+"), ("literal", "1"), ("lparen", "("),
                          ("literal", "-"), ("literal", "3"), ("literal", "2"), ("rparen", ")"), ("rparen", ")")]),
        ("()", [("lparen", "("), ("rparen", ")")]),
        ("  \n\t ", []),
        ("", []),
        ("a)b", [("literal", "a"), ("rparen", ")"), ("literal", "b")]),
        ("<func-object: f>", [("literal", "<func-object:"), ("literal", "f>")]),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected
    assert tokenize(source) == expected


def test_lexer_rejects_non_text():
    with pytest.raises(MlispLexError):
        tokenize(42)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", Number(123)),
        ("-45", Number(-45)),
        ("3.14", Number(3.14)),
        ("1e3", Number(1000)),
        (".5", Number(0.5)),
        ("abc", Symbol("abc")),
        ("add-1", Symbol("add-1")),
        ("1_000", Symbol("1_000")),
        ("True", Symbol("True")),
        ("(a b c)", ExprList([Symbol("a"), Symbol("b"), Symbol("c")])),
        ("()", ExprList()),
        ("(+ 1 (- 3 2))", ExprList([Symbol("+"), Number(1), ExprList([Symbol("-"), Number(3), Number(2)])])),
        ("((a b) (c d))", ExprList([ExprList([Symbol("a"), Symbol("b")]), ExprList([Symbol("c"), Symbol("d")])])),
    ]
)
def test_parser(source, expected):
    assert read(source) == expected


def test_inf_and_nan_literals_are_numbers():
    assert read("inf") == Number(float("inf"))
    nan = read("nan")
    assert isinstance(nan, Number)


@pytest.mark.parametrize("source,message", [
    ("(a b", "unclosed delimiter"),
    ("((a) (b)", "unclosed delimiter"),
    (")", "unexpected )"),
    (") a", "unexpected )"),
    ("", "unexpected end of input"),
])
def test_parse_errors(source, message):
    with pytest.raises(MlispParseError) as excinfo:
        read(source)
    assert excinfo.value.message == message
    assert excinfo.value.category == "parse"


def test_parse_accepts_token_lists():
    assert parse(tokenize("(x)")) == ExprList([Symbol("x")])


def test_parse_all_yields_each_top_level_expression():
    stream = TokenStream(lex("(let x 1) x (+ x 1)"))
    assert list(stream.parse_all()) == [
        ExprList([Symbol("let"), Symbol("x"), Number(1)]),
        Symbol("x"),
        ExprList([Symbol("+"), Symbol("x"), Number(1)]),
    ]


def test_parse_all_reports_unclosed_delimiter():
    stream = TokenStream(lex("(a) (b"))
    with pytest.raises(MlispParseError):
        list(stream.parse_all())


@pytest.mark.parametrize("source,expected", [
    ("(a) b", ExprList([Symbol("a")])),
    ("(a))", ExprList([Symbol("a")])),
    ("1 2 3", Number(1)),
    ("x (", Symbol("x")),
])
def test_parse_ignores_input_after_first_expression(source, expected):
    assert read(source) == expected


def test_only_ascii_whitespace_separates_tokens():
    assert tokenize("a\u00a0b") == [("literal", "a\u00a0b")]
    assert tokenize("(a\u00a0)") == [("lparen", "("), ("literal", "a\u00a0"), ("rparen", ")")]
    assert tokenize(" \t\r\n\f\va\v") == [("literal", "a")]


@pytest.mark.parametrize("source", ["\u0661\u0662", "\uff11", "1\u00a0"])
def test_non_ascii_literals_are_symbols(source):
    assert read(source) == Symbol(source)
