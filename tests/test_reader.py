import pytest
from hypothesis import given, strategies as st

from byol.errors import ByolSyntaxError
from byol.reader.parser import ParseNode, parse
from byol.reader.translator import is_valid_expr, read, read_number, translate
from byol.types.value import Value, ValueType


def test_parse_tree_shape():
    tree = parse("(+ 1 {a})")
    assert tree.tag == ">"
    first, sexpr, last = tree.children
    assert first.tag == last.tag == "regex"
    assert sexpr.tag == "sexpr"
    assert [c.tag for c in sexpr.children] == ["char", "symbol", "number", "qexpr", "char"]
    assert [c.contents for c in sexpr.children[:3]] == ["(", "+", "1"]
    qexpr = sexpr.children[3]
    assert [(c.tag, c.contents) for c in qexpr.children] == [("char", "{"), ("symbol", "a"), ("char", "}")]


def test_empty_program():
    tree = parse("")
    assert [c.tag for c in tree.children] == ["regex", "regex"]
    assert read("") == Value.sexpr()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", Value.sexpr([Value.number(5)])),
        ("-5", Value.sexpr([Value.number(-5)])),
        ("-", Value.sexpr([Value.symbol("-")])),
        ("+ 1 2", Value.sexpr([Value.symbol("+"), Value.number(1), Value.number(2)])),
        ("{}", Value.sexpr([Value.qexpr()])),
        ("()", Value.sexpr([Value.sexpr()])),
        ("{a (b)}", Value.sexpr([Value.qexpr([Value.symbol("a"), Value.sexpr([Value.symbol("b")])])])),
        ("min max", Value.sexpr([Value.symbol("min"), Value.symbol("max")])),
        ("x1 1x", Value.sexpr([Value.symbol("x1"), Value.symbol("1x")])),
        ("1 ; trailing comment", Value.sexpr([Value.number(1)])),
        ("  \t 7  ", Value.sexpr([Value.number(7)])),
    ]
)
def test_read(source, expected):
    assert read(source) == expected


@pytest.mark.parametrize("source", ["(+ 1", "{1 2", ")", "}", "(]", "#"])
def test_syntax_errors(source):
    with pytest.raises(ByolSyntaxError):
        parse(source)


def test_syntax_error_has_position():
    with pytest.raises(ByolSyntaxError) as info:
        parse("(+ 1 2")
    assert info.value.line == 1
    assert info.value.column > 0


@pytest.mark.parametrize(
    "text,expected",
    [
        ("9223372036854775807", Value.number(2 ** 63 - 1)),
        ("-9223372036854775808", Value.number(-(2 ** 63))),
        ("9223372036854775808", Value.error("Invalid Number")),
        ("-9223372036854775809", Value.error("Invalid Number")),
        ("12ab", Value.error("Invalid Number")),
    ]
)
def test_read_number(text, expected):
    assert read_number(text) == expected


def test_oversized_literal_becomes_error_value():
    val = read("+ 1 99999999999999999999")
    assert val.cells[2].type is ValueType.ERR


def test_delimiters_and_anchors_are_skipped():
    assert not is_valid_expr(ParseNode("char", "("))
    assert not is_valid_expr(ParseNode("char", "}"))
    assert not is_valid_expr(ParseNode("regex"))
    assert is_valid_expr(ParseNode("symbol", "x"))


def test_translate_hand_built_tree():
    tree = ParseNode(">", "", [
        ParseNode("regex"),
        ParseNode("expr|qexpr", "", [
            ParseNode("char", "{"),
            ParseNode("expr|number|regex", "3"),
            ParseNode("expr|symbol|string", "head"),
            ParseNode("char", "}"),
        ]),
        ParseNode("regex"),
    ])
    assert translate(tree) == Value.sexpr([Value.qexpr([Value.number(3), Value.symbol("head")])])


@given(st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1))
def test_int64_literals_read_as_numbers(n):
    assert read(str(n)) == Value.sexpr([Value.number(n)])


def test_deep_nesting_is_a_syntax_error():
    source = "(" * 5000 + "1" + ")" * 5000
    with pytest.raises(ByolSyntaxError, match="nested too deeply"):
        parse(source)
