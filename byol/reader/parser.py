"""
  byol reader: grammar and generic parse tree

The grammar is built from pyparsing combinators:

    number  : /-?[0-9]+/ ;
    symbol  : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&%^]+/ ;
    sexpr   : '(' <expr>* ')' ;
    qexpr   : '{' <expr>* '}' ;
    expr    : <number> | <symbol> | <sexpr> | <qexpr> ;
    program : /^/ <expr>* /$/ ;

Parsing yields a tree of ParseNode objects, each carrying a tag, its literal
text and its children. Delimiters are kept as `char` nodes and the program
anchors as `regex` nodes, so the tree mirrors the grammar exactly; the
translator decides what is meaningful.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pyparsing import (
    Forward,
    Literal,
    ParseException,
    ParserElement,
    Regex,
    ZeroOrMore,
)

from byol.errors import ByolSyntaxError


@dataclass
class ParseNode:
    """Generic parse tree node."""
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)

    def __str__(self) -> str:
        if self.children:
            return f"{self.tag}[{', '.join(str(c) for c in self.children)}]"
        return f"{self.tag}({self.contents!r})"


SYMBOL_CHARS = r"a-zA-Z0-9_+\-*/\\=<>!&%^"


def _leaf(tag: str):
    def action(toks):
        return ParseNode(tag, toks[0])
    return action


def _branch(tag: str):
    def action(toks):
        return ParseNode(tag, "", list(toks))
    return action


def _build_grammar() -> ParserElement:
    number = Regex(rf"-?[0-9]+(?![{SYMBOL_CHARS}])").set_name("number")
    number.set_parse_action(_leaf("number"))
    symbol = Regex(rf"[{SYMBOL_CHARS}]+").set_name("symbol")
    symbol.set_parse_action(_leaf("symbol"))

    def delim(ch: str) -> ParserElement:
        return Literal(ch).set_parse_action(_leaf("char"))

    expr = Forward().set_name("expr")
    sexpr = (delim("(") + ZeroOrMore(expr) + delim(")")).set_name("sexpr")
    sexpr.set_parse_action(_branch("sexpr"))
    qexpr = (delim("{") + ZeroOrMore(expr) + delim("}")).set_name("qexpr")
    qexpr.set_parse_action(_branch("qexpr"))
    expr <<= number | symbol | sexpr | qexpr

    def program_action(toks):
        return ParseNode(">", "", [ParseNode("regex"), *toks, ParseNode("regex")])

    program = ZeroOrMore(expr).set_name("program")
    program.set_parse_action(program_action)
    program.ignore(Regex(r";[^\n]*"))
    return program


_PROGRAM = _build_grammar()


def parse(source: str) -> ParseNode:
    """Parse `source` into a root ParseNode; raises ByolSyntaxError on bad input."""
    try:
        result = _PROGRAM.parse_string(source, parse_all=True)
    except ParseException as exc:
        raise ByolSyntaxError(f"<stdin>:{exc.lineno}:{exc.col}: {exc.msg}", exc.lineno, exc.col) from exc
    except RecursionError as exc:
        raise ByolSyntaxError("<stdin>: expression nested too deeply") from exc
    return result[0]
