"""Lark Transformer that converts a CSS value parse tree into value nodes."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from atomicss.parser.errors import ValueParseError
from atomicss.parser.nodes import (
    Function,
    Group,
    Node,
    Number,
    Operator,
    Paren,
    Percentage,
    Slash,
    String,
    Value,
    Word,
    split_dimension,
)

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into lists of value nodes."""

    # ---- terms ----

    def word(self, items: list[Token]) -> Word:
        return Word(str(items[0]))

    def number(self, items: list[Token]) -> Number:
        return Number(str(items[0]))

    def dimension(self, items: list[Token]) -> Node:
        return split_dimension(str(items[0]))

    def percentage(self, items: list[Token]) -> Percentage:
        return Percentage(str(items[0])[:-1])

    def string(self, items: list[Token]) -> String:
        return String(str(items[0]))

    def operator(self, items: list[Token]) -> Operator:
        return Operator(str(items[0]))

    def slash(self, items: list[Token]) -> Slash:
        return Slash()

    def function(self, items: list[object]) -> Function:
        name = str(items[0])[:-1]  # drop the opening parenthesis
        args = items[1] if len(items) > 1 and items[1] is not None else []
        return Function(name=name, args=args)  # type: ignore[arg-type]

    def paren(self, items: list[object]) -> Paren:
        return Paren(args=items[0])  # type: ignore[arg-type]

    # ---- structural ----

    def group(self, items: list[Node]) -> Group:
        return list(items)

    def value_list(self, items: list[Group]) -> Value:
        return list(items)

    def start(self, items: list[object]) -> Value:
        if not items or items[0] is None:
            return []
        return items[0]  # type: ignore[return-value]


@lru_cache(maxsize=None)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_value(source: str) -> Value:
    """Parse a CSS value string into comma separated groups of value nodes."""
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ValueParseError(str(e), line=line, column=column) from e
    return ValueTransformer().transform(tree)
