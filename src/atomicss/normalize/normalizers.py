"""Token-level value normalizers.

Each normalizer maps one value node to its canonical form. They run in
``VALUE_NORMALIZERS`` order over every node of a parsed value, children
before their enclosing function.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from atomicss.config import CompilerOptions
from atomicss.parser.nodes import (
    Dimension,
    Function,
    Node,
    Number,
    Paren,
    Percentage,
    String,
    Value,
    format_number,
    plain_number,
)

_ANGLE_UNITS = frozenset({"deg", "grad", "turn", "rad"})
_TIME_UNITS = frozenset({"ms", "s"})


@dataclass(frozen=True)
class NormalizeContext:
    property: str
    options: CompilerOptions
    in_function: bool = False
    keyframe: bool = False


NodeNormalizer = Callable[[Node, NormalizeContext], Node]


def _js_number(text: str) -> str:
    value = float(text)
    if value.is_integer():
        return str(int(value))
    return plain_number(value)


def convert_font_size_to_rem(node: Node, ctx: NormalizeContext) -> Node:
    if not ctx.options.use_rem_for_font_size or ctx.property != "fontSize":
        return node
    if isinstance(node, Dimension) and node.unit == "px":
        rem = float(node.number) / ctx.options.root_font_size
        return Dimension(number=format_number(rem), unit="rem")
    return node


def normalize_timings(node: Node, ctx: NormalizeContext) -> Node:
    """``500ms`` becomes ``0.5s``; durations under 10ms are left alone."""
    if not isinstance(node, Dimension) or node.unit != "ms":
        return node
    if float(node.number) < 10:
        return node
    seconds = int(float(node.number)) / 1000
    return Dimension(number=format_number(seconds), unit="s")


def normalize_zero_dimensions(node: Node, ctx: NormalizeContext) -> Node:
    """``0px`` becomes ``0``; angles and times keep a canonical unit."""
    if ctx.keyframe or not isinstance(node, Dimension) or float(node.number) != 0:
        return node
    if node.unit in _ANGLE_UNITS:
        return Dimension(number="0", unit="deg")
    if node.unit in _TIME_UNITS:
        return Dimension(number="0", unit="s")
    if ctx.in_function:
        return node
    return Number("0")


def normalize_leading_zero(node: Node, ctx: NormalizeContext) -> Node:
    """``0.5`` becomes ``.5`` and ``-0.5`` becomes ``-.5``."""
    if isinstance(node, (Number, Dimension, Percentage)):
        text = node.text if isinstance(node, Number) else node.number
        value = float(text)
        if value == 0 or not -1 < value < 1:
            return node
        short = _js_number(text).replace("0.", ".", 1)
        if isinstance(node, Number):
            return Number(short)
        return replace(node, number=short)
    return node


def normalize_quotes(node: Node, ctx: NormalizeContext) -> Node:
    if isinstance(node, String) and node.text.startswith("'"):
        inner = node.text[1:-1].replace("\\'", "'").replace('"', '\\"')
        return String(f'"{inner}"')
    return node


VALUE_NORMALIZERS: list[NodeNormalizer] = [
    convert_font_size_to_rem,
    normalize_timings,
    normalize_zero_dimensions,
    normalize_leading_zero,
    normalize_quotes,
]


def _apply(node: Node, ctx: NormalizeContext, normalizers: list[NodeNormalizer]) -> Node:
    if isinstance(node, (Function, Paren)):
        inner = replace(ctx, in_function=True)
        node = replace(
            node, args=[[_apply(child, inner, normalizers) for child in group] for group in node.args]
        )
    for normalizer in normalizers:
        node = normalizer(node, ctx)
    return node


def normalize_nodes(
    value: Value, ctx: NormalizeContext, normalizers: list[NodeNormalizer] | None = None
) -> Value:
    """Run the normalizer chain over every node of a parsed value."""
    chain = normalizers if normalizers is not None else VALUE_NORMALIZERS
    return [[_apply(node, ctx, chain) for node in group] for group in value]
