"""Value nodes produced by the CSS value parser, and their serializer.

A parsed value is a list of comma separated groups; each group is a list of
space separated nodes. Serialization is canonical: single spaces between
terms, no spaces around ``,`` or ``/``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Word:
    text: str


@dataclass(frozen=True)
class Number:
    text: str


@dataclass(frozen=True)
class Dimension:
    number: str
    unit: str


@dataclass(frozen=True)
class Percentage:
    number: str


@dataclass(frozen=True)
class String:
    text: str  # including the surrounding quotes


@dataclass(frozen=True)
class Operator:
    text: str


@dataclass(frozen=True)
class Slash:
    pass


@dataclass(frozen=True)
class Function:
    name: str
    args: list[list["Node"]]


@dataclass(frozen=True)
class Paren:
    args: list[list["Node"]]


Node = Union[Word, Number, Dimension, Percentage, String, Operator, Slash, Function, Paren]
Group = list[Node]
Value = list[Group]


def format_number(value: int | float) -> str:
    """Render a number the way a JavaScript host would print it.

    Floats are rounded to four decimals and integral floats lose ``.0``.
    """
    if isinstance(value, int):
        return str(value)
    value = round(value, 4)
    if value.is_integer():
        return str(int(value))
    return plain_number(value)


def plain_number(value: float) -> str:
    """Fixed-point text for *value*, never exponent notation."""
    text = repr(value)
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


_DIMENSION_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z]+)$")


def split_dimension(text: str) -> Dimension:
    match = _DIMENSION_RE.match(text)
    if match is None:
        raise ValueError(f"Not a dimension: {text!r}")
    return Dimension(number=match.group(1), unit=match.group(2))


def serialize(value: Value) -> str:
    """Render a parsed value back to canonical CSS text."""
    return ",".join(_serialize_group(group) for group in value)


def _serialize_group(group: Group) -> str:
    parts: list[str] = []
    previous: Node | None = None
    for node in group:
        if previous is not None and not isinstance(node, Slash) and not isinstance(previous, Slash):
            parts.append(" ")
        parts.append(serialize_node(node))
        previous = node
    return "".join(parts)


def serialize_node(node: Node) -> str:
    if isinstance(node, (Word, Number, String, Operator)):
        return node.text
    if isinstance(node, Dimension):
        return node.number + node.unit
    if isinstance(node, Percentage):
        return node.number + "%"
    if isinstance(node, Slash):
        return "/"
    if isinstance(node, Function):
        return f"{node.name}({serialize(node.args)})"
    if isinstance(node, Paren):
        return f"({serialize(node.args)})"
    raise TypeError(f"Unknown value node: {node!r}")
