"""Shorthand expansion.

Expanding before hashing makes ``margin: "1px 2px"`` and the equivalent
set of longhands produce the same class names.
"""

from __future__ import annotations

from typing import Any

from atomicss.parser import ValueParseError, parse_value
from atomicss.parser.nodes import Slash, Word, serialize_node

# Shorthands following the CSS top / right / bottom / left value rule.
FOUR_SIDED: dict[str, tuple[str, str, str, str]] = {
    "margin": ("marginTop", "marginInlineEnd", "marginBottom", "marginInlineStart"),
    "padding": ("paddingTop", "paddingInlineEnd", "paddingBottom", "paddingInlineStart"),
    "inset": ("top", "insetInlineEnd", "bottom", "insetInlineStart"),
    "borderWidth": (
        "borderTopWidth",
        "borderInlineEndWidth",
        "borderBottomWidth",
        "borderInlineStartWidth",
    ),
    "borderStyle": (
        "borderTopStyle",
        "borderInlineEndStyle",
        "borderBottomStyle",
        "borderInlineStartStyle",
    ),
    "borderColor": (
        "borderTopColor",
        "borderInlineEndColor",
        "borderBottomColor",
        "borderInlineStartColor",
    ),
    # top-left, top-right, bottom-right, bottom-left
    "borderRadius": (
        "borderStartStartRadius",
        "borderStartEndRadius",
        "borderEndEndRadius",
        "borderEndStartRadius",
    ),
    "scrollMargin": (
        "scrollMarginTop",
        "scrollMarginInlineEnd",
        "scrollMarginBottom",
        "scrollMarginInlineStart",
    ),
    "scrollPadding": (
        "scrollPaddingTop",
        "scrollPaddingInlineEnd",
        "scrollPaddingBottom",
        "scrollPaddingInlineStart",
    ),
}

# Shorthands taking one or two values: (first, second).
TWO_SIDED: dict[str, tuple[str, str]] = {
    "marginInline": ("marginInlineStart", "marginInlineEnd"),
    "marginBlock": ("marginTop", "marginBottom"),
    "paddingInline": ("paddingInlineStart", "paddingInlineEnd"),
    "paddingBlock": ("paddingTop", "paddingBottom"),
    "insetInline": ("insetInlineStart", "insetInlineEnd"),
    "insetBlock": ("top", "bottom"),
    "gap": ("rowGap", "columnGap"),
    "overflow": ("overflowX", "overflowY"),
}


def is_expandable(prop: str) -> bool:
    return prop in FOUR_SIDED or prop in TWO_SIDED


def _split_terms(raw: Any) -> list[Any] | None:
    """Split a shorthand value into its space separated terms.

    Returns None when the value cannot be split safely (dynamic values,
    comma lists, slashes, ``!important``, unparsable text).
    """
    if raw is None or (isinstance(raw, (int, float)) and not isinstance(raw, bool)):
        return [raw]
    if not isinstance(raw, str):
        return None
    try:
        parsed = parse_value(raw)
    except ValueParseError:
        return None
    if len(parsed) != 1:
        return None
    group = parsed[0]
    for node in group:
        if isinstance(node, Slash):
            return None
        if isinstance(node, Word) and node.text.startswith("!"):
            return None
    return [serialize_node(node) for node in group]


def _four_values(terms: list[Any]) -> tuple[Any, Any, Any, Any] | None:
    if len(terms) == 1:
        return terms[0], terms[0], terms[0], terms[0]
    if len(terms) == 2:
        return terms[0], terms[1], terms[0], terms[1]
    if len(terms) == 3:
        return terms[0], terms[1], terms[2], terms[1]
    if len(terms) == 4:
        return terms[0], terms[1], terms[2], terms[3]
    return None


def _two_values(terms: list[Any]) -> tuple[Any, Any] | None:
    if len(terms) == 1:
        return terms[0], terms[0]
    if len(terms) == 2:
        return terms[0], terms[1]
    return None


def _spread(prop: str, terms: list[Any]) -> tuple[Any, ...] | None:
    if prop in FOUR_SIDED:
        return _four_values(terms)
    return _two_values(terms)


def expand_shorthand(prop: str, raw: Any) -> tuple[list[tuple[str, Any]], bool]:
    """Expand *prop* into ``(longhand, raw_value)`` pairs.

    Returns the pairs and whether an expansion happened. Values that cannot
    be split are returned unexpanded under the shorthand name.
    """
    if not is_expandable(prop):
        return [(prop, raw)], False
    longhands = FOUR_SIDED.get(prop) or TWO_SIDED[prop]

    if isinstance(raw, (list, tuple)):
        # A fallback chain expands only when every entry is a single term;
        # each longhand then receives the whole chain.
        for item in raw:
            terms = _split_terms(item)
            if terms is None or len(terms) != 1:
                return [(prop, raw)], False
        return [(longhand, list(raw)) for longhand in longhands], True

    terms = _split_terms(raw)
    if terms is None:
        return [(prop, raw)], False
    values = _spread(prop, terms)
    if values is None:
        return [(prop, raw)], False
    return list(zip(longhands, values)), True
