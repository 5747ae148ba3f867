"""Value normalization: turn an author (property, value) pair into declarations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from atomicss.config import CompilerOptions
from atomicss.dynamic import DynamicTransform, DynamicValue
from atomicss.errors import StyleValidationError
from atomicss.hashing import custom_property_name
from atomicss.model.diagnostic import Diagnostic, error, warning
from atomicss.model.style import ContextPath
from atomicss.normalize.normalizers import NormalizeContext, normalize_nodes
from atomicss.normalize.properties import (
    dashify,
    is_direction_sensitive,
    is_known_property,
    number_suffix,
    resolve_alias,
)
from atomicss.normalize.shorthands import expand_shorthand
from atomicss.parser import ValueParseError, parse_value, serialize
from atomicss.parser.nodes import format_number

_QUOTED_PROPERTIES = frozenset({"content", "hyphenateCharacter"})
_CONTENT_KEYWORDS = frozenset({
    "normal",
    "none",
    "open-quote",
    "close-quote",
    "no-open-quote",
    "no-close-quote",
    "inherit",
    "initial",
    "unset",
    "revert",
    "revert-layer",
})
_FUNCTION_CALL_RE = re.compile(r"[a-zA-Z-]+\(")


@dataclass(frozen=True)
class Declaration:
    """A normalized longhand declaration.

    Attributes:
        property: camelCase longhand after alias resolution and expansion.
        css_property: Dashed CSS property name.
        values: Canonical CSS values; more than one is a fallback chain.
            ``None`` means the key is explicitly unset.
        direction_sensitive: Whether a mirrored rule is needed.
        param: Runtime parameter name for dynamic values.
        variable: Custom property the rule reads for dynamic values.
        transform: Runtime rendering rule for dynamic values.
    """

    property: str
    css_property: str
    values: tuple[str, ...] | None
    direction_sensitive: bool = False
    param: str | None = None
    variable: str | None = None
    transform: DynamicTransform | None = None

    @property
    def is_unset(self) -> bool:
        return self.values is None

    @property
    def is_dynamic(self) -> bool:
        return self.param is not None

    @property
    def hash_value(self) -> str:
        return ", ".join(self.values or ())


def _quote_content(text: str) -> str:
    stripped = text.strip()
    if (
        stripped[:1] in ("'", '"')
        or stripped in _CONTENT_KEYWORDS
        or _FUNCTION_CALL_RE.search(stripped)
    ):
        return text
    return '"' + stripped.replace('"', '\\"') + '"'


def normalize_value_text(
    prop: str,
    text: str,
    options: CompilerOptions,
    warnings: list[Diagnostic],
    *,
    keyframe: bool = False,
    key: str | None = None,
) -> str:
    """Canonicalize one CSS value string for *prop* (camelCase)."""
    stripped = text.strip()
    if not stripped:
        warnings.append(
            warning("empty-value", f"Empty value for '{dashify(prop)}'.", key=key)
        )
        return stripped
    try:
        parsed = parse_value(stripped)
    except ValueParseError as exc:
        warnings.append(
            warning(
                "unparsable-value",
                f"Could not parse value {stripped!r} for '{dashify(prop)}' "
                f"(column {exc.column}); emitting it unchanged.",
                key=key,
            )
        )
        return stripped
    ctx = NormalizeContext(property=prop, options=options, keyframe=keyframe)
    return serialize(normalize_nodes(parsed, ctx))


def _invalid(message: str, key: str | None) -> StyleValidationError:
    return StyleValidationError([error("invalid-value", message, key=key)])


def _normalize_item(
    prop: str,
    item: Any,
    options: CompilerOptions,
    warnings: list[Diagnostic],
    keyframe: bool,
    key: str | None,
) -> str:
    if isinstance(item, bool):
        raise _invalid(f"Boolean {item!r} is not a valid value for '{prop}'.", key)
    if isinstance(item, (int, float)):
        text = format_number(item) + number_suffix(prop)
    elif isinstance(item, str):
        text = _quote_content(item) if prop in _QUOTED_PROPERTIES else item
    elif isinstance(item, DynamicValue):
        raise _invalid(
            f"Dynamic value '{item.name}' cannot appear inside a fallback list for '{prop}'.",
            key,
        )
    elif isinstance(item, (list, tuple)):
        raise _invalid(f"Nested fallback lists are not supported for '{prop}'.", key)
    else:
        raise _invalid(
            f"Unsupported value of type {type(item).__name__} for '{prop}'.", key
        )
    return normalize_value_text(prop, text, options, warnings, keyframe=keyframe, key=key)


def _normalize_longhand(
    prop: str,
    raw: Any,
    options: CompilerOptions,
    warnings: list[Diagnostic],
    keyframe: bool,
    key: str | None,
    context_path: ContextPath = (),
) -> Declaration:
    css_property = dashify(prop)
    if not is_known_property(css_property):
        warnings.append(
            warning(
                "unknown-property",
                f"Unknown CSS property '{css_property}'; emitting it unchanged.",
                key=key,
            )
        )

    if raw is None:
        return Declaration(property=prop, css_property=css_property, values=None)

    if isinstance(raw, DynamicValue):
        variable = custom_property_name(css_property, context_path)
        fallback = raw.default if raw.default is not None else "initial"
        return Declaration(
            property=prop,
            css_property=css_property,
            values=(f"var({variable},revert)",),
            direction_sensitive=is_direction_sensitive(css_property),
            param=raw.name,
            variable=variable,
            transform=DynamicTransform(unit=number_suffix(prop), fallback=fallback),
        )

    items = list(raw) if isinstance(raw, (list, tuple)) else [raw]
    if not items:
        raise _invalid(f"Empty fallback list for '{prop}'.", key)
    values = tuple(
        _normalize_item(prop, item, options, warnings, keyframe, key) for item in items
    )
    return Declaration(
        property=prop,
        css_property=css_property,
        values=values,
        direction_sensitive=is_direction_sensitive(css_property, values),
    )


def normalize(
    prop: str,
    raw: Any,
    options: CompilerOptions | None = None,
    *,
    keyframe: bool = False,
    key: str | None = None,
    context_path: ContextPath = (),
) -> tuple[list[Declaration], list[Diagnostic]]:
    """Normalize an author property/value pair.

    Resolves physical and legacy aliases to logical longhands, expands
    shorthands, inserts units and canonicalizes value text. Returns the
    declarations (one per longhand) and any warnings. Invalid value types
    raise :class:`StyleValidationError`. ``context_path`` names the custom
    property of a dynamic value.
    """
    options = options or CompilerOptions()
    warnings: list[Diagnostic] = []
    logical, _ = resolve_alias(prop)
    expanded, _ = expand_shorthand(logical, raw)
    declarations = [
        _normalize_longhand(
            resolve_alias(longhand)[0], value, options, warnings, keyframe, key, context_path
        )
        for longhand, value in expanded
    ]
    return declarations, warnings
