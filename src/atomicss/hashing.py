"""Content-addressed identifiers.

Class names are ``prefix + base36(murmurhash2("<>" + payload, seed=1))``.
The payload for a declaration is the dashed property, the canonical value
and the sorted context tokens (``null`` for no context), so identical
declarations hash identically across builds and host plugins.
"""

from __future__ import annotations

from atomicss.model.style import ContextPath, SegmentKind, canonical_order

_M = 0x5BD1E995
_MASK = 0xFFFFFFFF
_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

KEYFRAMES_SUFFIX = "-B"


def murmurhash2(data: bytes, seed: int = 1) -> int:
    """32-bit MurmurHash2 of *data*."""
    length = len(data)
    h = (seed ^ length) & _MASK
    i = 0
    while length >= 4:
        k = data[i] | (data[i + 1] << 8) | (data[i + 2] << 16) | (data[i + 3] << 24)
        k = (k * _M) & _MASK
        k ^= k >> 24
        k = (k * _M) & _MASK
        h = (h * _M) & _MASK
        h ^= k
        i += 4
        length -= 4
    if length == 3:
        h ^= data[i + 2] << 16
    if length >= 2:
        h ^= data[i + 1] << 8
    if length >= 1:
        h ^= data[i]
        h = (h * _M) & _MASK
    h ^= h >> 13
    h = (h * _M) & _MASK
    h ^= h >> 15
    return h


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def create_hash(text: str) -> str:
    return to_base36(murmurhash2(text.encode("utf-8"), 1))


def modifier_string(context_path: ContextPath) -> str:
    """Order-insensitive serialization of a context path.

    Pseudo-classes that follow a pseudo-element are kept apart after a
    ``&`` so that ``:hover::before`` and ``::before:hover`` differ.
    """
    ordered = canonical_order(context_path)
    pseudos = [s for s in ordered if s.is_pseudo]
    split = next(
        (i + 1 for i, s in enumerate(pseudos) if s.kind is SegmentKind.PSEUDO_ELEMENT),
        len(pseudos),
    )
    text = "".join(sorted(s.token for s in pseudos[:split]))
    if pseudos[split:]:
        text += "&" + "".join(s.token for s in pseudos[split:])
    at_rules = "".join(s.token for s in ordered if s.is_at_rule)
    return text + at_rules or "null"


def custom_property_name(css_property: str, context_path: ContextPath) -> str:
    """Name of the custom property carrying a dynamic value.

    The empty context uses the bare property name. Any other context gets a
    hash suffix so each (property, context) pair owns its own variable.
    """
    name = "--" + css_property.lstrip("-")
    if not context_path:
        return name
    return f"{name}-{create_hash(modifier_string(context_path))}"


def hash_class_name(
    css_property: str, context_path: ContextPath, value: str, prefix: str = "x"
) -> str:
    return prefix + create_hash("<>" + css_property + value + modifier_string(context_path))


def hash_keyframes_name(body: str, prefix: str = "x") -> str:
    return prefix + create_hash("<>" + body) + KEYFRAMES_SUFFIX
