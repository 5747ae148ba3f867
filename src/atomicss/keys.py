"""Key classification and priority assignment.

A style key is either a property name, a pseudo selector (``:hover``,
``::before``) or an at-rule condition (``@media (...)``). Priorities are
table driven and additive:

    property tier (1000 / 2000 / 3000 / 4000)
    + rank of every pseudo-class in the context
    + 5000 per pseudo-element
    + 200 per at-rule

Sorting rules by priority therefore places more specific contexts later in
the stylesheet, so plain source order resolves conflicts.
"""

from __future__ import annotations

from atomicss.model.diagnostic import Diagnostic, error
from atomicss.model.style import ContextPath, ContextSegment, SegmentKind
from atomicss.normalize.properties import property_priority

KEYFRAMES_PRIORITY = 1
AT_RULE_PRIORITY = 200
PSEUDO_ELEMENT_PRIORITY = 5000
DEFAULT_PSEUDO_CLASS_PRIORITY = 40

PSEUDO_CLASS_PRIORITIES: dict[str, int] = {
    ":is": 40,
    ":where": 40,
    ":not": 40,
    ":has": 45,
    ":dir": 50,
    ":lang": 51,
    ":first-child": 52,
    ":first-of-type": 53,
    ":last-child": 54,
    ":last-of-type": 55,
    ":only-child": 56,
    ":only-of-type": 57,
    ":nth-child": 60,
    ":nth-last-child": 61,
    ":nth-of-type": 62,
    ":nth-last-of-type": 63,
    ":empty": 70,
    ":link": 80,
    ":any-link": 81,
    ":local-link": 82,
    ":target-within": 83,
    ":target": 84,
    ":visited": 85,
    ":enabled": 91,
    ":disabled": 92,
    ":required": 93,
    ":optional": 94,
    ":read-only": 95,
    ":read-write": 96,
    ":placeholder-shown": 97,
    ":in-range": 98,
    ":out-of-range": 99,
    ":default": 100,
    ":checked": 101,
    ":indeterminate": 101,
    ":blank": 102,
    ":valid": 103,
    ":invalid": 104,
    ":user-invalid": 105,
    ":autofill": 110,
    ":picture-in-picture": 120,
    ":modal": 121,
    ":fullscreen": 122,
    ":paused": 123,
    ":playing": 124,
    ":current": 125,
    ":past": 126,
    ":future": 127,
    ":hover": 130,
    ":focus-within": 140,
    ":focus": 150,
    ":focus-visible": 160,
    ":active": 170,
}

SUPPORTED_AT_RULES = ("@media", "@supports", "@container")

# Key used by the value-conditional form for the unconditioned value.
DEFAULT_CONDITION = "default"


def is_pseudo_key(key: str) -> bool:
    return key.startswith(":")


def is_at_rule_key(key: str) -> bool:
    return key.startswith("@")


def is_context_key(key: str) -> bool:
    return is_pseudo_key(key) or is_at_rule_key(key)


def classify(key: str) -> ContextSegment | None:
    """Classify a style key.

    Returns a :class:`ContextSegment` for pseudo and at-rule keys, or None
    when the key names a property.
    """
    if key.startswith("::"):
        return ContextSegment(token=key, kind=SegmentKind.PSEUDO_ELEMENT)
    if is_pseudo_key(key):
        return ContextSegment(token=key, kind=SegmentKind.PSEUDO_CLASS)
    if is_at_rule_key(key):
        return ContextSegment(token=key, kind=SegmentKind.AT_RULE)
    return None


def _pseudo_class_name(token: str) -> str:
    """``:nth-child(2n)`` -> ``:nth-child``."""
    paren = token.find("(")
    return token if paren == -1 else token[:paren]


def at_rule_name(token: str) -> str:
    end = len(token)
    for i, ch in enumerate(token):
        if i and (ch.isspace() or ch == "("):
            end = i
            break
    return token[:end]


def segment_priority(segment: ContextSegment) -> int:
    if segment.kind is SegmentKind.PSEUDO_ELEMENT:
        return PSEUDO_ELEMENT_PRIORITY
    if segment.kind is SegmentKind.AT_RULE:
        return AT_RULE_PRIORITY
    return PSEUDO_CLASS_PRIORITIES.get(
        _pseudo_class_name(segment.token), DEFAULT_PSEUDO_CLASS_PRIORITY
    )


def priority(css_property: str, context_path: ContextPath) -> int:
    """Injection priority for a dashed property in a context."""
    return property_priority(css_property) + sum(
        segment_priority(segment) for segment in context_path
    )


def check_nesting(
    context_path: ContextPath, segment: ContextSegment, key: str | None = None
) -> list[Diagnostic]:
    """Validate appending *segment* to *context_path*.

    Rules:
        - Only ``@media``, ``@supports`` and ``@container`` may wrap styles.
        - Nothing but a pseudo-class may follow a pseudo-element.
    """
    diagnostics: list[Diagnostic] = []
    if segment.is_at_rule and at_rule_name(segment.token) not in SUPPORTED_AT_RULES:
        diagnostics.append(
            error(
                "unsupported-at-rule",
                f"At-rule '{segment.token}' cannot wrap style declarations.",
                key=key,
                fix="Use @media, @supports or @container.",
            )
        )
    if any(s.kind is SegmentKind.PSEUDO_ELEMENT for s in context_path):
        if segment.kind is not SegmentKind.PSEUDO_CLASS:
            diagnostics.append(
                error(
                    "invalid-nesting",
                    f"'{segment.token}' cannot be nested inside a pseudo-element.",
                    key=key,
                )
            )
    return diagnostics
