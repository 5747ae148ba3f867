"""Style model: context segments, leaves, and compiled artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from atomicss.model.diagnostic import Diagnostic


class SegmentKind(Enum):
    """What a context segment wraps the declaration in."""

    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    AT_RULE = "at-rule"


@dataclass(frozen=True)
class ContextSegment:
    """One step of a context path: ``:hover``, ``::before`` or ``@media (...)``."""

    token: str
    kind: SegmentKind

    @property
    def is_pseudo(self) -> bool:
        return self.kind is not SegmentKind.AT_RULE

    @property
    def is_at_rule(self) -> bool:
        return self.kind is SegmentKind.AT_RULE

    def __str__(self) -> str:
        return self.token


ContextPath = tuple[ContextSegment, ...]


def _token(segment: ContextSegment) -> str:
    return segment.token


def canonical_order(context_path: ContextPath) -> ContextPath:
    """Reorder a context path so equivalent nestings compare equal.

    At-rules come first, sorted. Pseudo-classes are sorted within the run
    before the pseudo-element and within the run after it, and the
    pseudo-element stays between the two runs.
    """
    at_rules = sorted((s for s in context_path if s.is_at_rule), key=_token)
    before: list[ContextSegment] = []
    elements: list[ContextSegment] = []
    after: list[ContextSegment] = []
    for segment in context_path:
        if segment.is_at_rule:
            continue
        if segment.kind is SegmentKind.PSEUDO_ELEMENT:
            elements.append(segment)
        elif elements:
            after.append(segment)
        else:
            before.append(segment)
    return tuple(
        at_rules + sorted(before, key=_token) + elements + sorted(after, key=_token)
    )


@dataclass(frozen=True)
class Keyframes:
    """A keyframes block used as a value, e.g. ``{"animationName": Keyframes({...})}``.

    The compiler compiles the block first and substitutes the generated name.
    """

    frames: Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class StyleLeaf:
    """A single (property, context, value) triple before normalization.

    ``key`` is the compiled-style key the leaf contributes its class name to.
    """

    key: str
    property: str
    context_path: ContextPath
    raw_value: Any


@dataclass(frozen=True)
class RuleText:
    """CSS text for a rule in the base direction and, if needed, mirrored."""

    ltr: str
    rtl: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"ltr": self.ltr, "rtl": self.rtl}


@dataclass(frozen=True)
class CompiledRule:
    """An atomic rule: one class name, one declaration set, one priority."""

    class_name: str
    css: RuleText
    priority: int

    @property
    def identifier(self) -> str:
        return self.class_name

    def to_metadata(self) -> list[Any]:
        return [self.class_name, self.css.to_dict(), self.priority]


@dataclass(frozen=True)
class KeyframesArtifact:
    """A named ``@keyframes`` block."""

    name: str
    body: str
    priority: int = 1

    @property
    def identifier(self) -> str:
        return self.name

    @property
    def css(self) -> RuleText:
        return RuleText(ltr=f"@keyframes {self.name}{{{self.body}}}", rtl=None)

    def to_metadata(self) -> list[Any]:
        return [self.name, self.css.to_dict(), self.priority]


Artifact = Union[CompiledRule, KeyframesArtifact]


@dataclass
class CompileResult:
    """Output of compiling one style definition.

    Attributes:
        styles: Style key to class name(s), ``None`` for unset keys, or a
            dynamic binding.
        rules: Artifacts in insertion order of first occurrence.
        warnings: Non-fatal diagnostics collected during normalization.
        dynamic: The resolvable compiled form when the input was dynamic.
    """

    styles: dict[str, Any] = field(default_factory=dict)
    rules: list[Artifact] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    dynamic: Any = None

    def to_metadata(self) -> list[list[Any]]:
        return [artifact.to_metadata() for artifact in self.rules]
