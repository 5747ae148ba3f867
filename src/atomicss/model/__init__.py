"""atomicss model layer -- public type re-exports."""

from atomicss.model.diagnostic import Diagnostic, Severity
from atomicss.model.style import (
    Artifact,
    CompiledRule,
    CompileResult,
    ContextPath,
    ContextSegment,
    Keyframes,
    KeyframesArtifact,
    RuleText,
    SegmentKind,
    StyleLeaf,
    canonical_order,
)

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # context
    "SegmentKind",
    "ContextSegment",
    "ContextPath",
    "canonical_order",
    "StyleLeaf",
    "Keyframes",
    # artifacts
    "RuleText",
    "CompiledRule",
    "KeyframesArtifact",
    "Artifact",
    "CompileResult",
]
