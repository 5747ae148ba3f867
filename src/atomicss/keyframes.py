"""Keyframes compilation.

A keyframes map (``{"from": {...}, "to": {...}}``) compiles to a single
``@keyframes`` artifact whose name is the hash of its canonical body, so the
same animation defined twice shares one name.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from atomicss.config import CompilerOptions
from atomicss.dynamic import DynamicValue
from atomicss.errors import StyleValidationError
from atomicss.hashing import hash_keyframes_name
from atomicss.keys import KEYFRAMES_PRIORITY, is_context_key
from atomicss.model.diagnostic import Diagnostic, error
from atomicss.model.style import Keyframes, KeyframesArtifact
from atomicss.normalize import normalize
from atomicss.rules import fallback_values

logger = logging.getLogger("atomicss")


def _validate(frames: Any) -> list[Diagnostic]:
    if not isinstance(frames, Mapping):
        return [
            error(
                "invalid-keyframes",
                f"Keyframes must be a mapping of frame selectors, got {type(frames).__name__}.",
            )
        ]
    diagnostics: list[Diagnostic] = []
    if not frames:
        diagnostics.append(error("invalid-keyframes", "Keyframes must define at least one frame."))
    for label, frame in frames.items():
        if not isinstance(frame, Mapping):
            diagnostics.append(
                error("invalid-keyframes", f"Frame '{label}' must be a style mapping.", key=label)
            )
            continue
        for prop, value in frame.items():
            key = f"{label}_{prop}"
            if is_context_key(prop):
                diagnostics.append(
                    error(
                        "keyframes-context",
                        f"'{prop}' is not allowed inside keyframes.",
                        key=key,
                        fix="Move pseudo selectors and at-rules outside the keyframes.",
                    )
                )
            elif isinstance(value, (Mapping, Keyframes)):
                diagnostics.append(
                    error("keyframes-context", f"Nested values are not allowed in frame '{label}'.", key=key)
                )
            elif isinstance(value, DynamicValue):
                diagnostics.append(
                    error(
                        "invalid-value",
                        f"Dynamic value '{value.name}' cannot be used inside keyframes.",
                        key=key,
                    )
                )
    return diagnostics


def compile_keyframes(
    frames: Mapping[str, Mapping[str, Any]], options: CompilerOptions | None = None
) -> tuple[KeyframesArtifact, list[Diagnostic]]:
    """Compile a keyframes map into a named artifact.

    Frame values are normalized like regular declarations except that zero
    dimensions keep their unit. Raises :class:`StyleValidationError` for
    nested contexts, dynamic values and malformed frames.
    """
    options = options or CompilerOptions()
    diagnostics = _validate(frames)
    if diagnostics:
        raise StyleValidationError(diagnostics)

    warnings: list[Diagnostic] = []
    body_parts: list[str] = []
    for label, frame in frames.items():
        declarations: list[str] = []
        for prop, value in frame.items():
            decls, decl_warnings = normalize(
                prop, value, options, keyframe=True, key=f"{label}_{prop}"
            )
            warnings.extend(decl_warnings)
            for decl in decls:
                if decl.is_unset:
                    continue
                declarations.extend(
                    f"{decl.css_property}:{v};" for v in fallback_values(decl.values)
                )
        body_parts.append(f"{str(label).strip()}{{{''.join(declarations)}}}")

    body = "".join(body_parts)
    name = hash_keyframes_name(body, options.class_name_prefix)
    logger.debug("Compiled keyframes %s", name)
    return KeyframesArtifact(name=name, body=body, priority=KEYFRAMES_PRIORITY), warnings
