"""Exception hierarchy for the style compiler."""

from __future__ import annotations

from atomicss.model.diagnostic import Diagnostic


class AtomicCSSError(Exception):
    """Base class for every error raised by atomicss."""


class StyleValidationError(AtomicCSSError):
    """Raised when a style definition is rejected.

    The compile call that raised it leaves the shared registry untouched.
    """

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Style validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


class ClassNameCollisionError(AtomicCSSError):
    """Two distinct rules produced the same identifier.

    This is an internal invariant violation, not a user input error.
    """

    def __init__(self, identifier: str, existing: str, incoming: str) -> None:
        self.identifier = identifier
        self.existing = existing
        self.incoming = incoming
        super().__init__(
            f"Identifier {identifier!r} already maps to {existing!r}; "
            f"refusing to overwrite it with {incoming!r}"
        )
