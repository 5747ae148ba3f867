"""atomicss: compile style definitions into atomic CSS rules."""

from atomicss.compiler import CreateResult, StyleCompiler, first_that_works
from atomicss.config import CompilerOptions
from atomicss.dynamic import (
    CompiledDynamicStyle,
    DynamicBinding,
    DynamicStyle,
    DynamicTransform,
    DynamicValue,
)
from atomicss.errors import AtomicCSSError, ClassNameCollisionError, StyleValidationError
from atomicss.keyframes import compile_keyframes
from atomicss.model import (
    CompiledRule,
    CompileResult,
    Diagnostic,
    Keyframes,
    KeyframesArtifact,
    RuleText,
    Severity,
)
from atomicss.registry import StyleRegistry
from atomicss.stylesheet import process_stylesheet

__version__ = "0.1.0"

__all__ = [
    # compiler
    "StyleCompiler",
    "CompilerOptions",
    "CreateResult",
    "CompileResult",
    "first_that_works",
    "compile_keyframes",
    # values
    "DynamicValue",
    "DynamicStyle",
    "DynamicTransform",
    "DynamicBinding",
    "CompiledDynamicStyle",
    "Keyframes",
    # artifacts
    "CompiledRule",
    "KeyframesArtifact",
    "RuleText",
    "StyleRegistry",
    "process_stylesheet",
    # errors
    "AtomicCSSError",
    "StyleValidationError",
    "ClassNameCollisionError",
    "Diagnostic",
    "Severity",
]
