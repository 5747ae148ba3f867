"""Style compiler: turn style definitions into atomic rules and class names.

The compiler walks a definition depth-first, normalizes every leaf, hashes
and generates a rule per declaration, and merges the result into a shared
:class:`StyleRegistry` only once the whole definition compiled cleanly.

Two nesting forms are accepted and may be mixed::

    {":hover": {"color": "blue"}}                       # key ":hover_color"
    {"color": {"default": "red", ":hover": "blue"}}      # key "color"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from atomicss.config import CompilerOptions
from atomicss.dynamic import CompiledDynamicStyle, DynamicBinding, DynamicStyle, DynamicValue
from atomicss.errors import ClassNameCollisionError, StyleValidationError
from atomicss.hashing import hash_class_name
from atomicss.keyframes import compile_keyframes
from atomicss.keys import DEFAULT_CONDITION, check_nesting, classify, priority
from atomicss.model.diagnostic import Diagnostic, error
from atomicss.model.style import (
    Artifact,
    CompiledRule,
    CompileResult,
    ContextPath,
    Keyframes,
    KeyframesArtifact,
    StyleLeaf,
)
from atomicss.normalize import normalize
from atomicss.registry import StyleRegistry
from atomicss.rules import generate_rule

logger = logging.getLogger("atomicss")

StyleDefinition = Union[Mapping[str, Any], DynamicStyle]


def first_that_works(*values: Any) -> list[Any]:
    """Build a fallback chain from values in order of preference.

    ``first_that_works("sticky", "fixed")`` declares ``fixed`` first and
    ``sticky`` last, so browsers that understand ``sticky`` use it.
    """
    return list(reversed(values))


@dataclass
class CreateResult:
    """Output of compiling a set of named style definitions together.

    Attributes:
        namespaces: Namespace to compiled styles; dynamic namespaces map to
            a :class:`CompiledDynamicStyle`.
        rules: Artifacts in insertion order of first occurrence.
        warnings: Non-fatal diagnostics from every namespace.
    """

    namespaces: dict[str, Any] = field(default_factory=dict)
    rules: list[Artifact] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)

    def to_metadata(self) -> list[list[Any]]:
        return [artifact.to_metadata() for artifact in self.rules]


# A pending walk step: (context path, property or None, mapping, key label).
_Frame = tuple[ContextPath, Union[str, None], Mapping[str, Any], str]


class _Unit:
    """Artifacts and diagnostics of one compile call, before merging."""

    def __init__(self, options: CompilerOptions) -> None:
        self.options = options
        self.warnings: list[Diagnostic] = []
        self._artifacts: dict[str, Artifact] = {}

    @property
    def artifacts(self) -> list[Artifact]:
        return list(self._artifacts.values())

    def add(self, artifact: Artifact) -> None:
        existing = self._artifacts.get(artifact.identifier)
        if existing is None:
            self._artifacts[artifact.identifier] = artifact
        elif existing != artifact:
            raise ClassNameCollisionError(
                artifact.identifier, existing.css.ltr, artifact.css.ltr
            )

    # --- walking --------------------------------------------------------------

    def flatten(self, style: Mapping[str, Any]) -> list[StyleLeaf]:
        """Split a definition into leaves, depth-first in source order."""
        errors: list[Diagnostic] = []
        leaves: list[StyleLeaf] = []
        stack: list[Union[_Frame, StyleLeaf]] = [((), None, style, "")]
        while stack:
            item = stack.pop()
            if isinstance(item, StyleLeaf):
                leaves.append(item)
                continue
            children = self._expand(item, errors)
            stack.extend(reversed(children))
        if errors:
            raise StyleValidationError(errors)
        return leaves

    def _expand(
        self, frame: _Frame, errors: list[Diagnostic]
    ) -> list[Union[_Frame, StyleLeaf]]:
        context, prop, mapping, label = frame
        children: list[Union[_Frame, StyleLeaf]] = []
        for key, value in mapping.items():
            if not isinstance(key, str):
                errors.append(error("invalid-key", f"Style keys must be strings, got {key!r}."))
                continue
            segment = classify(key)
            if prop is None:
                path_key = "_".join([s.token for s in context] + [key])
                if segment is None:
                    if isinstance(value, Mapping):
                        children.append((context, key, value, path_key))
                    else:
                        children.append(StyleLeaf(path_key, key, context, value))
                    continue
                problems = check_nesting(context, segment, path_key)
                if not isinstance(value, Mapping):
                    problems.append(
                        error(
                            "invalid-nesting",
                            f"'{key}' must map to a style object.",
                            key=path_key,
                        )
                    )
                if problems:
                    errors.extend(problems)
                    continue
                children.append((context + (segment,), None, value, ""))
                continue

            if key == DEFAULT_CONDITION:
                child_context = context
            elif segment is None:
                errors.append(
                    error(
                        "invalid-condition",
                        f"'{key}' is not a valid condition for '{prop}'.",
                        key=label,
                        fix="Use 'default', a pseudo selector or an at-rule.",
                    )
                )
                continue
            else:
                problems = check_nesting(context, segment, label)
                if problems:
                    errors.extend(problems)
                    continue
                child_context = context + (segment,)
            if isinstance(value, Mapping):
                children.append((child_context, prop, value, label))
            else:
                children.append(StyleLeaf(label, prop, child_context, value))
        return children

    # --- compiling ------------------------------------------------------------

    def compile_style(
        self, style: Any, namespace: str | None = None, params: tuple[str, ...] | None = None
    ) -> tuple[dict[str, Any], list[DynamicBinding]]:
        if not isinstance(style, Mapping):
            raise StyleValidationError(
                [
                    error(
                        "invalid-namespace",
                        f"Style definition must be a mapping, got {type(style).__name__}.",
                        key=namespace,
                    )
                ]
            )
        leaves = self.flatten(style)
        self._check_dynamic(leaves, params)

        class_names: dict[str, list[str]] = {}
        key_bindings: dict[str, list[DynamicBinding]] = {}
        for leaf in leaves:
            names = class_names.setdefault(leaf.key, [])
            for name, binding in self._compile_leaf(leaf):
                if name not in names:
                    names.append(name)
                if binding is not None:
                    key_bindings.setdefault(leaf.key, []).append(binding)

        styles: dict[str, Any] = {}
        if self.options.dev and namespace and self.options.filename:
            dev_name = f"{Path(self.options.filename).stem}__{namespace}"
            styles[dev_name] = dev_name
        for key, names in class_names.items():
            bound = key_bindings.get(key, [])
            if len(names) == 1 and len(bound) == 1:
                styles[key] = bound[0]
            else:
                styles[key] = " ".join(names) or None
        bindings = [b for bound in key_bindings.values() for b in bound]
        return styles, bindings

    def _check_dynamic(self, leaves: list[StyleLeaf], params: tuple[str, ...] | None) -> None:
        declared = set(params or ())
        problems = [
            error(
                "unknown-dynamic-reference",
                f"Dynamic value '{leaf.raw_value.name}' is not a declared parameter.",
                key=leaf.key,
            )
            for leaf in leaves
            if isinstance(leaf.raw_value, DynamicValue) and leaf.raw_value.name not in declared
        ]
        if problems:
            raise StyleValidationError(problems)

    def _compile_leaf(self, leaf: StyleLeaf) -> list[tuple[str, DynamicBinding | None]]:
        value = leaf.raw_value
        if isinstance(value, Keyframes):
            value = self.compile_keyframes(value.frames).name

        declarations, warnings = normalize(
            leaf.property, value, self.options, key=leaf.key, context_path=leaf.context_path
        )
        self.warnings.extend(warnings)

        compiled: list[tuple[str, DynamicBinding | None]] = []
        for decl in declarations:
            if decl.is_unset:
                continue
            class_name = hash_class_name(
                decl.css_property,
                leaf.context_path,
                decl.hash_value,
                self.options.class_name_prefix,
            )
            css = generate_rule(
                class_name,
                decl.css_property,
                leaf.context_path,
                decl.values,
                decl.direction_sensitive and self.options.mirror_logical_properties,
            )
            self.add(CompiledRule(class_name, css, priority(decl.css_property, leaf.context_path)))
            binding = None
            if decl.is_dynamic:
                binding = DynamicBinding(class_name, decl.variable, decl.param, decl.transform)
            compiled.append((class_name, binding))
        return compiled

    def compile_keyframes(self, frames: Mapping[str, Any]) -> KeyframesArtifact:
        artifact, warnings = compile_keyframes(frames, self.options)
        self.warnings.extend(warnings)
        self.add(artifact)
        return artifact


class StyleCompiler:
    """Compiles style definitions into a shared registry.

    Usage::

        compiler = StyleCompiler()
        result = compiler.compile({"color": "red", ":hover": {"color": "blue"}})
        result.styles   # {"color": "x1e2nbdu", ":hover_color": "..."}
        css = process_stylesheet(compiler.registry.artifacts())
    """

    def __init__(
        self, registry: StyleRegistry | None = None, options: CompilerOptions | None = None
    ) -> None:
        self.registry = registry if registry is not None else StyleRegistry()
        self.options = options or CompilerOptions()

    def compile(self, style: StyleDefinition, namespace: str | None = None) -> CompileResult:
        """Compile one style definition.

        For a :class:`DynamicStyle`, ``styles`` holds the bindings and the
        result's ``dynamic`` attribute the resolvable compiled form.
        """
        unit = _Unit(self.options)
        styles, dynamic = self._compile_into(unit, style, namespace)
        self._commit(unit)
        return CompileResult(
            styles=styles, rules=unit.artifacts, warnings=unit.warnings, dynamic=dynamic
        )

    def create(self, namespaces: Mapping[str, StyleDefinition]) -> CreateResult:
        """Compile several named definitions as one all-or-nothing unit."""
        if not isinstance(namespaces, Mapping):
            raise StyleValidationError(
                [
                    error(
                        "invalid-namespace",
                        f"Expected a mapping of namespaces, got {type(namespaces).__name__}.",
                    )
                ]
            )
        unit = _Unit(self.options)
        compiled: dict[str, Any] = {}
        for name, style in namespaces.items():
            styles, dynamic = self._compile_into(unit, style, name)
            compiled[name] = dynamic if dynamic is not None else styles
        self._commit(unit)
        return CreateResult(namespaces=compiled, rules=unit.artifacts, warnings=unit.warnings)

    def keyframes(self, frames: Mapping[str, Any]) -> tuple[KeyframesArtifact, list[Diagnostic]]:
        """Compile a keyframes map; returns the artifact and any warnings."""
        unit = _Unit(self.options)
        artifact = unit.compile_keyframes(frames)
        self._commit(unit)
        return artifact, unit.warnings

    # --- internal helpers -----------------------------------------------------

    @staticmethod
    def _compile_into(
        unit: _Unit, style: StyleDefinition, namespace: str | None
    ) -> tuple[dict[str, Any], CompiledDynamicStyle | None]:
        if isinstance(style, DynamicStyle):
            styles, bindings = unit.compile_style(style.body, namespace, style.params)
            return styles, CompiledDynamicStyle(style.params, styles, bindings)
        styles, _ = unit.compile_style(style, namespace)
        return styles, None

    def _commit(self, unit: _Unit) -> None:
        for diagnostic in unit.warnings:
            logger.warning("%s", diagnostic)
        added = self.registry.merge(unit.artifacts)
        logger.debug(
            "Compiled %d artifact(s), %d new", len(unit.artifacts), len(added)
        )
