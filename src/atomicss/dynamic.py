"""Dynamic values: style values bound to runtime arguments.

A dynamic style compiles to a rule that reads a CSS custom property; at
runtime the caller renders each argument with its ``DynamicTransform`` and
sets the custom property as an inline style.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from atomicss.parser.nodes import format_number


@dataclass(frozen=True)
class DynamicValue:
    """An opaque reference to a runtime parameter, e.g. ``DynamicValue("width")``.

    ``default`` is rendered when the argument is ``None`` or missing at
    runtime; without one the custom property is set to ``initial``.
    """

    name: str
    default: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("DynamicValue name must be a non-empty string")
        if self.default is not None and not isinstance(self.default, str):
            raise TypeError("DynamicValue default must be a string")


@dataclass(frozen=True)
class DynamicTransform:
    """Runtime rendering rule for a dynamic value.

    Numbers get ``unit`` appended, strings pass through, and ``None`` renders
    as ``fallback``.
    """

    unit: str = "px"
    fallback: str = "initial"

    def apply(self, value: Any, default: str | None = None) -> str:
        if value is None:
            return default if default is not None else self.fallback
        if isinstance(value, bool):
            raise TypeError("Dynamic style values must be numbers, strings or None")
        if isinstance(value, (int, float)):
            return format_number(value) + self.unit
        return str(value)

    def to_dict(self) -> dict[str, str]:
        return {"unit": self.unit, "fallback": self.fallback}


@dataclass(frozen=True)
class DynamicBinding:
    """A compiled key bound to a runtime parameter."""

    class_name: str
    variable: str
    param: str
    transform: DynamicTransform

    def __str__(self) -> str:
        return self.class_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "className": self.class_name,
            "variable": self.variable,
            "param": self.param,
            "transform": self.transform.to_dict(),
        }


@dataclass(frozen=True)
class DynamicStyle:
    """A style body parameterized by named runtime arguments.

    ``DynamicStyle(("width",), {"width": DynamicValue("width")})``
    """

    params: tuple[str, ...]
    body: Mapping[str, Any]

    def __post_init__(self) -> None:
        if len(set(self.params)) != len(self.params):
            raise ValueError("DynamicStyle params must be unique")


@dataclass
class CompiledDynamicStyle:
    """Compiled form of a :class:`DynamicStyle`.

    ``styles`` maps each key to its class names; a key backed by a single
    dynamic rule maps to its :class:`DynamicBinding`. ``bindings`` lists every
    dynamic rule, including those merged into a multi-class key.
    """

    params: tuple[str, ...]
    styles: dict[str, Any] = field(default_factory=dict)
    bindings: list[DynamicBinding] = field(default_factory=list)

    def resolve(self, *args: Any, **kwargs: Any) -> tuple[dict[str, Any], dict[str, str]]:
        """Apply runtime arguments.

        Returns the class-name mapping (bindings replaced by their class
        names) and the inline style dict setting each custom property.
        """
        if len(args) > len(self.params):
            raise TypeError(
                f"Expected at most {len(self.params)} argument(s), got {len(args)}"
            )
        values = dict(zip(self.params, args))
        unknown = set(kwargs) - set(self.params)
        if unknown:
            raise TypeError(f"Unknown dynamic argument(s): {sorted(unknown)}")
        values.update(kwargs)

        class_names = {
            key: None if value is None else str(value) for key, value in self.styles.items()
        }
        inline = {
            binding.variable: binding.transform.apply(values.get(binding.param))
            for binding in self.bindings
        }
        return class_names, inline
