"""Tests for dynamic styles and their runtime resolution."""

import pytest

from atomicss import (
    CompiledDynamicStyle,
    DynamicBinding,
    DynamicStyle,
    DynamicTransform,
    DynamicValue,
    StyleCompiler,
    StyleValidationError,
)
from atomicss.hashing import custom_property_name
from atomicss.model.style import ContextSegment, SegmentKind

HOVER = ContextSegment(":hover", SegmentKind.PSEUDO_CLASS)


def _width_style():
    return DynamicStyle(("width",), {"width": DynamicValue("width")})


class TestDynamicTransform:
    def test_number_gets_unit(self) -> None:
        assert DynamicTransform().apply(10) == "10px"

    def test_float(self) -> None:
        assert DynamicTransform(unit="").apply(0.5) == "0.5"

    def test_string_passes_through(self) -> None:
        assert DynamicTransform().apply("50%") == "50%"

    def test_none_renders_fallback(self) -> None:
        assert DynamicTransform().apply(None) == "initial"

    def test_caller_default(self) -> None:
        assert DynamicTransform().apply(None, default="auto") == "auto"

    def test_boolean_rejected(self) -> None:
        with pytest.raises(TypeError):
            DynamicTransform().apply(True)


class TestDynamicValue:
    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            DynamicValue("")

    def test_duplicate_params_rejected(self) -> None:
        with pytest.raises(ValueError):
            DynamicStyle(("a", "a"), {})


class TestCompileDynamic:
    @pytest.fixture()
    def result(self):
        return StyleCompiler().compile(_width_style())

    def test_binding(self, result) -> None:
        binding = result.styles["width"]
        assert isinstance(binding, DynamicBinding)
        assert binding.class_name == "x17fnjtu"
        assert binding.variable == "--width"
        assert binding.param == "width"
        assert str(binding) == "x17fnjtu"

    def test_rule(self, result) -> None:
        (rule,) = result.rules
        assert rule.css.ltr == ".x17fnjtu{width:var(--width,revert)}"
        assert rule.css.rtl is None
        assert rule.priority == 4000

    def test_binding_to_dict(self, result) -> None:
        assert result.styles["width"].to_dict() == {
            "className": "x17fnjtu",
            "variable": "--width",
            "param": "width",
            "transform": {"unit": "px", "fallback": "initial"},
        }

    def test_resolve_number(self, result) -> None:
        assert result.dynamic.resolve(10) == ({"width": "x17fnjtu"}, {"--width": "10px"})

    def test_resolve_none(self, result) -> None:
        _, inline = result.dynamic.resolve(None)
        assert inline == {"--width": "initial"}

    def test_resolve_missing_argument(self, result) -> None:
        _, inline = result.dynamic.resolve()
        assert inline == {"--width": "initial"}

    def test_resolve_keyword(self, result) -> None:
        _, inline = result.dynamic.resolve(width="50%")
        assert inline == {"--width": "50%"}

    def test_too_many_arguments(self, result) -> None:
        with pytest.raises(TypeError):
            result.dynamic.resolve(1, 2)

    def test_unknown_keyword(self, result) -> None:
        with pytest.raises(TypeError):
            result.dynamic.resolve(height=1)

    def test_plain_style_has_no_dynamic_form(self) -> None:
        assert StyleCompiler().compile({"color": "red"}).dynamic is None


class TestMixedDynamicStyles:
    def test_static_and_dynamic_keys(self) -> None:
        style = DynamicStyle(
            ("size", "alpha"),
            {"color": "red", "height": DynamicValue("size"), "opacity": DynamicValue("alpha")},
        )
        compiled = StyleCompiler().compile(style).dynamic
        class_names, inline = compiled.resolve(20, 0.25)
        assert class_names["color"] == "x1e2nbdu"
        assert inline == {"--height": "20px", "--opacity": "0.25"}

    def test_conditional_dynamic_key(self) -> None:
        style = DynamicStyle(
            ("c",), {"color": {"default": DynamicValue("c"), ":hover": "blue"}}
        )
        result = StyleCompiler().compile(style)
        assert isinstance(result.styles["color"], str)
        assert len(result.styles["color"].split()) == 2
        class_names, inline = result.dynamic.resolve("red")
        assert class_names["color"] == result.styles["color"]
        assert inline == {"--color": "red"}

    def test_unknown_reference(self) -> None:
        with pytest.raises(StyleValidationError) as exc_info:
            StyleCompiler().compile(DynamicStyle(("w",), {"width": DynamicValue("h")}))
        assert exc_info.value.diagnostics[0].rule == "unknown-dynamic-reference"

    def test_create_returns_compiled_dynamic_style(self) -> None:
        result = StyleCompiler().create({"root": {"color": "red"}, "sized": _width_style()})
        assert isinstance(result.namespaces["sized"], CompiledDynamicStyle)
        assert result.namespaces["sized"].params == ("width",)
        assert result.namespaces["root"] == {"color": "x1e2nbdu"}


class TestDynamicContexts:
    @pytest.fixture()
    def result(self):
        style = DynamicStyle(
            ("base", "hovered"),
            {"width": DynamicValue("base"), ":hover": {"width": DynamicValue("hovered")}},
        )
        return StyleCompiler().compile(style)

    def test_each_context_has_its_own_variable(self, result) -> None:
        base, hovered = result.styles["width"], result.styles[":hover_width"]
        assert base.variable == "--width"
        assert base.class_name == "x17fnjtu"
        assert hovered.variable == custom_property_name("width", (HOVER,))
        assert hovered.variable != base.variable

    def test_hover_rule_reads_its_variable(self, result) -> None:
        hovered = result.styles[":hover_width"]
        rules = {rule.class_name: rule for rule in result.rules}
        assert rules[hovered.class_name].css.ltr == (
            f".{hovered.class_name}:hover{{width:var({hovered.variable},revert)}}"
        )

    def test_resolve_sets_both_variables(self, result) -> None:
        _, inline = result.dynamic.resolve(10, 20)
        assert inline == {
            "--width": "10px",
            custom_property_name("width", (HOVER,)): "20px",
        }


class TestDynamicDefaults:
    def test_default_used_for_none(self) -> None:
        style = DynamicStyle(("w",), {"width": DynamicValue("w", default="auto")})
        compiled = StyleCompiler().compile(style).dynamic
        assert compiled.resolve(None) == ({"width": "x17fnjtu"}, {"--width": "auto"})
        assert compiled.resolve() == ({"width": "x17fnjtu"}, {"--width": "auto"})

    def test_value_overrides_default(self) -> None:
        style = DynamicStyle(("w",), {"width": DynamicValue("w", default="auto")})
        _, inline = StyleCompiler().compile(style).dynamic.resolve(12)
        assert inline == {"--width": "12px"}

    def test_default_in_binding_transform(self) -> None:
        style = DynamicStyle(("w",), {"width": DynamicValue("w", default="50%")})
        binding = StyleCompiler().compile(style).styles["width"]
        assert binding.transform == DynamicTransform(unit="px", fallback="50%")

    def test_default_must_be_text(self) -> None:
        with pytest.raises(TypeError):
            DynamicValue("w", default=10)
