"""Tests for keyframes compilation."""

import pytest

from atomicss.config import CompilerOptions
from atomicss.dynamic import DynamicValue
from atomicss.errors import StyleValidationError
from atomicss.keyframes import compile_keyframes
from atomicss.model.style import KeyframesArtifact


class TestCompileKeyframes:
    @pytest.fixture()
    def slide(self) -> KeyframesArtifact:
        artifact, warnings = compile_keyframes({"from": {"start": 0}, "to": {"start": 100}})
        assert warnings == []
        return artifact

    def test_name(self, slide: KeyframesArtifact) -> None:
        assert slide.name == "x1g85oeb-B"
        assert slide.identifier == "x1g85oeb-B"

    def test_body_keeps_zero_units(self, slide: KeyframesArtifact) -> None:
        assert slide.body == "from{inset-inline-start:0px;}to{inset-inline-start:100px;}"

    def test_priority(self, slide: KeyframesArtifact) -> None:
        assert slide.priority == 1

    def test_css(self, slide: KeyframesArtifact) -> None:
        assert slide.css.ltr == (
            "@keyframes x1g85oeb-B{from{inset-inline-start:0px;}to{inset-inline-start:100px;}}"
        )
        assert slide.css.rtl is None

    def test_metadata(self, slide: KeyframesArtifact) -> None:
        assert slide.to_metadata() == [
            "x1g85oeb-B",
            {"ltr": slide.css.ltr, "rtl": None},
            1,
        ]

    def test_identical_frames_share_a_name(self, slide: KeyframesArtifact) -> None:
        again, _ = compile_keyframes({"from": {"left": 0}, "to": {"left": "100px"}})
        assert again.name == slide.name

    def test_prefix_option(self) -> None:
        artifact, _ = compile_keyframes(
            {"to": {"opacity": 1}}, CompilerOptions(class_name_prefix="k")
        )
        assert artifact.name.startswith("k")
        assert artifact.name.endswith("-B")


class TestFrameBodies:
    def test_percentage_labels_and_multiple_declarations(self) -> None:
        artifact, _ = compile_keyframes(
            {"0%": {"opacity": 0, "transform": "scale(0.5)"}, "100%": {"opacity": 1}}
        )
        assert artifact.body == "0%{opacity:0;transform:scale(.5);}100%{opacity:1;}"

    def test_shorthands_expand(self) -> None:
        artifact, _ = compile_keyframes({"to": {"margin": "1px 2px"}})
        assert artifact.body == (
            "to{margin-top:1px;margin-inline-end:2px;"
            "margin-bottom:1px;margin-inline-start:2px;}"
        )

    def test_unset_values_skipped(self) -> None:
        artifact, _ = compile_keyframes({"to": {"color": None, "opacity": 1}})
        assert artifact.body == "to{opacity:1;}"

    def test_warnings_returned(self) -> None:
        _, warnings = compile_keyframes({"to": {"colour": "red"}})
        assert [w.rule for w in warnings] == ["unknown-property"]
        assert warnings[0].key == "to_colour"


class TestInvalidKeyframes:
    def test_pseudo_in_frame(self) -> None:
        with pytest.raises(StyleValidationError) as exc_info:
            compile_keyframes({"from": {":hover": {"color": "red"}}})
        assert [d.rule for d in exc_info.value.diagnostics] == ["keyframes-context"]

    def test_at_rule_in_frame(self) -> None:
        with pytest.raises(StyleValidationError) as exc_info:
            compile_keyframes({"to": {"@media (min-width: 1px)": {"color": "red"}}})
        assert exc_info.value.diagnostics[0].rule == "keyframes-context"

    def test_dynamic_value(self) -> None:
        with pytest.raises(StyleValidationError) as exc_info:
            compile_keyframes({"to": {"width": DynamicValue("w")}})
        assert exc_info.value.diagnostics[0].rule == "invalid-value"

    def test_not_a_mapping(self) -> None:
        with pytest.raises(StyleValidationError):
            compile_keyframes(["from", "to"])

    def test_frame_not_a_mapping(self) -> None:
        with pytest.raises(StyleValidationError):
            compile_keyframes({"from": "opacity: 0"})

    def test_empty(self) -> None:
        with pytest.raises(StyleValidationError):
            compile_keyframes({})

    def test_all_errors_reported(self) -> None:
        with pytest.raises(StyleValidationError) as exc_info:
            compile_keyframes({"from": {":hover": {}}, "to": {"width": DynamicValue("w")}})
        assert len(exc_info.value.diagnostics) == 2
        assert "2 error(s)" in str(exc_info.value)
