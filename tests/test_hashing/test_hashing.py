"""Tests for content-addressed class names."""

import pytest

from atomicss.hashing import (
    create_hash,
    custom_property_name,
    hash_class_name,
    hash_keyframes_name,
    modifier_string,
    murmurhash2,
    to_base36,
)
from atomicss.model.style import ContextSegment, SegmentKind

HOVER = ContextSegment(":hover", SegmentKind.PSEUDO_CLASS)
FOCUS = ContextSegment(":focus", SegmentKind.PSEUDO_CLASS)
BEFORE = ContextSegment("::before", SegmentKind.PSEUDO_ELEMENT)
MEDIA = ContextSegment("@media (min-width: 1000px)", SegmentKind.AT_RULE)


class TestBase36:
    @pytest.mark.parametrize(
        "value, expected", [(0, "0"), (9, "9"), (35, "z"), (36, "10"), (1295, "zz")]
    )
    def test_digits(self, value, expected) -> None:
        assert to_base36(value) == expected


class TestMurmurHash:
    def test_is_32_bit(self) -> None:
        for text in (b"", b"a", b"ab", b"abc", b"abcd", b"abcde"):
            assert 0 <= murmurhash2(text) <= 0xFFFFFFFF

    def test_seed_changes_result(self) -> None:
        assert murmurhash2(b"color", 1) != murmurhash2(b"color", 2)

    def test_deterministic(self) -> None:
        assert create_hash("<>colorrednull") == create_hash("<>colorrednull")


class TestModifiers:
    def test_empty_context(self) -> None:
        assert modifier_string(()) == "null"

    def test_pseudos_before_at_rules(self) -> None:
        assert modifier_string((MEDIA, HOVER)) == ":hover@media (min-width: 1000px)"

    def test_order_insensitive(self) -> None:
        assert modifier_string((HOVER, FOCUS)) == modifier_string((FOCUS, HOVER))

    def test_pseudo_element_placement_distinguished(self) -> None:
        assert modifier_string((HOVER, BEFORE)) == "::before:hover"
        assert modifier_string((BEFORE, HOVER)) == "::before&:hover"


class TestCustomPropertyName:
    def test_empty_context_uses_property(self) -> None:
        assert custom_property_name("width", ()) == "--width"

    def test_context_adds_suffix(self) -> None:
        name = custom_property_name("width", (HOVER,))
        assert name == "--width-" + create_hash(":hover")

    def test_context_order_does_not_matter(self) -> None:
        assert custom_property_name("width", (HOVER, MEDIA)) == custom_property_name(
            "width", (MEDIA, HOVER)
        )


class TestClassNames:
    @pytest.mark.parametrize(
        "prop, context, value, expected",
        [
            ("color", (), "red", "x1e2nbdu"),
            ("height", (), "5px", "x1ycjhwn"),
            ("background-color", (), "red", "xrkmrrc"),
            ("width", (), "var(--width,revert)", "x17fnjtu"),
            ("inset-inline-start", (HOVER,), "10px", "xaiupp8"),
            ("inset-inline-end", (MEDIA,), "5px", "x1uy60zq"),
        ],
    )
    def test_known_names(self, prop, context, value, expected) -> None:
        assert hash_class_name(prop, context, value) == expected

    def test_prefix(self) -> None:
        assert hash_class_name("color", (), "red", prefix="css-") == "css-1e2nbdu"

    def test_context_changes_name(self) -> None:
        assert hash_class_name("color", (HOVER,), "red") != hash_class_name("color", (), "red")


class TestKeyframesNames:
    def test_known_name(self) -> None:
        body = "from{inset-inline-start:0px;}to{inset-inline-start:100px;}"
        assert hash_keyframes_name(body) == "x1g85oeb-B"

    def test_suffix(self) -> None:
        assert hash_keyframes_name("from{opacity:0;}").endswith("-B")
