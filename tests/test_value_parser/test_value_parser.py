"""Tests for the CSS value parser and serializer."""

import pytest

from atomicss.parser import ValueParseError, parse_value, serialize
from atomicss.parser.nodes import (
    Dimension,
    Function,
    Number,
    Operator,
    Paren,
    Percentage,
    Slash,
    String,
    Word,
    format_number,
    plain_number,
)


# ---------------------------------------------------------------------------
# Terms
# ---------------------------------------------------------------------------


class TestTerms:
    def test_space_separated_group(self) -> None:
        assert parse_value("1px solid red") == [
            [Dimension("1", "px"), Word("solid"), Word("red")]
        ]

    def test_number(self) -> None:
        assert parse_value("1.5") == [[Number("1.5")]]

    def test_negative_dimension(self) -> None:
        assert parse_value("-.5em") == [[Dimension("-.5", "em")]]

    def test_percentage(self) -> None:
        assert parse_value("50%") == [[Percentage("50")]]

    def test_hash_is_a_word(self) -> None:
        assert parse_value("#fff") == [[Word("#fff")]]

    def test_custom_property_name(self) -> None:
        assert parse_value("--brand-color") == [[Word("--brand-color")]]

    def test_strings_keep_their_quotes(self) -> None:
        assert parse_value("'a b'") == [[String("'a b'")]]
        assert parse_value('"x"') == [[String('"x"')]]

    def test_important(self) -> None:
        assert parse_value("red !important") == [[Word("red"), Word("!important")]]

    def test_url_is_opaque(self) -> None:
        assert parse_value("url(img/a.png)") == [[Word("url(img/a.png)")]]

    def test_empty_value(self) -> None:
        assert parse_value("") == []


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_comma_groups(self) -> None:
        assert parse_value("a, b") == [[Word("a")], [Word("b")]]

    def test_function_arguments(self) -> None:
        assert parse_value("var(--x, 10px)") == [
            [Function("var", [[Word("--x")], [Dimension("10", "px")]])]
        ]

    def test_function_without_arguments(self) -> None:
        assert parse_value("foo()") == [[Function("foo", [])]]

    def test_calc_operator(self) -> None:
        assert parse_value("calc(100% - 10px)") == [
            [Function("calc", [[Percentage("100"), Operator("-"), Dimension("10", "px")]])]
        ]

    def test_nested_parens(self) -> None:
        value = parse_value("calc((1px + 2px) * 3)")
        inner = value[0][0]
        assert isinstance(inner, Function)
        assert isinstance(inner.args[0][0], Paren)

    def test_slash(self) -> None:
        assert parse_value("1 / 2") == [[Number("1"), Slash(), Number("2")]]


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestSerialize:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("1px   solid    red", "1px solid red"),
            ("rgba( 0 , 0 , 0 , .5 )", "rgba(0,0,0,.5)"),
            ("10px / 2", "10px/2"),
            ("a , b", "a,b"),
            ("calc(100% - 10px)", "calc(100% - 10px)"),
            ("var(--x)", "var(--x)"),
        ],
    )
    def test_canonical_text(self, source: str, expected: str) -> None:
        assert serialize(parse_value(source)) == expected


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_unexpected_character(self) -> None:
        with pytest.raises(ValueParseError) as exc_info:
            parse_value("red; blue")
        assert exc_info.value.column is not None

    def test_unbalanced_parenthesis(self) -> None:
        with pytest.raises(ValueParseError):
            parse_value("calc(1px")


class TestFormatNumber:
    @pytest.mark.parametrize(
        "value, expected",
        [(5, "5"), (5.0, "5"), (0.5, "0.5"), (1.23456, "1.2346"), (-2.5, "-2.5")],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    @pytest.mark.parametrize(
        "value, expected", [(1e-05, "0.00001"), (-2.5e-07, "-0.00000025"), (0.125, "0.125")]
    )
    def test_plain_number(self, value: float, expected: str) -> None:
        assert plain_number(value) == expected
