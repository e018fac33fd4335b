"""Tests for step argument type casting."""

import pytest

from browser_contexts.type_caster import (
    TypeCaster,
    cast_step_argument,
    parse_scalar,
    parse_token,
    unquote,
)


class TestCastStringToInt:
    """Tests for int casting."""

    def test_positive(self) -> None:
        assert TypeCaster().cast_string_to_int("42") == 42

    def test_negative(self) -> None:
        assert TypeCaster().cast_string_to_int("-7") == -7

    def test_too_long_for_int_is_returned_unmodified(self) -> None:
        huge = "9" * 5000
        assert TypeCaster().cast_string_to_int(huge) == huge


class TestCast:
    """Tests for the transform dispatcher."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("0", 0),
            ("123", 123),
            ("-15", -15),
            ("1.5", 1.5),
            (".5", 0.5),
            ("true", True),
            ("FALSE", False),
            ('"1"', "1"),
            ("'true'", "true"),
            ('""', ""),
        ],
    )
    def test_casts(self, value: str, expected) -> None:
        result = cast_step_argument(value)
        assert result == expected
        assert type(result) is type(expected)

    @pytest.mark.parametrize("value", ["007", "-0", "1.", "-1.5", "yes", "1e5", "abc", ""])
    def test_leaves_other_strings_alone(self, value: str) -> None:
        assert cast_step_argument(value) == value

    def test_zero_and_one_are_not_bools(self) -> None:
        assert cast_step_argument("1") is not True
        assert cast_step_argument("0") is not False

    def test_non_strings_pass_through(self) -> None:
        assert cast_step_argument(5) == 5
        assert cast_step_argument(None) is None

    def test_quoted_string_keeps_inner_quotes(self) -> None:
        assert cast_step_argument('"say \\"hi\\""') == 'say \\"hi\\"'


class TestPlaceholderTypes:
    """Tests for the Token and Scalar behave placeholder types."""

    def test_unquote_double(self) -> None:
        assert unquote('"abc"') == "abc"

    def test_unquote_single(self) -> None:
        assert unquote("'abc'") == "abc"

    def test_unquote_mismatched(self) -> None:
        assert unquote("'abc\"") == "'abc\""

    def test_token_is_not_cast(self) -> None:
        assert parse_token('"5"') == "5"

    def test_scalar_strips_then_casts(self) -> None:
        assert parse_scalar('"5"') == 5
        assert parse_scalar("true") is True
        assert parse_scalar("'hello'") == "hello"
