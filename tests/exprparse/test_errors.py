"""Tests for the exception classes and parse_or_raise."""

import pytest

from exprparse import (
    ExprConfigError, ExprError, ExprParseError, ExprParser, ExprParserResult, ExprResultType, ExprTokenType
)


class TestParseOrRaise:
    """Test the exception-raising convenience wrapper."""

    def test_returns_tokens(self, parser, helpers):
        """Test that a valid expression returns its tokens."""
        tokens = parser.parse_or_raise("2 ^ 3")
        assert helpers.token_pairs(tokens) == [
            ("2", ExprTokenType.OPERAND), ("^", ExprTokenType.OPERATOR), ("3", ExprTokenType.OPERAND)
        ]

    def test_raises_with_result(self, parser):
        """Test that a failure raises with the failed result attached."""
        with pytest.raises(ExprParseError) as exc_info:
            parser.parse_or_raise("(1+2")

        error = exc_info.value
        assert error.result == ExprParserResult(ExprResultType.MISSING_CLOSING_PARENTHESIS, 4)
        assert error.position == 4
        assert error.expression == "(1+2"

    def test_message_details(self, parser):
        """Test that the message describes the failure and what was found."""
        with pytest.raises(ExprParseError, match="Extraneous symbol") as exc_info:
            parser.parse_or_raise("12a")

        message = str(exc_info.value)
        assert "  12a\n    ^" in message
        assert "Received: 'a'" in message
        assert "Expected: End of expression" in message
        assert "Received: Found" not in message

    def test_end_of_input_received(self, parser):
        """Test the message when the failure is at the end of input."""
        with pytest.raises(ExprParseError) as exc_info:
            parser.parse_or_raise("1 +")

        assert "Received: End of expression" in str(exc_info.value)

    def test_empty_input(self, parser):
        """Test the message for empty input."""
        with pytest.raises(ExprParseError, match="Unexpected end of expression"):
            parser.parse_or_raise("")

    def test_is_expr_error(self, parser):
        """Test that parse errors share the package base class."""
        with pytest.raises(ExprError):
            parser.parse_or_raise("01")

    def test_parse_itself_never_raises(self, parser):
        """Test that malformed input only ever produces result values."""
        for expression in ["", "(", ")", "1+", "01", "abc", "99999999999999999999", "- -", "\0"]:
            assert not parser.parse(expression).is_ok()


class TestConfigError:
    """Test parser configuration validation."""

    def test_inverted_range(self):
        """Test that an empty integer range is rejected."""
        with pytest.raises(ExprConfigError, match="Invalid integer range"):
            ExprParser(required_int_min=10, required_int_max=-10)

    def test_single_value_range(self, parser_custom, helpers):
        """Test that a range of one value is allowed."""
        parser = parser_custom(required_int_min=0, required_int_max=0)
        helpers.assert_parses(parser, "0")
        helpers.assert_fails(parser, "1", ExprResultType.INTEGER_OUT_OF_RANGE, 0)

    def test_invalid_depth_limit(self):
        """Test that a nesting limit below one is rejected."""
        with pytest.raises(ExprConfigError, match="Invalid nesting depth limit"):
            ExprParser(max_depth=0)


class TestErrorPointer:
    """Test the caret line under the failing column."""

    def test_pointer_follows_tabs(self, parser):
        """Test that tabs before the failing column are kept in the pointer line."""
        with pytest.raises(ExprParseError) as exc_info:
            parser.parse_or_raise("\t1 x")

        assert "  \t1 x\n  \t  ^" in str(exc_info.value)

    def test_no_pointer_for_empty_input(self, parser):
        """Test that empty input has no expression or pointer lines."""
        with pytest.raises(ExprParseError) as exc_info:
            parser.parse_or_raise("")

        assert str(exc_info.value).splitlines()[1] == "Expected: An expression"

    def test_config_error_format(self):
        """Test that configuration errors report what was received and expected."""
        with pytest.raises(ExprConfigError) as exc_info:
            ExprParser(required_int_min=1, required_int_max=0)

        assert str(exc_info.value) == (
            "Error: Invalid integer range\n"
            "Received: required_int_min=1, required_int_max=0\n"
            "Expected: required_int_min <= required_int_max"
        )
