"""Shared fixtures and utilities for expression parser tests."""

import pytest
from typing import List, Tuple

from exprparse import MAX_DEPTH, ExprParser, ExprParserResult, ExprResultType, ExprToken, ExprTokenType


@pytest.fixture
def parser():
    """Create a fresh parser instance for each test."""
    return ExprParser()


@pytest.fixture
def parser_custom():
    """Factory for parser instances with a custom integer range."""
    def _create_parser(
        required_int_min: int = -32768, required_int_max: int = 32767, max_depth: int = MAX_DEPTH
    ) -> ExprParser:
        return ExprParser(required_int_min=required_int_min, required_int_max=required_int_max, max_depth=max_depth)
    return _create_parser


class ExprTestHelpers:
    """Helper utilities for parser testing."""

    @staticmethod
    def token_pairs(tokens: List[ExprToken]) -> List[Tuple[str, ExprTokenType]]:
        """Reduce tokens to (value, type) pairs for comparison."""
        return [(token.value, token.type) for token in tokens]

    @staticmethod
    def assert_parses(parser: ExprParser, expression: str) -> None:
        """Assert that an expression is well formed."""
        result = parser.parse(expression)
        assert result.is_ok(), f"Expected {expression!r} to parse, got {result.describe()}"

    @staticmethod
    def assert_fails(parser: ExprParser, expression: str, result_type: ExprResultType, column: int) -> None:
        """Assert that an expression fails with the given outcome and column."""
        result = parser.parse(expression)
        expected = ExprParserResult(result_type, column)
        assert result == expected, f"Expected {expected} for {expression!r}, got {result}"

    @staticmethod
    def build_nested_expression(depth: int, base_value: str = "1") -> str:
        """Build an expression wrapped in depth levels of parentheses."""
        return "(" * depth + base_value + ")" * depth


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return ExprTestHelpers
