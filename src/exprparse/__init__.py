"""Recursive descent syntax analyzer for integer arithmetic expressions."""

# Main API
from exprparse.exprparse_parser import ExprParser, REQUIRED_INT_MIN, REQUIRED_INT_MAX, MAX_DEPTH

# Results and exceptions
from exprparse.exprparse_result import ExprParserResult, ExprResultType
from exprparse.exprparse_error import ExprError, ExprParseError, ExprConfigError

# Lower-level components
from exprparse.exprparse_token import ExprToken, ExprTokenType
from exprparse.exprparse_symbol import ExprSymbol, classify_char, symbol_str
from exprparse.exprparse_cursor import ExprCursor


__all__ = [
    # Main API
    "ExprParser", "REQUIRED_INT_MIN", "REQUIRED_INT_MAX", "MAX_DEPTH",

    # Results and exceptions
    "ExprParserResult", "ExprResultType",
    "ExprError", "ExprParseError", "ExprConfigError",

    # Lower-level components
    "ExprToken", "ExprTokenType", "ExprSymbol", "classify_char", "symbol_str", "ExprCursor"
]
