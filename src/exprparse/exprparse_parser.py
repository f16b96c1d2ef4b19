"""Recursive descent parser for arithmetic expressions."""

import logging
from typing import List, Optional

from exprparse.exprparse_cursor import ExprCursor
from exprparse.exprparse_error import ExprConfigError, ExprParseError
from exprparse.exprparse_result import ExprParserResult, ExprResultType
from exprparse.exprparse_symbol import OPERATOR_SYMBOLS, ExprSymbol, symbol_str
from exprparse.exprparse_token import ExprToken, ExprTokenType


# Bounds of the integer type operands must fit in (signed 32 bit).
REQUIRED_INT_MIN = -2**31
REQUIRED_INT_MAX = 2**31 - 1

# Default limit on parenthesis nesting.
MAX_DEPTH = 200

# Lookahead symbols that can start an integer literal.
_INTEGER_START_SYMBOLS = frozenset({ExprSymbol.ZERO, ExprSymbol.MINUS, ExprSymbol.NONZERO_DIGIT})


def _str_to_int(text: str) -> Optional[int]:
    """
    Convert the text of an integer literal.

    Args:
        text: Decimal digits, optionally preceded by a minus sign

    Returns:
        The integer value, or None if the text is not a valid integer
    """
    try:
        return int(text)

    except ValueError:
        return None


class ExprParser:
    """
    Validates arithmetic expressions against the grammar below, recording tokens as it goes.

        expression     := term , { ("+"|"-"|"^"|"*"|"/") , term }
        term           := "(" , expression , ")"  |  integer
        integer        := "0"  |  ["-"] , natural_number
        natural_number := nonzero_digit , { digit }
        digit          := "0" | nonzero_digit

    All binary operators share one grammar level, so no precedence or associativity is
    encoded in the token stream.  Failures are reported as ExprParserResult values; parse()
    never raises for malformed input.
    """

    def __init__(
        self,
        required_int_min: int = REQUIRED_INT_MIN,
        required_int_max: int = REQUIRED_INT_MAX,
        max_depth: int = MAX_DEPTH
    ):
        """
        Initialize the parser.

        Args:
            required_int_min: Smallest integer constant accepted as an operand
            required_int_max: Largest integer constant accepted as an operand
            max_depth: Maximum parenthesis nesting depth

        Raises:
            ExprConfigError: If the integer range is empty or max_depth is not positive
        """
        if required_int_min > required_int_max:
            raise ExprConfigError(
                message="Invalid integer range",
                received=f"required_int_min={required_int_min}, required_int_max={required_int_max}",
                expected="required_int_min <= required_int_max"
            )

        if max_depth < 1:
            raise ExprConfigError(
                message="Invalid nesting depth limit",
                received=f"max_depth={max_depth}",
                expected="max_depth >= 1"
            )

        self.required_int_min = required_int_min
        self.required_int_max = required_int_max
        self.max_depth = max_depth

        # Literals with more digits than the widest bound cannot be in range.
        self._max_int_digits = len(str(max(abs(required_int_min), abs(required_int_max))))

        self._cursor = ExprCursor()
        self._tokens: List[ExprToken] = []
        self._last_result = ExprParserResult(ExprResultType.OK)
        self._logger = logging.getLogger("ExprParser")

    @property
    def last_result(self) -> ExprParserResult:
        """Result of the most recent parse call."""
        return self._last_result

    def parse(self, expression: str) -> ExprParserResult:
        """
        Parse an expression and record its tokens.

        Any state from a previous call is discarded first.

        Args:
            expression: The expression text

        Returns:
            The outcome of the parse, with the column of any failure
        """
        self._cursor.reset(expression)
        self._tokens.clear()
        self._logger.debug("parsing %r", expression)

        self._last_result = self._parse_input()
        self._logger.debug("result for %r: %s", expression, self._last_result.describe())
        return self._last_result

    def parse_or_raise(self, expression: str) -> List[ExprToken]:
        """
        Parse an expression, raising on failure.

        Args:
            expression: The expression text

        Returns:
            The tokens of the expression

        Raises:
            ExprParseError: If the expression is not well formed
        """
        result = self.parse(expression)
        if not result.is_ok():
            raise ExprParseError(result, expression)

        return self.get_tokens()

    def get_tokens(self) -> List[ExprToken]:
        """
        Get the tokens recognized by the last parse call.

        Returns:
            A copy of the token list; partial if the parse failed part way through
        """
        return list(self._tokens)

    def token_str(self, symbol: ExprSymbol) -> str:
        """
        Get the display glyph for a terminal symbol.

        Args:
            symbol: The terminal symbol

        Returns:
            The glyph, or "X" for symbols without one
        """
        return symbol_str(symbol)

    def _parse_input(self) -> ExprParserResult:
        """Parse the whole input as a single expression."""
        cursor = self._cursor
        cursor.skip_ws()
        if cursor.end_input():
            return ExprParserResult(ExprResultType.UNEXPECTED_END_OF_EXPRESSION, cursor.position)

        try:
            result = self._expression(0)

        except RecursionError:
            # Only reachable when max_depth is set above what the interpreter's stack allows.
            self._logger.warning("recursion limit reached at column %d (max_depth=%d)", cursor.position, self.max_depth)
            return ExprParserResult(ExprResultType.MISSING_TERM, cursor.position)

        if not result.is_ok():
            return result

        cursor.skip_ws()
        if not cursor.end_input():
            self._logger.debug("unconsumed input: %r", cursor.remaining())
            return ExprParserResult(ExprResultType.EXTRANEOUS_SYMBOL, cursor.position)

        return result

    def _expression(self, depth: int) -> ExprParserResult:
        """expression := term , { ("+"|"-"|"^"|"*"|"/") , term }"""
        cursor = self._cursor
        cursor.skip_ws()

        result = self._term(depth)
        while result.is_ok() and not cursor.end_input():
            operator = self._match_operator()
            if operator is None:
                return result

            result = self._term(depth)
            if not result.is_ok():
                # Whatever went wrong, an operator was left without its right-hand term.
                return ExprParserResult(ExprResultType.MISSING_TERM, result.column)

        return result

    def _match_operator(self) -> Optional[ExprSymbol]:
        """
        Try each binary operator in turn, recording the first one found.

        Returns:
            The operator symbol consumed, or None if the next symbol is not an operator
        """
        for symbol in OPERATOR_SYMBOLS:
            if self._cursor.expect(symbol):
                self._tokens.append(
                    ExprToken(symbol_str(symbol), ExprTokenType.OPERATOR, self._cursor.position - 1)
                )
                return symbol

        return None

    def _term(self, depth: int) -> ExprParserResult:
        """
        term := "(" , expression , ")" | integer

        Args:
            depth: Number of groups currently open around this term
        """
        cursor = self._cursor
        cursor.skip_ws()
        begin = cursor.position

        result = ExprParserResult(ExprResultType.MISSING_TERM, begin)
        if cursor.peek(ExprSymbol.OPENING_SCOPE) and depth >= self.max_depth:
            # The group at begin would exceed the nesting limit, so no term is accepted there.
            self._logger.debug("nesting deeper than %d at column %d", self.max_depth, begin)
            return result

        if cursor.expect(ExprSymbol.OPENING_SCOPE):
            self._tokens.append(ExprToken("(", ExprTokenType.OPENING_SCOPE, begin))
            result = self._expression(depth + 1)
            if not result.is_ok():
                return result

            if not cursor.expect(ExprSymbol.CLOSING_SCOPE):
                return ExprParserResult(ExprResultType.MISSING_CLOSING_PARENTHESIS, cursor.position)

            self._tokens.append(ExprToken(")", ExprTokenType.CLOSING_SCOPE, cursor.position - 1))
            return result

        if cursor.current_symbol() not in _INTEGER_START_SYMBOLS:
            return result

        result = self._integer()
        if not result.is_ok():
            return result

        literal = cursor.substring(begin)
        if len(literal.lstrip('-')) > self._max_int_digits:
            return ExprParserResult(ExprResultType.INTEGER_OUT_OF_RANGE, begin)

        value = _str_to_int(literal)
        if value is None:
            return ExprParserResult(ExprResultType.ILL_FORMED_INTEGER, begin)

        if not self.required_int_min <= value <= self.required_int_max:
            return ExprParserResult(ExprResultType.INTEGER_OUT_OF_RANGE, begin)

        self._tokens.append(ExprToken(literal, ExprTokenType.OPERAND, begin))
        return result

    def _integer(self) -> ExprParserResult:
        """integer := "0" | ["-"] , natural_number"""
        cursor = self._cursor
        zero_column = cursor.position
        if cursor.accept(ExprSymbol.ZERO):
            # A zero literal stands alone; "01" is not an integer.
            if cursor.peek(ExprSymbol.ZERO) or cursor.peek(ExprSymbol.NONZERO_DIGIT):
                return ExprParserResult(ExprResultType.ILL_FORMED_INTEGER, zero_column)

            return ExprParserResult(ExprResultType.OK)

        cursor.accept(ExprSymbol.MINUS)
        return self._natural_number()

    def _natural_number(self) -> ExprParserResult:
        """natural_number := nonzero_digit , { digit }"""
        if self._digit_excl_zero():
            while self._digit():
                pass

            return ExprParserResult(ExprResultType.OK)

        return ExprParserResult(ExprResultType.ILL_FORMED_INTEGER, self._cursor.position)

    def _digit_excl_zero(self) -> bool:
        return self._cursor.accept(ExprSymbol.NONZERO_DIGIT)

    def _digit(self) -> bool:
        return self._cursor.accept(ExprSymbol.ZERO) or self._cursor.accept(ExprSymbol.NONZERO_DIGIT)
