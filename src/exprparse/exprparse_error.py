"""Exception classes for callers that prefer exceptions over result values."""

from typing import List, Optional

from exprparse.exprparse_result import ExprParserResult, ExprResultType


class ExprError(Exception):
    """Base exception for expression parser errors."""

    def __init__(
        self,
        message: str,
        received: Optional[str] = None,
        expected: Optional[str] = None,
        suggestion: Optional[str] = None
    ):
        """
        Initialize the error.

        Args:
            message: Core error description
            received: What was actually found
            expected: What was expected instead
            suggestion: How to fix the problem
        """
        self.message = message
        self.received = received
        self.expected = expected
        self.suggestion = suggestion

        super().__init__(self._format_message())

    def _detail_lines(self) -> List[str]:
        """Lines shown between the message and the received/expected details."""
        return []

    def _format_message(self) -> str:
        lines = [f"Error: {self.message}"]
        lines.extend(self._detail_lines())

        if self.received:
            lines.append(f"Received: {self.received}")

        if self.expected:
            lines.append(f"Expected: {self.expected}")

        if self.suggestion:
            lines.append(f"Suggestion: {self.suggestion}")

        return "\n".join(lines)


class ExprConfigError(ExprError):
    """Invalid parser configuration."""


# Expected text and suggestion for each failure kind.
_FAILURE_DETAILS = {
    ExprResultType.MISSING_TERM: (
        "An integer or a parenthesized expression",
        "Add a term after the operator, fill in the empty parentheses, or reduce the nesting"
    ),
    ExprResultType.MISSING_CLOSING_PARENTHESIS: (
        "Closing parenthesis )",
        "Close every ( with a matching )"
    ),
    ExprResultType.INTEGER_OUT_OF_RANGE: (
        "An integer within the supported range",
        "Use a smaller integer constant"
    ),
    ExprResultType.ILL_FORMED_INTEGER: (
        "A nonzero leading digit",
        "Remove leading zeros and write the digits directly after a unary minus"
    ),
    ExprResultType.UNEXPECTED_END_OF_EXPRESSION: (
        "An expression",
        "Provide a non-empty expression"
    ),
    ExprResultType.EXTRANEOUS_SYMBOL: (
        "End of expression",
        "Remove the characters after the expression, or join them with an operator"
    ),
}


class ExprParseError(ExprError):
    """
    Raised by ExprParser.parse_or_raise when an expression is not well formed.

    The message shows the expression with a caret under the failing column.
    """

    def __init__(self, result: ExprParserResult, expression: str = ""):
        """
        Build an error from a failed parse result.

        Args:
            result: The failed result
            expression: The expression that was parsed
        """
        assert not result.is_ok(), "Cannot build a parse error from a successful result"
        self.result = result
        self.expression = expression
        self.position = result.column

        expected, suggestion = _FAILURE_DETAILS[result.type]
        received = None
        if result.column < len(expression):
            received = repr(expression[result.column:result.column + 10])

        elif expression:
            received = "End of expression"

        super().__init__(
            message=result.describe(),
            received=received,
            expected=expected,
            suggestion=suggestion
        )

    def _detail_lines(self) -> List[str]:
        if not self.expression:
            return []

        # Tabs keep their width so the caret lines up with the expression.
        pointer = "".join('\t' if ch == '\t' else ' ' for ch in self.expression[:self.position])
        return [f"  {self.expression}", f"  {pointer}^"]
