"""Outcome of a single parse call."""

from dataclasses import dataclass
from enum import Enum


class ExprResultType(Enum):
    """The closed set of parse outcomes."""
    OK = "OK"
    MISSING_TERM = "MISSING_TERM"
    MISSING_CLOSING_PARENTHESIS = "MISSING_CLOSING_PARENTHESIS"
    INTEGER_OUT_OF_RANGE = "INTEGER_OUT_OF_RANGE"
    ILL_FORMED_INTEGER = "ILL_FORMED_INTEGER"
    UNEXPECTED_END_OF_EXPRESSION = "UNEXPECTED_END_OF_EXPRESSION"
    EXTRANEOUS_SYMBOL = "EXTRANEOUS_SYMBOL"


_DESCRIPTIONS = {
    ExprResultType.OK: "Expression is well formed",
    ExprResultType.MISSING_TERM: "Missing term",
    ExprResultType.MISSING_CLOSING_PARENTHESIS: "Missing closing parenthesis",
    ExprResultType.INTEGER_OUT_OF_RANGE: "Integer constant out of range",
    ExprResultType.ILL_FORMED_INTEGER: "Ill formed integer",
    ExprResultType.UNEXPECTED_END_OF_EXPRESSION: "Unexpected end of expression",
    ExprResultType.EXTRANEOUS_SYMBOL: "Extraneous symbol after valid expression",
}


@dataclass(frozen=True)
class ExprParserResult:
    """
    Result of parsing an expression.

    Attributes:
        type: The outcome
        column: Column where a failure was detected; meaningless for OK
    """
    type: ExprResultType
    column: int = 0

    def is_ok(self) -> bool:
        """Check whether the parse succeeded."""
        return self.type == ExprResultType.OK

    def describe(self) -> str:
        """
        Get a one-line description of the outcome.

        Returns:
            Human readable text, including the column for failures
        """
        text = _DESCRIPTIONS[self.type]
        if self.is_ok():
            return text

        return f"{text} at column {self.column}"
