"""Token types and token representation for arithmetic expressions."""

from dataclasses import dataclass, field
from enum import Enum


class ExprTokenType(Enum):
    """Token types recorded while parsing an expression."""
    OPERATOR = "OPERATOR"
    OPERAND = "OPERAND"
    OPENING_SCOPE = "OPENING_SCOPE"
    CLOSING_SCOPE = "CLOSING_SCOPE"


@dataclass(frozen=True)
class ExprToken:
    """
    A lexical unit recognized by the parser.

    Attributes:
        value: The exact text matched in the input
        type: The kind of lexical unit
        position: Column of the first character of value (not part of equality)
    """
    value: str
    type: ExprTokenType
    position: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"ExprToken({self.value!r}, {self.type.name}, pos={self.position})"
