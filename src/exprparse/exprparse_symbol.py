"""Terminal symbols and the character classifier for arithmetic expressions."""

from enum import Enum, auto
from typing import Dict


class ExprSymbol(Enum):
    """Terminal symbol categories a single input character can fall into."""
    PLUS = auto()
    MINUS = auto()
    EXPO = auto()
    MULT = auto()
    DIV = auto()
    OPENING_SCOPE = auto()
    CLOSING_SCOPE = auto()
    WHITESPACE = auto()
    TAB = auto()
    ZERO = auto()
    NONZERO_DIGIT = auto()
    END_OF_STRING = auto()
    INVALID = auto()


_CHAR_SYMBOLS: Dict[str, ExprSymbol] = {
    '+': ExprSymbol.PLUS,
    '-': ExprSymbol.MINUS,
    '^': ExprSymbol.EXPO,
    '*': ExprSymbol.MULT,
    '/': ExprSymbol.DIV,
    '(': ExprSymbol.OPENING_SCOPE,
    ')': ExprSymbol.CLOSING_SCOPE,
    ' ': ExprSymbol.WHITESPACE,
    '\t': ExprSymbol.TAB,
    '0': ExprSymbol.ZERO,
    '\0': ExprSymbol.END_OF_STRING,
}

for _digit in "123456789":
    _CHAR_SYMBOLS[_digit] = ExprSymbol.NONZERO_DIGIT

_SYMBOL_STRINGS: Dict[ExprSymbol, str] = {
    ExprSymbol.PLUS: "+",
    ExprSymbol.MINUS: "-",
    ExprSymbol.EXPO: "^",
    ExprSymbol.MULT: "*",
    ExprSymbol.DIV: "/",
    ExprSymbol.WHITESPACE: " ",
    ExprSymbol.ZERO: "0",
}

# Binary operators in the order the grammar tries them.
OPERATOR_SYMBOLS = (
    ExprSymbol.PLUS,
    ExprSymbol.MINUS,
    ExprSymbol.EXPO,
    ExprSymbol.MULT,
    ExprSymbol.DIV,
)

BLANK_SYMBOLS = frozenset({ExprSymbol.WHITESPACE, ExprSymbol.TAB})


def classify_char(ch: str) -> ExprSymbol:
    """
    Classify a single character as a terminal symbol.

    Args:
        ch: The character to classify

    Returns:
        The matching terminal symbol, or INVALID if the character is not part of the language
    """
    return _CHAR_SYMBOLS.get(ch, ExprSymbol.INVALID)


def symbol_str(symbol: ExprSymbol) -> str:
    """
    Get the textual glyph for a terminal symbol.

    Only operators, whitespace and zero have a glyph; anything else is shown as "X".

    Args:
        symbol: The terminal symbol to display

    Returns:
        The single character representation of the symbol
    """
    return _SYMBOL_STRINGS.get(symbol, "X")
