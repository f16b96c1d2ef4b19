"""Forward-only read cursor over an expression string."""

from exprparse.exprparse_symbol import BLANK_SYMBOLS, ExprSymbol, classify_char


class ExprCursor:
    """
    A single read position over an immutable input string.

    The position only ever moves forward, one character at a time, and never
    goes past the end of the input.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._position = 0

    def reset(self, text: str) -> None:
        """
        Start reading a new input from its first character.

        Args:
            text: The new input string
        """
        self._text = text
        self._position = 0

    @property
    def text(self) -> str:
        """The input being read."""
        return self._text

    @property
    def position(self) -> int:
        """Column of the next unread character."""
        return self._position

    def end_input(self) -> bool:
        """Check whether every character of the input has been consumed."""
        return self._position == len(self._text)

    def current_symbol(self) -> ExprSymbol:
        """
        Classify the character under the cursor.

        Returns:
            The terminal symbol for the current character, or END_OF_STRING at the end of input
        """
        if self.end_input():
            return ExprSymbol.END_OF_STRING

        return classify_char(self._text[self._position])

    def peek(self, symbol: ExprSymbol) -> bool:
        """
        Check whether the current character matches a terminal symbol without consuming it.

        Args:
            symbol: The terminal symbol to look for

        Returns:
            True if the current character classifies as symbol
        """
        return not self.end_input() and classify_char(self._text[self._position]) == symbol

    def next_symbol(self) -> None:
        """Consume the current character."""
        if not self.end_input():
            self._position += 1

    def accept(self, symbol: ExprSymbol) -> bool:
        """
        Consume the current character if it matches a terminal symbol.

        Args:
            symbol: The terminal symbol to match

        Returns:
            True if the character matched and was consumed
        """
        if self.peek(symbol):
            self.next_symbol()
            return True

        return False

    def expect(self, symbol: ExprSymbol) -> bool:
        """
        Skip any blanks, then try to accept a terminal symbol.

        Args:
            symbol: The terminal symbol expected next

        Returns:
            True if the symbol was found and consumed
        """
        self.skip_ws()
        return self.accept(symbol)

    def skip_ws(self) -> None:
        """Skip spaces and tabs up to the next non-blank character or the end of input."""
        while not self.end_input() and classify_char(self._text[self._position]) in BLANK_SYMBOLS:
            self.next_symbol()

    def substring(self, start: int) -> str:
        """
        Get the text consumed since a given column.

        Args:
            start: Column where the text began

        Returns:
            The characters between start and the current position
        """
        return self._text[start:self._position]

    def remaining(self) -> str:
        """Get the unconsumed tail of the input."""
        return self._text[self._position:]
