"""Error types with formatted expression context."""

from __future__ import annotations


class ExpressionError(Exception):
    """Raised on the first tokenizing error, with offset and expression context."""

    problem = "This Cucumber Expression is invalid"
    solution = ""

    def __init__(self, expression: str, index: int) -> None:
        self.expression = expression
        self.index = index
        self.message = self.problem
        super().__init__(self.format())

    @property
    def column(self) -> int:
        """1-based column of the problem."""
        return self.index + 1

    def format(self) -> str:
        pointer = " " * self.index + "^"
        return (
            f"This Cucumber Expression has a problem at column {self.column}:\n"
            f"\n"
            f"{self.expression}\n"
            f"{pointer}\n"
            f"{self.problem}.\n"
            f"{self.solution}"
        )


class CannotEscape(ExpressionError):
    """An escape character precedes a codepoint that cannot be escaped."""

    problem = "Only the characters '{', '}', '(', ')', '\\', '/' and whitespace can be escaped"
    solution = "If you did mean to use an '\\' you can use '\\\\' to escape it"

    def __init__(self, expression: str, index: int, character: str) -> None:
        self.character = character
        super().__init__(expression, index)
        self.message = f"cannot escape {character!r}: {self.problem}"


class UnescapableEndOfLine(ExpressionError):
    """The expression ends with an unconsumed escape character."""

    problem = "The end of line can not be escaped"
    solution = "You can use '\\\\' to escape the '\\'"

    def __init__(self, expression: str) -> None:
        # Points at the trailing escape character
        super().__init__(expression, len(expression) - 1)
