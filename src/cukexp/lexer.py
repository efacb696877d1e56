"""Cucumber Expression lexer — converts an expression into a flat token stream."""

from __future__ import annotations

from collections.abc import Iterator

from cukexp.errors import CannotEscape, UnescapableEndOfLine
from cukexp.tokens import (
    ESCAPE_CHARACTER,
    Token,
    TokenType,
    is_escapable,
    should_flush,
    token_type_of,
)


class Scanner:
    """Single-pass iterator producing one Token per step.

    The stream always starts with an empty START_OF_LINE token and ends with an
    empty END_OF_LINE token. Offsets are codepoint offsets into the original
    expression, escape characters included.
    """

    def __init__(self, expression: str) -> None:
        self._expression = expression
        self._codepoints = iter(expression)
        self._buffer: list[str] = []
        self._previous_type: TokenType | None = None
        self._current_type: TokenType | None = TokenType.START_OF_LINE
        self._treat_as_text = False
        self._index = 0
        self._escaped = 0

    def __iter__(self) -> Scanner:
        return self

    def __next__(self) -> Token:
        if self._previous_type is TokenType.END_OF_LINE:
            raise StopIteration

        if self._current_type is TokenType.START_OF_LINE:
            token = self._flush(TokenType.START_OF_LINE)
            self._advance_types()
            return token

        for ch in self._codepoints:
            if not self._treat_as_text and ch == ESCAPE_CHARACTER:
                self._escaped += 1
                self._treat_as_text = True
                continue

            self._current_type = self._classify(ch)
            self._treat_as_text = False

            if should_flush(self._previous_type, self._current_type):
                token = self._flush(self._previous_type)
                self._advance_types()
                self._buffer.append(ch)
                return token

            self._advance_types()
            self._buffer.append(ch)

        if self._buffer:
            token = self._flush(self._previous_type)
            self._advance_types()
            return token

        self._current_type = TokenType.END_OF_LINE
        if self._treat_as_text:
            raise UnescapableEndOfLine(self._expression)
        token = self._flush(TokenType.END_OF_LINE)
        self._advance_types()
        return token

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _classify(self, ch: str) -> TokenType:
        if self._treat_as_text and not is_escapable(ch):
            raise CannotEscape(self._expression, self._index + self._escaped, ch)
        return token_type_of(ch, self._treat_as_text)

    def _advance_types(self) -> None:
        self._previous_type = self._current_type
        self._current_type = None

    def _flush(self, tt: TokenType) -> Token:
        """Turn the buffer into a token of type tt and start a new buffer."""
        escaped = 0
        if tt is TokenType.TEXT:
            escaped = self._escaped
            self._escaped = 0
        end = self._index + len(self._buffer) + escaped
        token = Token("".join(self._buffer), tt, self._index, end)
        self._buffer = []
        self._index = end
        return token


def iter_tokens(expression: str) -> Iterator[Token]:
    """Lazily tokenize expression; each call returns a fresh, independent stream."""
    return Scanner(expression)


def tokenize(expression: str) -> list[Token]:
    """Convenience function: tokenize an expression and return the token list."""
    return list(Scanner(expression))
