"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from cukexp.lexer import tokenize
from cukexp.tokens import ESCAPE_CHARACTER, Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes an expression without the sentinel tokens."""

    def _lex(expression: str) -> list[Token]:
        tokens = tokenize(expression)
        # Strip START_OF_LINE / END_OF_LINE for convenience
        return tokens[1:-1]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def rebuild(tokens: list[Token]) -> str:
    """Re-insert escape characters and concatenate token texts.

    A TEXT codepoint was escaped in the source when it is not ordinary text
    on its own: whitespace, a reserved character, or the escape character.
    """
    parts = []
    for t in tokens:
        if t.type is not TokenType.TEXT:
            parts.append(t.text)
            continue
        for ch in t.text:
            if ch.isspace() or ch in "\\/{}()":
                parts.append(ESCAPE_CHARACTER)
            parts.append(ch)
    return "".join(parts)
