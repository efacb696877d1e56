"""Cucumber Expression tokenizer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cukexp.tokens import Token

__version__ = "0.1.0"


def tokenize(expression: str) -> list[Token]:
    """Tokenize a Cucumber Expression into START_OF_LINE ... END_OF_LINE tokens."""
    from cukexp.lexer import tokenize as _tokenize

    return _tokenize(expression)
