"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

# Reserved characters (fixed, not configurable)
ESCAPE_CHARACTER = "\\"
ALTERNATION_CHARACTER = "/"
BEGIN_PARAMETER_CHARACTER = "{"
END_PARAMETER_CHARACTER = "}"
BEGIN_OPTIONAL_CHARACTER = "("
END_OPTIONAL_CHARACTER = ")"


class TokenType(Enum):
    # Sentinels (always empty)
    START_OF_LINE = auto()
    END_OF_LINE = auto()

    # Runs (merge with neighbours of the same type)
    WHITE_SPACE = auto()
    TEXT = auto()

    # Structural (single-character, never merged)
    BEGIN_OPTIONAL = auto()  # (
    END_OPTIONAL = auto()  # )
    BEGIN_PARAMETER = auto()  # {
    END_PARAMETER = auto()  # }
    ALTERNATION = auto()  # /

    @property
    def symbol(self) -> str | None:
        """The reserved character of a structural type, else None."""
        return _SYMBOLS.get(self)

    @property
    def purpose(self) -> str | None:
        """What a structural type is used for, for error messages."""
        return _PURPOSES.get(self)


_SYMBOLS = {
    TokenType.BEGIN_OPTIONAL: BEGIN_OPTIONAL_CHARACTER,
    TokenType.END_OPTIONAL: END_OPTIONAL_CHARACTER,
    TokenType.BEGIN_PARAMETER: BEGIN_PARAMETER_CHARACTER,
    TokenType.END_PARAMETER: END_PARAMETER_CHARACTER,
    TokenType.ALTERNATION: ALTERNATION_CHARACTER,
}

_PURPOSES = {
    TokenType.BEGIN_OPTIONAL: "optional text",
    TokenType.END_OPTIONAL: "optional text",
    TokenType.BEGIN_PARAMETER: "a parameter",
    TokenType.END_PARAMETER: "a parameter",
    TokenType.ALTERNATION: "alternation",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single token: its text and codepoint offsets into the original expression.

    ``end`` counts escape characters consumed while producing ``text``, so
    ``end - start`` can exceed ``len(text)`` for TEXT tokens.
    """

    text: str
    type: TokenType
    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.type.name}({self.text!r})@{self.start}..{self.end}"


_STRUCTURAL = {symbol: tt for tt, symbol in _SYMBOLS.items()}

_ESCAPABLE = frozenset(_STRUCTURAL) | {ESCAPE_CHARACTER}

# Only these two types may span more than one codepoint
_RUN_TYPES = frozenset({TokenType.WHITE_SPACE, TokenType.TEXT})


def is_whitespace(ch: str) -> bool:
    """Return True if ch is a Unicode whitespace codepoint."""
    return ch.isspace()


def is_escapable(ch: str) -> bool:
    """Return True if ch may follow the escape character."""
    return is_whitespace(ch) or ch in _ESCAPABLE


def token_type_of(ch: str, treat_as_text: bool = False) -> TokenType:
    """Classify a single codepoint.

    With ``treat_as_text`` the caller must already have checked
    :func:`is_escapable`; the codepoint is then always TEXT.
    """
    if treat_as_text:
        return TokenType.TEXT
    if is_whitespace(ch):
        return TokenType.WHITE_SPACE
    return _STRUCTURAL.get(ch, TokenType.TEXT)


def should_flush(previous: TokenType, current: TokenType) -> bool:
    """Return True if the buffer of ``previous`` must be emitted before ``current``.

    Only WHITE_SPACE after WHITE_SPACE and TEXT after TEXT merge.
    """
    if previous is TokenType.START_OF_LINE:
        return False
    return current is not previous or current not in _RUN_TYPES
