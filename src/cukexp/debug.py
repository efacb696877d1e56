"""Token dumps for --format text/json."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cukexp.tokens import Token, TokenType

_SENTINELS = (TokenType.START_OF_LINE, TokenType.END_OF_LINE)


def visible_tokens(tokens: list[Token], sentinels: bool = True) -> list[Token]:
    """Return tokens, optionally without the START_OF_LINE/END_OF_LINE markers."""
    if sentinels:
        return list(tokens)
    return [t for t in tokens if t.type not in _SENTINELS]


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line to *file*."""
    for t in tokens:
        file.write(f"  {t}\n")


def tokens_to_json(tokens: list[Token]) -> list[dict[str, Any]]:
    """Return a JSON-serializable list of token records."""
    return [
        {"type": t.type.name, "text": t.text, "start": t.start, "end": t.end}
        for t in tokens
    ]
