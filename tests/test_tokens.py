"""Test the token data model and the classification helpers."""

import dataclasses

import pytest

from cukexp.tokens import (
    Token,
    TokenType,
    is_escapable,
    is_whitespace,
    should_flush,
    token_type_of,
)

T = TokenType


class TestTokenType:
    @pytest.mark.parametrize(
        "tt, symbol",
        [
            (T.BEGIN_OPTIONAL, "("),
            (T.END_OPTIONAL, ")"),
            (T.BEGIN_PARAMETER, "{"),
            (T.END_PARAMETER, "}"),
            (T.ALTERNATION, "/"),
        ],
    )
    def test_structural_symbols(self, tt, symbol):
        assert tt.symbol == symbol

    def test_purposes(self):
        assert T.BEGIN_OPTIONAL.purpose == "optional text"
        assert T.END_PARAMETER.purpose == "a parameter"
        assert T.ALTERNATION.purpose == "alternation"

    @pytest.mark.parametrize("tt", [T.START_OF_LINE, T.END_OF_LINE, T.WHITE_SPACE, T.TEXT])
    def test_non_structural_have_no_symbol(self, tt):
        assert tt.symbol is None
        assert tt.purpose is None


class TestToken:
    def test_immutable(self):
        token = Token("a", T.TEXT, 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "b"  # type: ignore[misc]

    def test_str(self):
        assert str(Token("{", T.BEGIN_PARAMETER, 3, 4)) == "BEGIN_PARAMETER('{')@3..4"


class TestClassification:
    @pytest.mark.parametrize("ch", [" ", "\t", "\n", "\r", "\u00a0", "\u3000"])
    def test_whitespace(self, ch):
        assert is_whitespace(ch)
        assert token_type_of(ch) is T.WHITE_SPACE

    def test_structural(self):
        assert token_type_of("/") is T.ALTERNATION
        assert token_type_of("{") is T.BEGIN_PARAMETER
        assert token_type_of("}") is T.END_PARAMETER
        assert token_type_of("(") is T.BEGIN_OPTIONAL
        assert token_type_of(")") is T.END_OPTIONAL

    @pytest.mark.parametrize("ch", ["a", "Z", "1", ".", "[", "\\", "é"])
    def test_other_is_text(self, ch):
        assert token_type_of(ch) is T.TEXT

    def test_treat_as_text(self):
        assert token_type_of("(", treat_as_text=True) is T.TEXT
        assert token_type_of(" ", treat_as_text=True) is T.TEXT

    @pytest.mark.parametrize("ch", ["\\", "/", "{", "}", "(", ")", " ", "\t"])
    def test_escapable(self, ch):
        assert is_escapable(ch)

    @pytest.mark.parametrize("ch", ["a", "[", "]", "n", "\"", "^"])
    def test_not_escapable(self, ch):
        assert not is_escapable(ch)


class TestShouldFlush:
    def test_after_start_of_line_never_flushes(self):
        for tt in T:
            assert not should_flush(T.START_OF_LINE, tt)

    def test_text_runs_merge(self):
        assert not should_flush(T.TEXT, T.TEXT)

    def test_whitespace_runs_merge(self):
        assert not should_flush(T.WHITE_SPACE, T.WHITE_SPACE)

    def test_type_change_flushes(self):
        assert should_flush(T.TEXT, T.WHITE_SPACE)
        assert should_flush(T.WHITE_SPACE, T.TEXT)
        assert should_flush(T.TEXT, T.BEGIN_PARAMETER)
        assert should_flush(T.END_OPTIONAL, T.TEXT)

    @pytest.mark.parametrize(
        "tt", [T.ALTERNATION, T.BEGIN_PARAMETER, T.END_PARAMETER, T.BEGIN_OPTIONAL, T.END_OPTIONAL]
    )
    def test_delimiters_never_merge(self, tt):
        assert should_flush(tt, tt)
