from __future__ import annotations

import pytest

from adapters.tokenizer.scanner import Tokenizer
from contracts import LexicalError, TokenKind


def _kinds(text: str) -> list[TokenKind]:
    return [t.kind for t in Tokenizer(text)]


def test_tokenizer_scans_all_token_kinds_with_offsets():
    tokens = list(Tokenizer("rate_2 = (1.5 + x) * 3 / -y"))

    assert [t.kind for t in tokens] == [
        TokenKind.IDENTIFIER, TokenKind.ASSIGN, TokenKind.LPAREN, TokenKind.NUMBER,
        TokenKind.PLUS, TokenKind.IDENTIFIER, TokenKind.RPAREN, TokenKind.MUL,
        TokenKind.NUMBER, TokenKind.DIV, TokenKind.MINUS, TokenKind.IDENTIFIER,
        TokenKind.END,
    ]
    assert tokens[0].text == "rate_2"
    assert tokens[3].value == 1.5
    assert [t.offset for t in tokens] == [0, 7, 9, 10, 14, 16, 17, 19, 21, 23, 25, 26, 27]


def test_peek_does_not_consume_and_get_advances():
    tokenizer = Tokenizer("2 + 3")

    assert tokenizer.peek() is tokenizer.peek()
    first = tokenizer.get()
    after = tokenizer.peek()

    assert first.kind == TokenKind.NUMBER
    assert after.kind == TokenKind.PLUS
    assert after.offset != first.offset


def test_get_keeps_returning_end_after_exhaustion():
    tokenizer = Tokenizer("  ")

    assert tokenizer.get().kind == TokenKind.END
    assert tokenizer.get().kind == TokenKind.END
    assert tokenizer.peek().offset == 2


def test_number_forms():
    tokens = list(Tokenizer("42 .5 7. 003"))

    assert [t.value for t in tokens[:-1]] == [42.0, 0.5, 7.0, 3.0]
    assert tokens[1].text == ".5"


def test_second_dot_truncates_number_literal():
    tokens = list(Tokenizer("1.2.3"))

    assert [t.kind for t in tokens] == [TokenKind.NUMBER, TokenKind.NUMBER, TokenKind.END]
    assert tokens[0].value == 1.2
    assert tokens[1].value == 0.3
    assert tokens[1].offset == 3


def test_lone_dot_is_lexical_error():
    with pytest.raises(LexicalError) as exc_info:
        list(Tokenizer("1 + ."))

    assert exc_info.value.offset == 4


def test_unknown_character_reports_character_and_offset():
    tokenizer = Tokenizer("2 $ 3")
    assert tokenizer.peek().value == 2.0

    # błąd pojawia się przy przesuwaniu podglądu za "2"
    with pytest.raises(LexicalError) as exc_info:
        tokenizer.get()

    assert exc_info.value.character == "$"
    assert exc_info.value.offset == 2
    assert "'$'" in str(exc_info.value)


def test_unknown_first_character_fails_at_construction():
    with pytest.raises(LexicalError):
        Tokenizer("#")


def test_non_ascii_letters_are_rejected():
    with pytest.raises(LexicalError) as exc_info:
        list(Tokenizer("x + ż"))

    assert exc_info.value.offset == 4


def test_identifiers_are_case_sensitive_and_may_contain_digits():
    assert [t.text for t in Tokenizer("Ab a_1 _x")][:3] == ["Ab", "a_1", "_x"]


def test_empty_input_yields_only_end():
    assert _kinds("") == [TokenKind.END]
