"""
Adapter: Tokenizer (scanner)
Implementuje port Tokenizer — skanuje jedną linię znak po znaku.

Reguły (w kolejności, po pominięciu białych znaków ASCII):
  1. koniec wejścia            → END
  2. cyfra lub '.'             → NUMBER (cyfry + co najwyżej jedna kropka)
  3. litera lub '_'            → IDENTIFIER (litery, cyfry, '_')
  4. + - * / ( ) =             → odpowiedni rodzaj tokenu
  5. cokolwiek innego          → LexicalError

Druga kropka kończy liczbę i zostaje na wejściu: "1.2.3" daje NUMBER 1.2,
a potem NUMBER 0.3. Błąd zgłasza dopiero parser.

Akceptowane są wyłącznie znaki ASCII, więc offset znaku = offset bajtu.
"""
from __future__ import annotations

import string
from typing import Iterator

from contracts import LexicalError, Token, TokenKind

_WHITESPACE = frozenset(" \t\n\r\f\v")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_BODY = _IDENT_START | _DIGITS

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.ASSIGN,
}


class Tokenizer:
    """Leniwy skaner z jednym tokenem podglądu."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._current = self._scan()

    # -- Tokenizer protocol ------------------------------------------------

    def peek(self) -> Token:
        return self._current

    def get(self) -> Token:
        token = self._current
        if token.kind != TokenKind.END:
            self._current = self._scan()
        return token

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.get()
            yield token
            if token.kind == TokenKind.END:
                return

    # -- Prywatne ----------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos] in _WHITESPACE:
            self._pos += 1

    def _scan(self) -> Token:
        self._skip_whitespace()
        start = self._pos
        if start >= len(self._text):
            return Token(kind=TokenKind.END, offset=start)

        ch = self._text[start]
        if ch in _DIGITS or ch == ".":
            return self._scan_number(start)
        if ch in _IDENT_START:
            return self._scan_identifier(start)

        kind = _SINGLE_CHAR.get(ch)
        if kind is None:
            raise LexicalError(ch, start)
        self._pos += 1
        return Token(kind=kind, text=ch, offset=start)

    def _scan_number(self, start: int) -> Token:
        dot_seen = False
        while self._pos < len(self._text):
            c = self._text[self._pos]
            if c in _DIGITS:
                self._pos += 1
            elif c == "." and not dot_seen:
                dot_seen = True
                self._pos += 1
            else:
                break
        literal = self._text[start:self._pos]
        try:
            value = float(literal)
        except ValueError:
            # Sama kropka nie jest liczbą
            raise LexicalError(literal, start, reason="Malformed number") from None
        return Token(kind=TokenKind.NUMBER, value=value, text=literal, offset=start)

    def _scan_identifier(self, start: int) -> Token:
        self._pos += 1
        while self._pos < len(self._text) and self._text[self._pos] in _IDENT_BODY:
            self._pos += 1
        name = self._text[start:self._pos]
        return Token(kind=TokenKind.IDENTIFIER, text=name, offset=start)
