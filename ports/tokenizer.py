"""
Port: Tokenizer
Odpowiedzialność: zamiana jednej linii tekstu na leniwy strumień tokenów.
"""
from typing import Iterator, Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def peek(self) -> Token:
        """
        Returns the current token without consuming it.
        Calling peek() repeatedly returns the same token.
        """
        ...

    def get(self) -> Token:
        """
        Returns the current token and advances to the next one.
        After END has been returned, get() keeps returning END.
        Raises LexicalError when the next token cannot be scanned.
        """
        ...

    def __iter__(self) -> Iterator[Token]:
        """Yields the remaining tokens up to and including END."""
        ...
