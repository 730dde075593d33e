"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w exprcalc.
Wszystkie moduły importują WYŁĄCZNIE stąd: tokeny, węzły AST, wynik
instrukcji oraz hierarchia błędów kalkulatora.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Tokenizer ───────────────────────────────────

class TokenKind(str, Enum):
    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"
    PLUS = "PLUS"
    MINUS = "MINUS"
    MUL = "MUL"
    DIV = "DIV"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    ASSIGN = "ASSIGN"
    END = "END"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    value: float = 0.0   # tylko dla NUMBER
    text: str = ""       # nazwa dla IDENTIFIER, znak operatora, wycinek liczby
    offset: int          # bajt, od którego zaczyna się token

    def describe(self) -> str:
        if self.kind == TokenKind.END:
            return "end of input"
        return f"{self.kind.value} {self.text!r}"


# ─────────────────────────── AST ─────────────────────────────────────────

class NumberNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["number"] = "number"
    value: float


class VariableNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["variable"] = "variable"
    name: str


class UnaryOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["unary"] = "unary"
    op: Literal["+", "-"]
    operand: "ExprAST"


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/"]
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Union[NumberNode, VariableNode, UnaryOpNode, BinOpNode]
UnaryOpNode.model_rebuild()
BinOpNode.model_rebuild()


# ─────────────────────────── Session ─────────────────────────────────────

ErrorKind = Literal["lexical", "syntax", "undefined_variable", "division_by_zero"]


class CalcErrorInfo(BaseModel):
    kind: ErrorKind
    message: str
    offset: Optional[int] = None
    character: Optional[str] = None
    name: Optional[str] = None


class StatementOutcome(BaseModel):
    source: str
    kind: Literal["empty", "expression", "assignment", "error"]
    target: Optional[str] = None          # nazwa przypisanej zmiennej
    # Drzewo z parse_statement; przypisania i wyrażenia zaczynające się
    # od identyfikatora parser zwraca już zwinięte
    ast: Optional[ExprAST] = None
    optimized_ast: Optional[ExprAST] = None
    value: Optional[float] = None
    error: Optional[CalcErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ─────────────────────────── Błędy ───────────────────────────────────────

class CalcError(Exception):
    """Wspólna baza błędów, które kończą pojedynczą instrukcję."""

    kind: ErrorKind

    def to_info(self) -> CalcErrorInfo:
        return CalcErrorInfo(kind=self.kind, message=str(self))


class LexicalError(CalcError):
    kind: ErrorKind = "lexical"

    def __init__(self, character: str, offset: int, reason: str = "Unknown character") -> None:
        self.character = character
        self.offset = offset
        super().__init__(f"{reason} {character!r} at offset {offset}")

    def to_info(self) -> CalcErrorInfo:
        return CalcErrorInfo(
            kind=self.kind,
            message=str(self),
            offset=self.offset,
            character=self.character,
        )


class ExpressionSyntaxError(CalcError):
    kind: ErrorKind = "syntax"

    def __init__(self, offset: int, found: str, expected: str) -> None:
        self.offset = offset
        self.found = found
        self.expected = expected
        super().__init__(
            f"Unexpected token at offset {offset}: expected {expected}, got {found}"
        )

    def to_info(self) -> CalcErrorInfo:
        return CalcErrorInfo(kind=self.kind, message=str(self), offset=self.offset)


class UndefinedVariableError(CalcError, LookupError):
    kind: ErrorKind = "undefined_variable"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined variable: {name!r}")

    def to_info(self) -> CalcErrorInfo:
        return CalcErrorInfo(kind=self.kind, message=str(self), name=self.name)


class DivisionByZeroError(CalcError, ZeroDivisionError):
    kind: ErrorKind = "division_by_zero"

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)
