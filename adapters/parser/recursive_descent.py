"""
Adapter: RecursiveDescentParser
Implementuje port StatementParser — jedna procedura na regułę gramatyki:

  statement  = IDENTIFIER '=' expression | expression
  expression = term (('+'|'-') term)*
  term       = factor (('*'|'/') factor)*
  factor     = NUMBER | IDENTIFIER | '(' expression ')' | ('-'|'+') factor

Operatory binarne wiążą lewostronnie, unarne prawostronnie ("--x" == "-(-x)").

Przypisanie: IDENTIFIER na początku jest konsumowany na próbę. Jeśli dalej
jest '=', prawa strona jest optymalizowana, obliczana i zapisywana w
VariableStore. W przeciwnym razie identyfikator staje się VariableNode,
a parsowanie kontynuuje ogony term/expression wokół niego.
"""
from __future__ import annotations

import logging
from typing import Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.variable_store.in_memory_store import InMemoryVariableStore
from contracts import (
    BinOpNode,
    ExprAST,
    ExpressionSyntaxError,
    NumberNode,
    Token,
    TokenKind,
    UnaryOpNode,
    VariableNode,
)
from ports.evaluator import Evaluator
from ports.tokenizer import Tokenizer
from ports.variable_store import VariableStore

logger = logging.getLogger("exprcalc.parser")

_ADDITIVE = {TokenKind.PLUS: "+", TokenKind.MINUS: "-"}
_MULTIPLICATIVE = {TokenKind.MUL: "*", TokenKind.DIV: "/"}
_FACTOR_EXPECTED = "NUMBER, IDENTIFIER, '(' or unary operator"

# Limit zagnieżdżenia nawiasów i operatorów unarnych w jednej instrukcji
MAX_NESTING_DEPTH = 200


class RecursiveDescentParser:
    def __init__(
        self,
        tokenizer: Tokenizer,
        store: VariableStore | None = None,
        evaluator: Evaluator | None = None,
    ) -> None:
        self._tokens = tokenizer
        self._store = store if store is not None else InMemoryVariableStore()
        self._evaluator = evaluator or ASTEvaluator()
        self.last_assignment: tuple[str, float] | None = None
        self._depth = 0

    @property
    def store(self) -> VariableStore:
        return self._store

    # -- StatementParser protocol -------------------------------------------

    def parse_statement(self) -> Optional[ExprAST]:
        self.last_assignment = None
        self._depth = 0
        first = self._tokens.peek()
        if first.kind == TokenKind.END:
            return None

        if first.kind != TokenKind.IDENTIFIER:
            node = self._expression()
            self.consume(TokenKind.END)
            return node

        self._tokens.get()
        if self._tokens.peek().kind == TokenKind.ASSIGN:
            return self._assignment(first.text)

        node: ExprAST = VariableNode(name=first.text)
        node = self._term_tail(node)
        node = self._expression_tail(node)
        self.consume(TokenKind.END)
        return self._evaluator.optimize(node)

    def consume(self, expected: TokenKind) -> Token:
        token = self._tokens.peek()
        if token.kind != expected:
            raise ExpressionSyntaxError(token.offset, token.describe(), expected.value)
        return self._tokens.get()

    # -- Prywatne ----------------------------------------------------------

    def _assignment(self, name: str) -> ExprAST:
        self.consume(TokenKind.ASSIGN)
        rhs = self._expression()
        self.consume(TokenKind.END)
        folded = self._evaluator.optimize(rhs)
        value = self._evaluator.evaluate(folded, self._store)
        # Zapis dopiero po udanym obliczeniu
        self._store.set(name, value)
        self.last_assignment = (name, value)
        logger.debug("Assigned %s = %r", name, value)
        return folded

    def _expression(self) -> ExprAST:
        return self._expression_tail(self._term())

    def _expression_tail(self, left: ExprAST) -> ExprAST:
        while self._tokens.peek().kind in _ADDITIVE:
            op = _ADDITIVE[self._tokens.get().kind]
            right = self._term()
            left = BinOpNode(op=op, left=left, right=right)
        return left

    def _term(self) -> ExprAST:
        return self._term_tail(self._factor())

    def _term_tail(self, left: ExprAST) -> ExprAST:
        while self._tokens.peek().kind in _MULTIPLICATIVE:
            op = _MULTIPLICATIVE[self._tokens.get().kind]
            right = self._factor()
            left = BinOpNode(op=op, left=left, right=right)
        return left

    def _factor(self) -> ExprAST:
        token = self._tokens.peek()
        if token.kind == TokenKind.NUMBER:
            self._tokens.get()
            return NumberNode(value=token.value)
        if token.kind == TokenKind.IDENTIFIER:
            self._tokens.get()
            return VariableNode(name=token.text)
        if token.kind == TokenKind.LPAREN or token.kind in _ADDITIVE:
            return self._nested_factor(token)
        raise ExpressionSyntaxError(token.offset, token.describe(), _FACTOR_EXPECTED)

    def _nested_factor(self, token: Token) -> ExprAST:
        """'(' expression ')' lub operator unarny — jeden poziom zagnieżdżenia."""
        if self._depth >= MAX_NESTING_DEPTH:
            raise ExpressionSyntaxError(
                token.offset,
                token.describe(),
                f"at most {MAX_NESTING_DEPTH} nested parentheses or unary operators",
            )
        self._tokens.get()
        self._depth += 1
        try:
            if token.kind == TokenKind.LPAREN:
                node = self._expression()
                self.consume(TokenKind.RPAREN)
                return node
            operand = self._factor()
            return UnaryOpNode(op=_ADDITIVE[token.kind], operand=operand)
        finally:
            self._depth -= 1
