"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście ExprAST na float.

evaluate() — oblicza wartość względem VariableStore (nigdy go nie modyfikuje)
optimize() — constant-folding: Unary(Num) → Num, BinOp(Num, Num) → Num
render()   — tekstowe drzewo, patrz _printer.py
"""
from __future__ import annotations

from typing import Callable

from adapters.evaluator._printer import format_tree
from contracts import (
    BinOpNode,
    DivisionByZeroError,
    ExprAST,
    NumberNode,
    UnaryOpNode,
    VariableNode,
)
from ports.variable_store import VariableStore


def _safe_div(a: float, b: float) -> float:
    if b == 0.0:
        raise DivisionByZeroError()
    return a / b


# Mapowanie symboli operatorów na operacje float
_BINARY_OPS: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _safe_div,
}

_UNARY_OPS: dict[str, Callable[[float], float]] = {
    "+": lambda a: a,
    "-": lambda a: -a,
}


class ASTEvaluator:
    """Ewaluator i optymalizator wyrażeń arytmetycznych oparty na AST."""

    # -- Evaluator protocol ------------------------------------------------

    def evaluate(self, ast: ExprAST, store: VariableStore) -> float:
        if isinstance(ast, NumberNode):
            return ast.value

        if isinstance(ast, VariableNode):
            return store.get(ast.name)

        if isinstance(ast, UnaryOpNode):
            return _apply_unary(ast.op, self.evaluate(ast.operand, store))

        if isinstance(ast, BinOpNode):
            left = self.evaluate(ast.left, store)
            right = self.evaluate(ast.right, store)
            return _apply_binary(ast.op, left, right)

        raise TypeError(f"Unknown AST node type: {type(ast)}")

    def optimize(self, ast: ExprAST) -> ExprAST:
        """
        Constant-folding od liści w górę, jedno przejście.
        Zwraca nowe drzewo; zmienne nigdy nie są zwijane.
        """
        if isinstance(ast, NumberNode):
            return NumberNode(value=ast.value)

        if isinstance(ast, VariableNode):
            return VariableNode(name=ast.name)

        if isinstance(ast, UnaryOpNode):
            operand = self.optimize(ast.operand)
            if isinstance(operand, NumberNode):
                return NumberNode(value=_apply_unary(ast.op, operand.value))
            return UnaryOpNode(op=ast.op, operand=operand)

        if isinstance(ast, BinOpNode):
            left = self.optimize(ast.left)
            right = self.optimize(ast.right)
            if isinstance(left, NumberNode) and isinstance(right, NumberNode):
                # x / 0 na literałach zgłaszane już tutaj
                return NumberNode(value=_apply_binary(ast.op, left.value, right.value))
            return BinOpNode(op=ast.op, left=left, right=right)

        raise TypeError(f"Unknown AST node type: {type(ast)}")

    def render(self, ast: ExprAST, indent: int = 0) -> str:
        return format_tree(ast, indent)


def _apply_unary(op: str, value: float) -> float:
    fn = _UNARY_OPS.get(op)
    if fn is None:
        raise ValueError(f"Unknown unary operator: {op!r}")
    return fn(value)


def _apply_binary(op: str, left: float, right: float) -> float:
    fn = _BINARY_OPS.get(op)
    if fn is None:
        raise ValueError(f"Unknown binary operator: {op!r}")
    return fn(left, right)
