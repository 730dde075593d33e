"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie, upraszczanie i drukowanie ExprAST.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST
from ports.variable_store import VariableStore


@runtime_checkable
class Evaluator(Protocol):
    def evaluate(self, ast: ExprAST, store: VariableStore) -> float:
        """
        Evaluates an arithmetic AST to a float.
        store: variable bindings for VariableNode resolution; never mutated.
        Raises DivisionByZeroError when a divisor evaluates to exactly zero.
        Raises UndefinedVariableError for unbound variables.
        """
        ...

    def optimize(self, ast: ExprAST) -> ExprAST:
        """
        Constant-folds an AST bottom-up and returns a new tree:
          UnaryOpNode(NumberNode)            → NumberNode
          BinOpNode(NumberNode, NumberNode)  → NumberNode
        Variables are never folded. The input tree is left untouched.
        Raises DivisionByZeroError when folding a literal division by zero.
        """
        ...

    def render(self, ast: ExprAST, indent: int = 0) -> str:
        """
        Renders the tree one node per line, children indented two spaces
        deeper than their parent. For display only.
        """
        ...
