"""
Port: StatementParser
Odpowiedzialność: budowa ExprAST z tokenów i obsługa przypisań.
"""
from typing import Optional, Protocol, runtime_checkable

from contracts import ExprAST
from ports.variable_store import VariableStore


@runtime_checkable
class StatementParser(Protocol):
    @property
    def store(self) -> VariableStore:
        """The Variable Store mutated by assignments, handed back to the caller."""
        ...

    def parse_statement(self) -> Optional[ExprAST]:
        """
        Parses one statement from the underlying tokenizer.

        Assignment (`name = expr`): the right-hand side is optimized,
        evaluated and stored under `name`; the folded tree is returned.
        Expression: the expression tree is returned.

        Returns None when the input holds no statement (END first).
        Raises ExpressionSyntaxError on grammar mismatch, LexicalError on
        bad characters; evaluation errors of an assignment propagate and
        leave the store untouched.
        """
        ...
