"""
session.py — CalculatorSession: potok jednej linii dla sterownika (CLI).

  tekst → Tokenizer → RecursiveDescentParser → [optimize] → evaluate

execute() nigdy nie rzuca błędów kalkulatora — są kodowane w
StatementOutcome(kind="error"), więc sterownik sprawdza wynik zamiast
łapać wyjątki. Nieudana instrukcja nie zmienia VariableStore.
"""
from __future__ import annotations

import logging

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.parser.recursive_descent import RecursiveDescentParser
from adapters.tokenizer.scanner import Tokenizer
from adapters.variable_store.in_memory_store import InMemoryVariableStore
from contracts import CalcError, CalcErrorInfo, StatementOutcome
from ports.evaluator import Evaluator
from ports.variable_store import VariableStore

logger = logging.getLogger("exprcalc.session")


class CalculatorSession:
    def __init__(
        self,
        store: VariableStore | None = None,
        evaluator: Evaluator | None = None,
        optimize: bool = True,
    ) -> None:
        self._store = store if store is not None else InMemoryVariableStore()
        self._evaluator = evaluator or ASTEvaluator()
        self.optimize = optimize

    @property
    def store(self) -> VariableStore:
        return self._store

    @property
    def evaluator(self) -> Evaluator:
        return self._evaluator

    def execute(self, line: str) -> StatementOutcome:
        try:
            return self._execute(line)
        except CalcError as exc:
            logger.info("Statement failed: %s | source=%r", exc, line)
            return StatementOutcome(source=line, kind="error", error=exc.to_info())
        except RecursionError:
            # np. bardzo długi łańcuch "1+1+...": drzewo za głębokie do przejścia
            logger.warning("Statement too deeply nested | length=%d", len(line))
            return StatementOutcome(
                source=line,
                kind="error",
                error=CalcErrorInfo(kind="syntax", message="Expression is nested too deeply"),
            )

    def _execute(self, line: str) -> StatementOutcome:
        parser = RecursiveDescentParser(Tokenizer(line), self._store, self._evaluator)
        ast = parser.parse_statement()
        if ast is None:
            return StatementOutcome(source=line, kind="empty")

        optimized = self._evaluator.optimize(ast) if self.optimize else None
        tree = ast if optimized is None else optimized
        value = self._evaluator.evaluate(tree, self._store)

        if parser.last_assignment is not None:
            target, _ = parser.last_assignment
            return StatementOutcome(
                source=line,
                kind="assignment",
                target=target,
                ast=ast,
                optimized_ast=optimized,
                value=value,
            )
        return StatementOutcome(
            source=line,
            kind="expression",
            ast=ast,
            optimized_ast=optimized,
            value=value,
        )
