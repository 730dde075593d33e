#!/usr/bin/env python3
"""
exprcalc.py — CLI kalkulatora wyrażeń.

Działa całkowicie lokalnie; zmienne żyją tylko w pamięci jednej sesji.

Konfiguracja: zmienne środowiskowe z prefiksem EXPRCALC_
lub plik .env (np. EXPRCALC_OPTIMIZE=false).

Podkomendy:
    repl    — interaktywna pętla (domyślna); pusta linia lub EOF kończy sesję
    eval    — oblicz kolejne instrukcje w jednej sesji
    tokens  — pokaż strumień tokenów dla linii

Komendy REPL:
    :vars   — wypisz zmienne sesji

Użycie:
    python exprcalc.py
    python exprcalc.py repl --no-optimize
    python exprcalc.py eval -t "x = 5" -t "y = x * 3" -t "y + 2"
    python exprcalc.py tokens -t "rate = (1 + 2) * 3.5"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator._printer import format_number
from adapters.session import CalculatorSession
from adapters.tokenizer.scanner import Tokenizer
from config import Settings
from contracts import CalcError, StatementOutcome, TokenKind

logger = logging.getLogger("exprcalc.cli")


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _out(text: Any = "", style: str | None = None) -> None:
    _console().print(text, style=style, markup=False)


def _print_vars_table(values: dict[str, float]) -> None:
    table = Table(title=f"Variables [{len(values)}]", box=box.ASCII, show_header=True)
    table.add_column("Name", no_wrap=True, style="bold cyan")
    table.add_column("Value", justify="right")
    for name, value in values.items():
        table.add_row(name, format_number(value))
    _console().print(table)


def _print_outcome(
    session: CalculatorSession,
    outcome: StatementOutcome,
    show_ast: bool,
    show_optimized_ast: bool,
) -> None:
    if outcome.error is not None:
        err = outcome.error
        if err.offset is not None:
            _out(f"  {outcome.source}")
            _out("  " + " " * err.offset + "^", style="red")
        _out(f"Error: {err.message}", style="bold red")
        return

    if outcome.ast is not None and show_ast:
        _out("Parsed AST:")
        _out(session.evaluator.render(outcome.ast, indent=2))
    if outcome.optimized_ast is not None and show_optimized_ast:
        _out("Optimized AST:")
        _out(session.evaluator.render(outcome.optimized_ast, indent=2))

    if outcome.value is None:
        return
    if outcome.kind == "assignment":
        _out(f"{outcome.target} = {format_number(outcome.value)}", style="bold")
    else:
        _out(f"Result: {format_number(outcome.value)}", style="bold")


# -- commands --------------------------------------------------------------

def _repl(args: argparse.Namespace, settings: Settings) -> int:
    session = CalculatorSession(optimize=settings.optimize and not args.no_optimize)
    show_ast = settings.show_ast and not args.no_ast
    show_optimized = settings.show_optimized_ast and not args.no_ast

    while True:
        try:
            line = _console().input(settings.prompt)
        except EOFError:
            _out()
            break
        if not line.strip():
            break
        if line.strip() == ":vars":
            _print_vars_table(session.store.snapshot())
            continue
        outcome = session.execute(line)
        _print_outcome(session, outcome, show_ast, show_optimized)
    return 0


def _eval(args: argparse.Namespace, settings: Settings) -> int:
    session = CalculatorSession(optimize=settings.optimize and not args.no_optimize)
    failed = 0
    for text in args.text:
        outcome = session.execute(text)
        _print_outcome(session, outcome, show_ast=args.ast, show_optimized_ast=args.ast)
        if not outcome.ok:
            failed += 1
    if args.vars:
        _print_vars_table(session.store.snapshot())
    return 1 if failed else 0


def _tokens(args: argparse.Namespace, settings: Settings) -> int:
    table = Table(title="Tokens", box=box.ASCII)
    table.add_column("Offset", justify="right", no_wrap=True)
    table.add_column("Kind", no_wrap=True, style="cyan")
    table.add_column("Text")
    table.add_column("Value", justify="right")
    try:
        for token in Tokenizer(args.text):
            value = format_number(token.value) if token.kind == TokenKind.NUMBER else ""
            table.add_row(str(token.offset), token.kind.value, token.text, value)
    except CalcError as exc:
        _console().print(table)
        _out(f"Error: {exc}", style="bold red")
        return 1
    _console().print(table)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="exprcalc",
        description="exprcalc — kalkulator wyrażeń ze zmiennymi",
    )
    parser.add_argument("--log-level", default=None,
                        help="Nadpisz EXPRCALC_LOG_LEVEL (np. DEBUG)")
    sub = parser.add_subparsers(dest="command")

    # repl
    p = sub.add_parser("repl", help="Interaktywna pętla (domyślna)")
    p.add_argument("--no-optimize", action="store_true",
                   help="Nie zwijaj stałych przed obliczeniem")
    p.add_argument("--no-ast", action="store_true",
                   help="Nie drukuj drzew AST")

    # eval
    p = sub.add_parser("eval", help="Oblicz instrukcje w jednej sesji")
    p.add_argument("--text", "-t", action="append", required=True,
                   help="Instrukcja (można podać wielokrotnie)")
    p.add_argument("--no-optimize", action="store_true")
    p.add_argument("--ast", action="store_true", help="Drukuj drzewa AST")
    p.add_argument("--vars", action="store_true",
                   help="Na końcu wypisz zmienne sesji")

    # tokens
    p = sub.add_parser("tokens", help="Pokaż strumień tokenów")
    p.add_argument("--text", "-t", required=True, help="Linia do skanowania")

    args = parser.parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=(args.log_level or settings.log_level).upper())

    if args.command is None:
        args = parser.parse_args([*(sys.argv[1:] if argv is None else argv), "repl"])

    commands = {
        "repl":   _repl,
        "eval":   _eval,
        "tokens": _tokens,
    }
    logger.debug("Running command %s", args.command)
    return commands[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
