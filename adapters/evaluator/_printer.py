"""
_printer.py — tekstowa reprezentacja drzewa ExprAST (tryb diagnostyczny).

Jeden węzeł na linię, dzieci wcięte o dwie spacje głębiej niż rodzic.
Wynik nie jest przeznaczony do ponownego parsowania.
"""
from __future__ import annotations

from contracts import BinOpNode, ExprAST, NumberNode, UnaryOpNode, VariableNode

# Od tej wartości liczby całkowite drukowane są przez repr() ("1e+16")
_INT_DISPLAY_LIMIT = 1e16


def format_number(value: float) -> str:
    """5.0 → '5', 2.5 → '2.5', 1e300 → '1e+300', inf → 'inf'."""
    if value.is_integer() and abs(value) < _INT_DISPLAY_LIMIT:
        return str(int(value))
    return repr(value)


def format_tree(ast: ExprAST, indent: int = 0) -> str:
    lines: list[str] = []
    _collect(ast, indent, lines)
    return "\n".join(lines)


def print_tree(ast: ExprAST, indent: int = 0) -> None:
    """Drukuje drzewo na stdout."""
    print(format_tree(ast, indent))


def _collect(node: ExprAST, indent: int, lines: list[str]) -> None:
    pad = " " * indent
    if isinstance(node, NumberNode):
        lines.append(f"{pad}Number({format_number(node.value)})")
    elif isinstance(node, VariableNode):
        lines.append(f"{pad}Variable({node.name})")
    elif isinstance(node, UnaryOpNode):
        lines.append(f"{pad}UnaryOp({node.op})")
        _collect(node.operand, indent + 2, lines)
    elif isinstance(node, BinOpNode):
        lines.append(f"{pad}BinaryOp({node.op})")
        _collect(node.left, indent + 2, lines)
        _collect(node.right, indent + 2, lines)
    else:
        raise TypeError(f"Unknown AST node type: {type(node)}")
