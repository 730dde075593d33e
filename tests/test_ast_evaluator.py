from __future__ import annotations

import pytest

from adapters.evaluator._printer import format_number, format_tree, print_tree
from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.variable_store.in_memory_store import InMemoryVariableStore
from contracts import (
    BinOpNode,
    DivisionByZeroError,
    NumberNode,
    UnaryOpNode,
    UndefinedVariableError,
    VariableNode,
)
from ports.evaluator import Evaluator


def _num(v: float) -> NumberNode:
    return NumberNode(value=v)


def test_evaluate_literals_and_binary_ops():
    ev = ASTEvaluator()
    store = InMemoryVariableStore()
    ast = BinOpNode(op="-", left=BinOpNode(op="*", left=_num(6), right=_num(7)), right=_num(2))

    assert ev.evaluate(ast, store) == 40.0
    assert ev.evaluate(BinOpNode(op="/", left=_num(7), right=_num(2)), store) == 3.5


def test_evaluate_unary_ops():
    ev = ASTEvaluator()
    store = InMemoryVariableStore()

    assert ev.evaluate(UnaryOpNode(op="-", operand=_num(3)), store) == -3.0
    assert ev.evaluate(UnaryOpNode(op="+", operand=_num(3)), store) == 3.0


def test_evaluate_reads_variables_without_mutating_store():
    ev = ASTEvaluator()
    store = InMemoryVariableStore({"x": 4})

    assert ev.evaluate(BinOpNode(op="+", left=VariableNode(name="x"), right=_num(1)), store) == 5.0
    assert store.snapshot() == {"x": 4.0}


def test_evaluate_undefined_variable_raises():
    with pytest.raises(UndefinedVariableError) as exc_info:
        ASTEvaluator().evaluate(VariableNode(name="z"), InMemoryVariableStore())

    assert exc_info.value.name == "z"


def test_evaluate_division_by_zero_raises():
    ast = BinOpNode(op="/", left=_num(4), right=_num(0))

    with pytest.raises(DivisionByZeroError):
        ASTEvaluator().evaluate(ast, InMemoryVariableStore())


def test_evaluate_division_by_negative_zero_raises():
    ast = BinOpNode(op="/", left=_num(1), right=UnaryOpNode(op="-", operand=_num(0)))

    with pytest.raises(ZeroDivisionError):
        ASTEvaluator().evaluate(ast, InMemoryVariableStore())


def test_optimize_folds_literal_tree_to_single_number():
    ast = BinOpNode(
        op="*",
        left=BinOpNode(op="+", left=_num(1), right=_num(2)),
        right=BinOpNode(op="-", left=_num(3), right=_num(1)),
    )

    assert ASTEvaluator().optimize(ast) == NumberNode(value=6.0)


def test_optimize_keeps_variables_and_folds_around_them():
    ast = BinOpNode(
        op="+",
        left=VariableNode(name="x"),
        right=BinOpNode(op="*", left=_num(2), right=UnaryOpNode(op="-", operand=_num(3))),
    )

    optimized = ASTEvaluator().optimize(ast)

    assert optimized == BinOpNode(op="+", left=VariableNode(name="x"), right=_num(-6))


def test_optimize_does_not_fold_unary_over_variable():
    ast = UnaryOpNode(op="-", operand=VariableNode(name="x"))

    assert ASTEvaluator().optimize(ast) == ast


def test_optimize_returns_new_tree_and_leaves_input_untouched():
    inner = BinOpNode(op="+", left=_num(1), right=_num(2))
    ast = BinOpNode(op="*", left=inner, right=VariableNode(name="y"))

    optimized = ASTEvaluator().optimize(ast)

    assert ast.left == inner
    assert isinstance(ast.left, BinOpNode)
    assert optimized.right is not ast.right


def test_optimize_literal_division_by_zero_fails_eagerly():
    ast = BinOpNode(op="+", left=_num(2), right=BinOpNode(op="/", left=_num(1), right=_num(0)))

    with pytest.raises(DivisionByZeroError):
        ASTEvaluator().optimize(ast)


def test_optimize_is_idempotent_and_value_preserving():
    ev = ASTEvaluator()
    store = InMemoryVariableStore({"a": 3, "b": -2})
    ast = BinOpNode(
        op="-",
        left=BinOpNode(op="*", left=VariableNode(name="a"), right=BinOpNode(op="+", left=_num(1), right=_num(4))),
        right=UnaryOpNode(op="-", operand=BinOpNode(op="/", left=VariableNode(name="b"), right=_num(8))),
    )

    once = ev.optimize(ast)
    twice = ev.optimize(once)

    assert ev.evaluate(once, store) == ev.evaluate(ast, store)
    assert ev.evaluate(twice, store) == ev.evaluate(once, store)
    assert twice == once


def test_render_indents_children_two_spaces():
    ast = BinOpNode(
        op="+",
        left=UnaryOpNode(op="-", operand=VariableNode(name="x")),
        right=_num(2.5),
    )

    assert ASTEvaluator().render(ast) == (
        "BinaryOp(+)\n"
        "  UnaryOp(-)\n"
        "    Variable(x)\n"
        "  Number(2.5)"
    )


def test_render_respects_initial_indent():
    assert format_tree(_num(5), indent=4) == "    Number(5)"


def test_format_number_uses_native_formatting():
    assert format_number(5.0) == "5"
    assert format_number(-0.25) == "-0.25"
    assert format_number(float("inf")) == "inf"


def test_evaluator_satisfies_port():
    assert isinstance(ASTEvaluator(), Evaluator)


def test_print_tree_writes_rendering_to_stdout(capsys):
    print_tree(UnaryOpNode(op="-", operand=_num(1)))

    assert capsys.readouterr().out == "UnaryOp(-)\n  Number(1)\n"


def test_format_number_keeps_native_form_for_large_values():
    assert format_number(123456789012345.0) == "123456789012345"
    assert format_number(1e16) == "1e+16"
    assert format_number(-1e300) == "-1e+300"
