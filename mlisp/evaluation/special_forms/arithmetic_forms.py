"""Arithmetic forms: + - * /

Every operand must evaluate to a Number. `+` and `*` fold by sum and
product. `-` and `/` with a single operand apply the operator to zero
((- x) is 0 - x, (/ x) is 0 / x); with more operands they fold from the
first operand over the rest. Results follow IEEE-754 float semantics, so
dividing by zero gives inf or NaN instead of failing.
"""

from __future__ import annotations

import functools
import operator
from typing import Callable

import numpy as np

from mlisp import EvaluatorFn, Expression, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import Number
from mlisp.types.outcome import Failure, Value
from mlisp.evaluation.reduction import reduce_operands


def _number_operand(message: str) -> Callable[[Outcome], float | Failure]:
    def convert(outcome: Outcome) -> float | Failure:
        if isinstance(outcome, Failure):
            return outcome
        if isinstance(outcome, Value) and isinstance(outcome.expr, Number):
            return outcome.expr.value
        return Failure(message)
    return convert


def _arithmetic(
    tail: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    op: Callable,
    name: str,
    verb: str,
    from_zero: bool,
) -> Outcome:
    if not tail:
        return Failure(f"Must perform {name} on at least one number")

    xs = reduce_operands(tail, env, evaluate_fn, _number_operand(f"Can only {verb} numbers."))
    if isinstance(xs, Failure):
        return xs

    with np.errstate(all="ignore"):
        if from_zero and len(xs) == 1:
            result = op(np.float64(0.0), np.float64(xs[0]))
        else:
            result = functools.reduce(op, map(np.float64, xs[1:]), np.float64(xs[0]))
    return Value(Number(float(result)))


def add_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    return _arithmetic(tail, env, evaluate_fn, operator.add, "addition", "sum", False)


def sub_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    return _arithmetic(tail, env, evaluate_fn, operator.sub, "subtraction", "subtract", True)


def mul_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    return _arithmetic(tail, env, evaluate_fn, operator.mul, "multiplication", "multiply", False)


def div_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    return _arithmetic(tail, env, evaluate_fn, operator.truediv, "division", "divide", True)
