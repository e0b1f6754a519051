"""Left-to-right operand reduction shared by the built-in forms.

Every form that consumes several operands evaluates them in order and stops
at the first Failure; otherwise it gathers the converted results. Each form
supplies its own `convert`, which turns one Outcome into either a Python
value or a Failure.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from mlisp import EvaluatorFn, Expression, Outcome
from mlisp.types.environment import Environment
from mlisp.types.outcome import Failure

T = TypeVar("T")


def reduce_operands(
    operands: Iterable[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    convert: Callable[[Outcome], T | Failure],
) -> list[T] | Failure:
    results: list[T] = []
    for operand in operands:
        converted = convert(evaluate_fn(operand, env))
        if isinstance(converted, Failure):
            return converted
        results.append(converted)
    return results
