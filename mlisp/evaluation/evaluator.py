"""Core evaluator for mlisp.

evaluate(expr, env) is a recursive function from an Expression and the
Environment's scope stack to an Outcome. Lists are dispatched on their head:

1. built-in forms (arithmetic, logic, equality, let, fn, print, if)
2. a symbol that names a binding (see mlisp.evaluation.apply)
3. anything else evaluates every element, drops Unit results and collects
   the values into a new list

A bare number evaluates to itself; a bare symbol resolves through its
binding or, when unbound, evaluates to itself.
"""

from __future__ import annotations

from mlisp import Expression, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList, Number
from mlisp.types.outcome import Failure, Unit, Value
from mlisp.types.symbol import Symbol
from mlisp.evaluation.apply import apply_symbol
from mlisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: Expression, env: Environment) -> Outcome:
    match expr:
        case Number():
            return Value(expr)
        case Symbol():
            return apply_symbol(expr, (), env, evaluate)
        case ExprList(items=()):
            return Value(expr)
        case ExprList(items=(Symbol() as head, *_)):
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(expr.items[1:], env, evaluate)
            if head in env:
                return apply_symbol(head, expr.items[1:], env, evaluate)
            return evaluate_elements(expr, env)
        case ExprList():
            return evaluate_elements(expr, env)
    return Failure(f"Cannot evaluate non-expression {expr!r}")


def evaluate_elements(expr: ExprList, env: Environment) -> Outcome:
    """Evaluate each element in order; Unit results are dropped."""
    values = []
    for item in expr:
        outcome = evaluate(item, env)
        if isinstance(outcome, Failure):
            return outcome
        if outcome is not Unit:
            values.append(outcome.expr)
    return Value(ExprList(values))
