"""Equality forms: = and !=

Each operand is evaluated and reduced to a comparison key: a number's decimal
text, a symbol's text, or for a list the concatenated keys of its elements
(each element evaluated again; an element that fails, yields Unit or yields
a list contributes "Error"). Two number operands are compared with the numeric
tolerance instead of by key.

(= a b ...) is True iff every operand matches the first.
(!= a b ...) is its negation: True iff some operand differs from the first.
"""

from __future__ import annotations

from mlisp import EvaluatorFn, Expression, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList, Number, format_number
from mlisp.types.outcome import Failure, Value
from mlisp.types.symbol import Symbol
from mlisp.evaluation.reduction import reduce_operands
from mlisp.evaluation.special_forms.logic_forms import TRUE, FALSE

ERROR_KEY = "Error"


def comparison_key(expr: Expression, env: Environment, evaluate_fn: EvaluatorFn) -> str:
    match expr:
        case Number():
            return format_number(expr.value)
        case Symbol():
            return expr.id
        case ExprList():
            keys = []
            for item in expr:
                outcome = evaluate_fn(item, env)
                # only atoms have a key inside a list; nested lists do not recurse
                if isinstance(outcome, Value) and isinstance(outcome.expr, (Number, Symbol)):
                    keys.append(comparison_key(outcome.expr, env, evaluate_fn))
                else:
                    keys.append(ERROR_KEY)
            return "".join(keys)
    return ERROR_KEY


def _all_match(tail, env: Environment, evaluate_fn: EvaluatorFn) -> bool | Failure:
    if len(tail) < 2:
        return Failure("Must perform on at least two values")

    def convert(outcome: Outcome):
        if isinstance(outcome, Failure):
            return outcome
        if isinstance(outcome, Value):
            return outcome.expr, comparison_key(outcome.expr, env, evaluate_fn)
        return Failure("Can only compare values.")

    operands = reduce_operands(tail, env, evaluate_fn, convert)
    if isinstance(operands, Failure):
        return operands

    first_expr, first_key = operands[0]

    def matches(expr, key) -> bool:
        if isinstance(first_expr, Number) and isinstance(expr, Number):
            return first_expr == expr
        return key == first_key

    return all(matches(expr, key) for expr, key in operands)


def eq_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    result = _all_match(tail, env, evaluate_fn)
    if isinstance(result, Failure):
        return result
    return Value(TRUE if result else FALSE)


def neq_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    result = _all_match(tail, env, evaluate_fn)
    if isinstance(result, Failure):
        return result
    return Value(FALSE if result else TRUE)
