from mlisp import EvaluatorFn, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList
from mlisp.types.outcome import Failure, Value
from mlisp.types.symbol import Symbol
from mlisp.evaluation.reduction import reduce_operands

TRUE = Symbol("True")
FALSE = Symbol("False")


def _truthiness(outcome: Outcome) -> bool | Failure:
    """A symbol is truthy iff it is True; a list iff it is non-empty."""
    if isinstance(outcome, Failure):
        return outcome
    if isinstance(outcome, Value):
        if isinstance(outcome.expr, Symbol):
            return outcome.expr == TRUE
        if isinstance(outcome.expr, ExprList):
            return len(outcome.expr) > 0
    return Failure("Can only perform on boolean values.")


def _boolean(flag: bool) -> Value:
    return Value(TRUE if flag else FALSE)


def _truth_values(tail, env: Environment, evaluate_fn: EvaluatorFn) -> list[bool] | Failure:
    if not tail:
        return Failure("Must perform on at least one value")
    return reduce_operands(tail, env, evaluate_fn, _truthiness)


def and_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    """(and a b ...): True iff no operand is falsy. Every operand is evaluated."""
    flags = _truth_values(tail, env, evaluate_fn)
    if isinstance(flags, Failure):
        return flags
    return _boolean(all(flags))


def or_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    """(or a b ...): True iff any operand is truthy. Every operand is evaluated."""
    flags = _truth_values(tail, env, evaluate_fn)
    if isinstance(flags, Failure):
        return flags
    return _boolean(any(flags))


def not_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    """(not a b ...): every operand is evaluated and type-checked, but only
    the first one is negated."""
    flags = _truth_values(tail, env, evaluate_fn)
    if isinstance(flags, Failure):
        return flags
    return _boolean(not flags[0])
