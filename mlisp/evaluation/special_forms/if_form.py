from mlisp import EvaluatorFn, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList
from mlisp.types.outcome import Failure, Unit


def if_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    if len(tail) != 3:
        return Failure("If expressions must have the format (if <predicate> <then> <else>)")

    predicate, then_branch, else_branch = tail
    cond = evaluate_fn(predicate, env)
    if isinstance(cond, Failure):
        return cond
    if cond is Unit:
        return Failure("If expression predicates must return an expression.")

    # Only the empty list is false here; every other value, the False symbol
    # included, selects the then-branch.
    if isinstance(cond.expr, ExprList) and len(cond.expr) == 0:
        return evaluate_fn(else_branch, env)
    return evaluate_fn(then_branch, env)
