from mlisp import EvaluatorFn, Outcome
from mlisp.types.environment import Environment
from mlisp.types.outcome import Failure, Unit
from mlisp.types.symbol import Symbol


def let_form(tail, env: Environment, evaluate_fn: EvaluatorFn) -> Outcome:
    """
    (let name expr)
    Evaluates expr and binds the value to name in the top scope. Produces Unit.
    """
    if len(tail) != 2:
        return Failure("Invalid variable definition. Should look like (let some-var some-expr)")

    name, value_expr = tail
    if not isinstance(name, Symbol):
        return Failure("First operand of a variable definition must be a symbol and second must be an expression.")

    outcome = evaluate_fn(value_expr, env)
    if isinstance(outcome, Failure):
        return outcome
    if outcome is Unit:
        return Failure("Cannot assign unit to a variable.")
    return env.bind_value(name, outcome.expr)
