"""Application of bound symbols.

A symbol in head position (or on its own) that names a binding is resolved
here:
- a value binding evaluates its stored body in the current environment;
  any call arguments are ignored
- a function binding needs exactly one argument per parameter. Arguments are
  evaluated eagerly, left to right, in the caller's environment. A new scope
  is then pushed on the caller's stack, the parameters are bound in it, the
  body is evaluated, and the scope is popped even if the body fails.
"""

import logging

from mlisp import EvaluatorFn, Expression, Outcome
from mlisp.types.environment import Environment
from mlisp.types.outcome import Failure, Unit, Value
from mlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _argument(outcome: Outcome) -> Expression | Failure:
    if isinstance(outcome, Failure):
        return outcome
    if outcome is Unit:
        return Failure("Cannot pass Unit as an argument to a function.")
    return outcome.expr


def apply_symbol(
    name: Symbol,
    args: tuple[Expression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Outcome:
    binding = env.lookup(name)
    if binding is None:
        # Unbound identifiers quote themselves
        return Value(name)

    if not binding.is_function:
        logger.debug("evaluating %s, lookup returned %s", name, binding.body)
        return evaluate_fn(binding.body, env)

    if len(args) != binding.arity:
        return Failure(
            f"Provided {len(args)} arguments but expected {binding.arity}"
        )

    values = []
    for arg in args:
        value = _argument(evaluate_fn(arg, env))
        if isinstance(value, Failure):
            return value
        values.append(value)

    logger.debug("calling %s with %s", name, values)
    with env.scope():
        for param, value in zip(binding.params, values):
            env.bind_value(param, value)
        return evaluate_fn(binding.body, env)
