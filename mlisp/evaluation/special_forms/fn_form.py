from mlisp import EvaluatorFn, Outcome
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList
from mlisp.types.outcome import Failure
from mlisp.types.symbol import Symbol

USAGE = "Function definitions must follow the pattern (fn fn-name (arg1 arg2 .. argn) <expr>)"


def fn_form(tail, env: Environment, _: EvaluatorFn) -> Outcome:
    """
    (fn name (params...) body)
    Registers a function binding in the top scope. The body is stored
    unevaluated and nothing from the current scopes is captured.
    """
    if len(tail) != 3:
        return Failure(USAGE)

    name, params, body = tail
    if not isinstance(name, Symbol) or not isinstance(params, ExprList):
        return Failure(USAGE)
    if not all(isinstance(p, Symbol) for p in params):
        return Failure("Function parameters must be symbols.")

    return env.bind_function(name, params, body)
