from mlisp import EvaluatorFn, Outcome
from mlisp.printer import render_all
from mlisp.types.environment import Environment
from mlisp.types.outcome import Unit


def print_form(tail, env: Environment, _: EvaluatorFn) -> Outcome:
    """
    (print expr ...)
    Writes the rendering of each operand, space separated, to stdout.
    Operands are rendered, not evaluated, so functions are never invoked.
    """
    print(render_all(tail, env))
    return Unit
