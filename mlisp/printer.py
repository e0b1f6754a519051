"""Text rendering of Expressions for `print` and the command-line driver."""

from __future__ import annotations

from mlisp import Expression
from mlisp.types.environment import Environment
from mlisp.types.expression import ExprList, Number, format_number
from mlisp.types.symbol import Symbol


def render(expr: Expression, env: Environment) -> str:
    """Render `expr` against the bindings visible in `env`.

    A symbol naming a value binding renders as that binding's stored value; a
    symbol naming a function renders as an opaque tag and is never called.
    Unbound symbols render as their own text.
    """
    match expr:
        case Symbol():
            binding = env.lookup(expr)
            if binding is None:
                return expr.id
            if not binding.is_function:
                return render(binding.body, env)
            return f"<func-object: {expr.id}>"
        case Number():
            return format_number(expr.value)
        case ExprList():
            return "(" + " ".join(render(item, env) for item in expr) + ")"
    raise TypeError(f"Cannot render non-expression {expr!r}")


def render_all(exprs, env: Environment) -> str:
    return " ".join(render(e, env) for e in exprs)
