"""Environment entries: a name's parameter list plus its body."""

from __future__ import annotations

from io import StringIO
from typing import Iterable


class Binding:
    """Zero parameters denotes a value binding; one or more a function binding.

    Value bindings store an already-evaluated Expression as their body.
    Function bindings store the unevaluated body Expression, which is
    evaluated afresh on every call in the caller's scope stack.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: Iterable[str], body):
        self.params: tuple[str, ...] = tuple(str(p) for p in params)
        self.body = body

    @property
    def is_function(self) -> bool:
        return len(self.params) > 0

    @property
    def arity(self) -> int:
        return len(self.params)

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Binding)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        if not self.is_function:
            return str(self.body)
        with StringIO() as buffer:
            buffer.write("(fn (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Binding({list(self.params)!r}, {self.body!r})"
