"""Runtime environment for mlisp.

The Environment is a stack of scopes. Writes (`let`, `fn`) always land in the
top scope; reads search from the top down and return the first match, so an
inner scope shadows an outer one.

Function calls push their scope onto whatever stack is active at the call
site. Nothing is captured when a function is declared: the language is
dynamically scoped, and a single Environment instance is mutated in place for
the whole run.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from io import StringIO
from typing import Iterable, Iterator, Mapping, Optional

from mlisp.types.binding import Binding
from mlisp.types.expression import ExprList, Number
from mlisp.types.outcome import Failure, Unit, UnitType
from mlisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

Scope = dict[str, Binding]

NO_SCOPE_MESSAGE = "Environment does not have any scope to add to."


def _name(name: str | Symbol) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Stack of name -> Binding scopes (bottom = outermost, top = innermost)."""

    __slots__ = ("scopes",)

    def __init__(self, scopes: Optional[Iterable[Scope]] = None):
        if scopes is None:
            scopes = [default_scope()]
        self.scopes: list[Scope] = [dict(s) for s in scopes]

    @classmethod
    def empty(cls) -> Environment:
        """An environment with no scopes; writes fail until one is pushed."""
        return cls([])

    @classmethod
    def default(cls) -> Environment:
        """A single scope holding the boolean constants True and False."""
        return cls()

    @classmethod
    def from_vars(cls, mapping: Mapping[str, object] | Iterable[tuple[str, object]]) -> Environment:
        """One scope holding a value binding for each (name, expr) pair."""
        env = cls.empty()
        env.push_scope()
        items = mapping.items() if isinstance(mapping, Mapping) else mapping
        for name, expr in items:
            env.bind_value(name, expr)
        return env

    @property
    def depth(self) -> int:
        return len(self.scopes)

    def lookup(self, name: str | Symbol) -> Optional[Binding]:
        """Return the binding for `name` in the topmost scope that has one."""
        key = _name(name)
        for scope in reversed(self.scopes):
            if key in scope:
                return scope[key]
        return None

    def contains(self, name: str | Symbol) -> bool:
        return self.lookup(name) is not None

    def __contains__(self, name: str | Symbol) -> bool:
        return self.contains(name)

    def push_scope(self) -> None:
        self.scopes.append({})
        logger.debug("push scope -> depth %d", len(self.scopes))

    def pop_scope(self) -> None:
        # Popping an empty stack is a no-op.
        if self.scopes:
            self.scopes.pop()
        logger.debug("pop scope -> depth %d", len(self.scopes))

    def unwind_to(self, depth: int) -> None:
        """Drop every scope above `depth`."""
        del self.scopes[depth:]

    @contextmanager
    def scope(self) -> Iterator[Environment]:
        """Push a scope for the duration of the block; pop it however the
        block exits."""
        self.push_scope()
        try:
            yield self
        finally:
            self.pop_scope()

    def bind_value(self, name: str | Symbol, expr) -> Failure | UnitType:
        """Insert or overwrite a zero-parameter binding in the top scope."""
        return self._bind(_name(name), Binding((), expr))

    def bind_function(self, name: str | Symbol, params: Iterable[str | Symbol], body) -> Failure | UnitType:
        """Insert or overwrite an N-parameter binding in the top scope."""
        return self._bind(_name(name), Binding((_name(p) for p in params), body))

    def _bind(self, key: str, binding: Binding) -> Failure | UnitType:
        if not self.scopes:
            return Failure(NO_SCOPE_MESSAGE)
        self.scopes[-1][key] = binding
        logger.debug("bind %s = %s (depth %d)", key, binding, len(self.scopes))
        return Unit

    def _write_scope(self, scope: Scope, buffer: StringIO) -> None:
        """Write one scope's bindings into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in scope.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Top scope only, with an indicator for the scopes beneath it."""
        if not self.scopes:
            return "<empty>"
        with StringIO() as buffer:
            self._write_scope(self.scopes[-1], buffer)
            if len(self.scopes) > 1:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole stack, innermost first."""
        with StringIO() as buffer:
            buffer.write("<Environment stack: ")
            frames = []
            for scope in reversed(self.scopes):
                frame = StringIO()
                self._write_scope(scope, frame)
                frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()


def default_scope() -> Scope:
    """The bottom scope of every default environment.

    Booleans are lists: False is the empty list and True a one-element list,
    so truthiness means "non-empty".
    """
    return {
        "False": Binding((), ExprList()),
        "True": Binding((), ExprList([Number(1.0)])),
    }
