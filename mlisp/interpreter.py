from __future__ import annotations

import logging
from typing import Callable

from mlisp import Expression, Outcome
from mlisp.errors import MlispError
from mlisp.reader.parser import lex, parse, TokenStream
from mlisp.types.environment import Environment
from mlisp.types.outcome import Failure, Unit
from mlisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)

RECURSION_MESSAGE = "maximum recursion depth exceeded"


def _guarded(eval_fn: Callable[[Expression, Environment], Outcome],
             expr: Expression, env: Environment) -> Outcome:
    """Evaluate `expr` inside a program scope.

    Deep recursion surfaces as a Failure. Scope guards may themselves run
    out of stack while a RecursionError unwinds, so the stack is cut back to
    its starting depth here.
    """
    depth = env.depth
    try:
        with env.scope():
            return eval_fn(expr, env)
    except RecursionError:
        env.unwind_to(depth)
        return Failure(RECURSION_MESSAGE)


def _reader_failure(err: MlispError) -> Failure:
    return Failure(err.message, err.category)


def run(source: str) -> Outcome:
    """Tokenize, parse and evaluate the first expression of `source` against a
    fresh default Environment; tokens after it are ignored."""
    try:
        expr = parse(lex(source))
    except MlispError as err:
        logger.info("rejected program: %s", err)
        return _reader_failure(err)

    outcome = _guarded(evaluate, expr, Environment.default())
    if isinstance(outcome, Failure):
        logger.info("evaluation failed: %s", outcome.message)
    return outcome


class Interpreter:
    """
    Evaluates mlisp source against one Environment that persists across
    calls, so bindings made by one call are visible to the next.
    """

    def __init__(
        self,
        eval_fn: Callable[[Expression, Environment], Outcome] | None = None,
        env: Environment | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        if env is None:
            env = Environment.default()
            # Session bindings live above the True/False scope
            env.push_scope()
        self.env: Environment = env

    def eval_expr(self, expr: Expression) -> Outcome:
        depth = self.env.depth
        try:
            return self.eval_fn(expr, self.env)
        except RecursionError:
            self.env.unwind_to(depth)
            return Failure(RECURSION_MESSAGE)

    def eval(self, code: str) -> Outcome:
        """Evaluate the first expression of `code`; see `eval_all` for the rest."""
        try:
            expr = parse(lex(code))
        except MlispError as err:
            return _reader_failure(err)
        return self.eval_expr(expr)

    def eval_all(self, code: str) -> Outcome:
        """Evaluate each top-level expression in turn, stopping at the first
        Failure. Returns the last Outcome (Unit for empty input)."""
        stream = TokenStream(lex(code))
        result: Outcome = Unit
        try:
            for expr in stream.parse_all():
                result = self.eval_expr(expr)
                if isinstance(result, Failure):
                    break
        except MlispError as err:
            return _reader_failure(err)
        return result
