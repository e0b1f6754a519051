# Core type aliases for mlisp's data model.
# Expressions are the immutable Symbol / Number / ExprList values defined in
# mlisp.types; evaluation results are Outcomes (Value, Failure or Unit).
#
# Naming guidance:
# - Expression: use in reader/printer code to denote syntactic forms.
# - Outcome:    use in evaluator code to denote the three-way result.

from typing import Callable, Union

from mlisp.types.symbol import Symbol
from mlisp.types.expression import Number, ExprList
from mlisp.types.outcome import Value, Failure, UnitType

Expression = Union[Symbol, Number, ExprList]
Outcome = Union[Value, Failure, UnitType]

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., Outcome]
