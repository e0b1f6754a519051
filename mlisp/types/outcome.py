"""The three-way result of evaluating an expression.

- Value(expr):  evaluation produced an Expression
- Failure(msg): evaluation stopped; `category` names the error family
                ("lex", "parse" or "eval")
- Unit:         evaluation succeeded but produced nothing (let, fn, print)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class UnitType:
    _instance: UnitType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Unit"
    def __str__(self): return "unit"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()


@dataclass(frozen=True)
class Value:
    expr: Any

    def __str__(self) -> str:
        return str(self.expr)


@dataclass(frozen=True)
class Failure:
    message: str
    category: str = "eval"

    def __str__(self) -> str:
        return f"{self.category} error: {self.message}"
