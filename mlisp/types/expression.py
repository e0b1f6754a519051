"""Numbers and lists: the non-symbol variants of an mlisp Expression.

Expressions are immutable once built and are shared by reference between
parents; nothing ever copies or mutates a child. Equality is structural:
Numbers compare with an absolute tolerance, lists compare element-wise.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator

import numpy as np

NUMBER_TOLERANCE = 1e-8


def format_number(n: float) -> str:
    """Shortest decimal text for `n`, never in exponent form and without a
    trailing ".0" (2.0 -> "2", 0.25 -> "0.25")."""
    if math.isnan(n):
        return "NaN"
    return np.format_float_positional(n, trim="-")


class Number:
    __slots__ = ("value",)

    def __init__(self, value: float):
        object.__setattr__(self, "value", float(value))

    def __setattr__(self, key, value):
        raise AttributeError("Number is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return False
        # exact match first so that equal infinities compare equal
        return self.value == other.value or abs(self.value - other.value) <= NUMBER_TOLERANCE

    # Tolerance-based equality is not transitive, so Numbers cannot be hashed.
    __hash__ = None

    def __repr__(self):
        return f"Number({self.value!r})"

    def __str__(self):
        return format_number(self.value)


class ExprList:
    __slots__ = ("items",)

    def __init__(self, items: Iterable = ()):
        object.__setattr__(self, "items", tuple(items))

    def __setattr__(self, key, value):
        raise AttributeError("ExprList is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExprList):
            return False
        if len(self.items) != len(other.items):
            return False
        return all(a == b for a, b in zip(self.items, other.items))

    __hash__ = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator:
        return iter(self.items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ExprList(self.items[index])
        return self.items[index]

    def __bool__(self) -> bool:
        return bool(self.items)

    def __repr__(self):
        return f"ExprList({list(self.items)!r})"

    def __str__(self):
        return "(" + " ".join(str(item) for item in self.items) + ")"


def number(n: float) -> Number:
    return Number(n)


def list_(items: Iterable = ()) -> ExprList:
    return ExprList(items)
