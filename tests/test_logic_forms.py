import pytest

from mlisp.types.outcome import Failure, Value
from mlisp.types.symbol import Symbol

TRUE = Value(Symbol("True"))
FALSE = Value(Symbol("False"))


@pytest.mark.parametrize("source,expected", [
    ("(and True True)", TRUE),
    ("(and True False)", FALSE),
    ("(and (1 2) (3))", TRUE),
    ("(and (1) ())", FALSE),
    ("(or False False)", FALSE),
    ("(or False True)", TRUE),
    ("(or () (1))", TRUE),
    ("(not True)", FALSE),
    ("(not False)", TRUE),
    ("(not ())", TRUE),
    ("(and True)", TRUE),
    ("(or False)", FALSE),
])
def test_logic(ev, source, expected):
    assert ev(source) == expected


def test_comparison_symbols_are_booleans(ev):
    assert ev("(and (= 1 1) (!= 1 2))") == TRUE
    assert ev("(or (= 1 2) (= 2 3))") == FALSE
    assert ev("(not (= 1 2))") == TRUE


def test_symbols_other_than_true_are_falsy(ev):
    assert ev("(and True maybe)") == FALSE
    assert ev("(or maybe)") == FALSE


def test_not_negates_only_first_operand(ev):
    # every operand is evaluated, but only the first one is negated
    assert ev("(not False True)") == TRUE
    assert ev("(not True False False)") == FALSE


def test_not_still_type_checks_every_operand(ev):
    assert ev("(not True 1)") == Failure("Can only perform on boolean values.")


def test_and_evaluates_every_operand(ev, capsys):
    assert ev("(and False ((print evaluated) True))") == FALSE
    assert capsys.readouterr().out == "evaluated\n"


@pytest.mark.parametrize("source", ["(and 1)", "(or True 2)", "(not 0)", "(and (let x 1))"])
def test_non_boolean_operands_fail(ev, source):
    assert ev(source) == Failure("Can only perform on boolean values.")


@pytest.mark.parametrize("op", ["and", "or", "not"])
def test_zero_operands_fail(ev, op):
    assert ev(f"({op})") == Failure("Must perform on at least one value")


def test_operand_failure_propagates(ev):
    assert ev("(or True (+ a))") == Failure("Can only sum numbers.")
