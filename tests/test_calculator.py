"""Test calc and evaluate_operation entry points."""
import logging

import pytest

from rpn_calc.calculator import calc, evaluate_operation
from rpn_calc.common.errors import (
    CalcError,
    DivisionByZeroError,
    ErrorKind,
    InvalidCharacterError,
    MismatchedParensError,
)
from rpn_calc.common.operations import OperationRequest


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("3 + 5", 8.0),
        ("10 - 2 * 3", 4.0),
        ("10 / 2 + 3", 8.0),
        ("10 - 2 - 3", 5.0),
        ("(10 + 5) * 2", 30.0),
        ("3 + 5 * (2 - 8)", -27.0),
        ("3.5 + 2.5", 6.0),
        ("-3 * 2", -6.0),
        ("2 * (-3)", -6.0),
        ("(2 + 2) * 2", 8.0),
        ("10.5 + 5.5 - 2", 14.0),
        ("((((((5*(5*5)*5))))))", 625.0),
        ("-5*5*5*5", -625.0),
        ("-(5*5*5*5)", -625.0),
        ("-((-(5*5*5*5)))", 625.0),
        ("1 + 1 + 1 +     1", 4.0),
        ("(2 + 2) * 5 - (1 - 1) * 100", 20.0),
        ("1 / 3", 1 / 3),
    ],
)
def test_calc_valid(expr: str, expected: float) -> None:
    """calc returns the value and no error for well-formed expressions."""
    result, error = calc(expr)
    assert error is None
    assert result == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize(
    "expr,kind",
    [
        ("5 / 0", ErrorKind.DIVISION_BY_ZERO),
        ("(1 + 2) * (3 / (4 - 4))", ErrorKind.DIVISION_BY_ZERO),
        ("2 * (3 + 5))", ErrorKind.MISMATCHED_PARENS),
        ("2 * -3", ErrorKind.INSUFFICIENT_OPERANDS),
        ("10 + -5", ErrorKind.INSUFFICIENT_OPERANDS),
        ("5 - - 10", ErrorKind.INSUFFICIENT_OPERANDS),
        ("1 + 1 + 1 + + 1", ErrorKind.INSUFFICIENT_OPERANDS),
        ("", ErrorKind.MALFORMED_EXPRESSION),
        ("sqrt(4)", ErrorKind.INVALID_CHARACTER),
        ("1..5 * 2", ErrorKind.INVALID_NUMBER),
        ("1" + "0" * 400, ErrorKind.INVALID_NUMBER),
    ],
)
def test_calc_errors(expr: str, kind: ErrorKind) -> None:
    """calc returns zero and a classified error for invalid expressions."""
    result, error = calc(expr)
    assert result == 0.0
    assert isinstance(error, CalcError)
    assert error.kind is kind


def test_calc_error_classes() -> None:
    """Errors keep their concrete class and remain ValueErrors."""
    _, error = calc("1 / 0")
    assert isinstance(error, DivisionByZeroError)
    assert isinstance(error, ValueError)

    _, error = calc("(1")
    assert isinstance(error, MismatchedParensError)

    _, error = calc("2 $ 2")
    assert isinstance(error, InvalidCharacterError)
    assert error.character == "$"


@pytest.mark.parametrize("expr", ["10 - 2 * 3", "2 * -3", "", "(1 + 2) * (3 / (4 - 4))"])
def test_calc_is_idempotent(expr: str) -> None:
    """Evaluating the same expression twice yields the same outcome."""
    first_result, first_error = calc(expr)
    second_result, second_error = calc(expr)
    assert first_result == second_result
    assert type(first_error) is type(second_error)
    assert str(first_error) == str(second_error)


def test_evaluate_operation_result(caplog: pytest.LogCaptureFixture) -> None:
    """evaluate_operation wraps a successful evaluation into an OperationResult."""
    with caplog.at_level(logging.DEBUG, logger="rpn_calc"):
        res = evaluate_operation(OperationRequest(expression="3 + 4 * 2"))

    assert res.ok
    assert res.expression == "3 + 4 * 2"
    assert res.result == 11.0
    assert "3 4 2 * +" in caplog.text


def test_evaluate_operation_error(caplog: pytest.LogCaptureFixture) -> None:
    """evaluate_operation reports the error message and kind, and logs the failure."""
    with caplog.at_level(logging.ERROR, logger="rpn_calc"):
        res = evaluate_operation(OperationRequest(expression="2 * (3 + 5))"))

    assert not res.ok
    assert res.result is None
    assert res.error_kind is ErrorKind.MISMATCHED_PARENS
    assert "parentheses" in res.error
    assert "MismatchedParens" in caplog.text
