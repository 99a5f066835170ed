"""Test class ExpressionParser."""
import math

import pytest

from mini_calculator.common.errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidNumberError,
    UnknownOperationError,
    WrongArityError,
)
from mini_calculator.common.models import Operation
from mini_calculator.common.parser import ExpressionParser, evaluate


def test_tokenize_basic():
    """Tokenize trims and splits on any whitespace."""
    assert ExpressionParser.tokenize("  +\t2   3 \n") == ["+", "2", "3"]


@pytest.mark.parametrize("token,expected", [
    ("123", True),
    ("45.67", True),
    ("-8.9", True),
    ("+3", True),
    (".5", True),
    ("5.", True),
    ("1e5", True),
    ("2.5E-3", True),
    ("inf", True),
    ("-Infinity", True),
    ("NaN", True),
    ("abc", False),
    ("+", False),
    ("1_000", False),
    ("0x10", False),
    ("١٢", False),
])
def test_is_number(token, expected):
    """_is_number accepts decimal literals and special values only."""
    assert ExpressionParser._is_number(token) == expected


@pytest.mark.parametrize("alias,operation", [
    ("+", Operation.ADD),
    ("add", Operation.ADD),
    ("-", Operation.SUBTRACT),
    ("sub", Operation.SUBTRACT),
    ("*", Operation.MULTIPLY),
    ("mul", Operation.MULTIPLY),
    ("x", Operation.MULTIPLY),
    ("/", Operation.DIVIDE),
    ("div", Operation.DIVIDE),
    ("^", Operation.POWER),
    ("pow", Operation.POWER),
])
def test_parse_operation_aliases(alias, operation):
    """Every alias resolves to its operation."""
    assert ExpressionParser.parse_operation(alias) is operation


@pytest.mark.parametrize("alias", ["ADD", "Mul", "X", "%", "plus"])
def test_parse_operation_is_case_sensitive(alias):
    """Unknown or differently-cased aliases are rejected."""
    with pytest.raises(UnknownOperationError):
        ExpressionParser.parse_operation(alias)


def test_parse_builds_request():
    """Parse returns the operation and both operands."""
    request = ExpressionParser.parse("  div   7 -2 ")
    assert request.operation is Operation.DIVIDE
    assert request.left == 7.0
    assert request.right == -2.0
    assert request.expression == "div 7 -2"


@pytest.mark.parametrize("expr,expected", [
    ("+ 2 3", "5"),
    ("add 2 3", "5"),
    ("- 10 4", "6"),
    ("sub 2 5", "-3"),
    ("* 3 4", "12"),
    ("x 3 4", "12"),
    ("mul 1.5 4", "6"),
    ("/ 8 2", "4"),
    ("div 1 4", "0.25"),
    ("/ 1 3", "0.3333333333333333"),
    ("pow 2 3", "8"),
    ("^ 2 -1", "0.5"),
    ("^ 2 0.5", "1.4142135623730951"),
    ("+ 0.1 0.2", "0.30000000000000004"),
    ("/ 1 1e7", "0.0000001"),
    ("* 1e20 10", "1000000000000000000000"),
    ("* 1e22 10", "100000000000000000000000"),
])
def test_evaluate_valid(expr, expected):
    """Evaluate returns the rendered result for valid commands."""
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("* 1e308 10", "inf"),
    ("^ 10 400", "inf"),
    ("^ -10 401", "-inf"),
    ("^ 0 -1", "inf"),
    ("^ -0 -1", "-inf"),
    ("^ -8 0.5", "NaN"),
    ("+ inf -inf", "NaN"),
    ("- 0 inf", "-inf"),
])
def test_evaluate_special_values(expr, expected):
    """Overflow and domain errors yield IEEE special values instead of errors."""
    assert evaluate(expr) == expected


@pytest.mark.parametrize("op,a,b,fn", [
    ("+", 1.25, -7.5, lambda a, b: a + b),
    ("-", 3.0, 10.75, lambda a, b: a - b),
    ("*", -2.5, 4.0, lambda a, b: a * b),
    ("/", 22.0, 7.0, lambda a, b: a / b),
    ("^", 1.5, 2.0, lambda a, b: a ** b),
])
def test_compute_matches_arithmetic(op, a, b, fn):
    """Compute applies the same arithmetic as the Python operators."""
    result = ExpressionParser.compute(f"{op} {a} {b}")
    assert result.result == fn(a, b)


@pytest.mark.parametrize("expr", ["/ 4 0", "div 1 0.0", "/ 1 -0", "/ 0 0"])
def test_division_by_zero(expr):
    """A zero divisor raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError, match="Division by zero is not allowed"):
        evaluate(expr)


@pytest.mark.parametrize("expr", ["", "   ", "\t\n"])
def test_empty_input(expr):
    """Empty or whitespace-only input raises EmptyInputError."""
    with pytest.raises(EmptyInputError, match="Please enter an operation"):
        evaluate(expr)


@pytest.mark.parametrize("expr,count", [
    ("+ 2", 2),
    ("hello", 1),
    ("+ 1 2 3", 4),
    ("2 + 3 * 4", 5),
])
def test_wrong_arity(expr, count):
    """Any token count other than three raises WrongArityError."""
    with pytest.raises(WrongArityError, match="Expected 3 tokens") as exc_info:
        evaluate(expr)
    assert exc_info.value.count == count


def test_unknown_operation_names_token():
    """The error names the bad token and lists valid operations."""
    with pytest.raises(UnknownOperationError) as exc_info:
        evaluate("% 5 2")
    assert exc_info.value.token == "%"
    assert str(exc_info.value) == (
        "Unknown operation '%'. Try one of: +, -, *, /, ^ (or add, sub, mul, div, pow)"
    )


def test_unknown_operation_checked_before_operands():
    """The operation is resolved before operands are parsed."""
    with pytest.raises(UnknownOperationError):
        evaluate("% abc def")


@pytest.mark.parametrize("expr,token", [
    ("+ abc 3", "abc"),
    ("+ 3 abc", "abc"),
    ("* two 2", "two"),
    ("- 1_000 1", "1_000"),
])
def test_invalid_number_names_token(expr, token):
    """The first non-numeric operand is named in the error."""
    with pytest.raises(InvalidNumberError) as exc_info:
        evaluate(expr)
    assert exc_info.value.token == token
    assert str(exc_info.value) == f"'{token}' is not a number"


def test_errors_are_value_errors():
    """Calculator errors stay catchable as ValueError."""
    with pytest.raises(ValueError):
        evaluate("hello")
    assert issubclass(DivisionByZeroError, CalculatorError)


def test_nan_operand_propagates():
    """A NaN operand gives a NaN result."""
    assert math.isnan(ExpressionParser.compute("+ nan 1").result)


def test_evaluate_uses_result_text():
    """Evaluate returns the rendered text of the computed result."""
    result = ExpressionParser.compute("* 1e22 10")
    assert evaluate("* 1e22 10") == result.text
