"""Parse and evaluate single-operation calculator commands."""
from collections.abc import Callable as ABCCallable
import math
import operator
import re
from typing import Callable, Dict, List

from mini_calculator.common.errors import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidNumberError,
    UnknownOperationError,
    WrongArityError,
)
from mini_calculator.common.models import (
    ALIASES,
    VALID_OPERATIONS,
    Operation,
    OperationRequest,
    OperationResult,
)


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Plain decimal literals or the special values, without the digit-group underscores float() tolerates
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def _divide(a: float, b: float) -> float:
    # Matches both 0.0 and -0.0
    if b == 0.0:
        raise DivisionByZeroError()
    return a / b


def _power(a: float, b: float) -> float:
    """
    Raise a to the power b with IEEE-754 results instead of Python exceptions.

    math.pow raises where C pow returns a special value:
        - OverflowError for results too large: returns +/-inf
        - ValueError for 0 to a negative power: returns +/-inf
        - ValueError for a negative base with a non-integer exponent: returns nan
    """
    try:
        return math.pow(a, b)
    except OverflowError:
        return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0.0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


# Mapping of operations to their implementation
OPERATORS: Dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
    Operation.DIVIDE: _divide,
    Operation.POWER: _power,
}


class ExpressionParser:
    """
    Parse and evaluate calculator commands of the form ``<op> <a> <b>``.

    Design constraints:
        - No eval(), no dynamic code execution
        - Pure: no I/O, no state kept between calls

    Algorithm:
        1. Tokenize based on whitespace
        2. Check the token count
        3. Look up the operation alias, then parse both operands
        4. Apply the operation and render the result as text

    Examples:
        - "+ 2 3" -> "5"
        - "mul 1.5 4" -> "6"
        - "^ 2 0.5" -> "1.4142135623730951"
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split a command line into whitespace-separated tokens.

        :param str expr: Command line as typed

        :return: List of tokens
        :rtype: List[str]
        """
        return expr.strip().split()

    @staticmethod
    def _is_number(token: str) -> bool:
        """
        Determine if a token is an accepted numeric literal.

        :param str token: Token string

        :return: True if token parses as an operand, else False
        :rtype: bool
        """
        return token.isascii() and _NUMBER_RE.fullmatch(token) is not None

    @staticmethod
    def parse_operation(token: str) -> Operation:
        """
        Resolve an operation alias.

        :param str token: First token of the command

        :return: Matching operation
        :rtype: Operation
        :raises UnknownOperationError: If the alias is not recognised
        """
        try:
            return ALIASES[token]
        except KeyError:
            raise UnknownOperationError(token, VALID_OPERATIONS) from None

    @staticmethod
    def parse_number(token: str) -> float:
        """
        Convert an operand token to a float.

        :param str token: Operand token

        :return: Parsed value
        :rtype: float
        :raises InvalidNumberError: If the token is not a number
        """
        if not ExpressionParser._is_number(token):
            raise InvalidNumberError(token)
        return float(token)

    @staticmethod
    def parse(expr: str) -> OperationRequest:
        """
        Turn a command line into a validated request.

        :param str expr: Command line

        :return: Parsed request
        :rtype: OperationRequest
        :raises CalculatorError: If the command is empty, has the wrong number of tokens,
            names an unknown operation or has a non-numeric operand
        """
        tokens: List[str] = ExpressionParser.tokenize(expr)

        if not tokens:
            raise EmptyInputError()
        if len(tokens) != 3:
            raise WrongArityError(len(tokens))

        op_token, left_token, right_token = tokens
        return OperationRequest(
            expression=" ".join(tokens),
            operation=ExpressionParser.parse_operation(op_token),
            left=ExpressionParser.parse_number(left_token),
            right=ExpressionParser.parse_number(right_token),
        )

    @staticmethod
    def compute(expr: str) -> OperationResult:
        """
        Parse a command line and apply its operation.

        :param str expr: Command line

        :return: Computed result
        :rtype: OperationResult
        :raises CalculatorError: On any parse error, or DivisionByZeroError for a zero divisor
        """
        request: OperationRequest = ExpressionParser.parse(expr)
        result: float = OPERATORS[request.operation](request.left, request.right)
        return OperationResult(
            expression=request.expression,
            operation=request.operation,
            result=result,
        )

    @staticmethod
    def evaluate(expr: str) -> str:
        """
        Evaluate a command line and return the rendered result.

        :param str expr: Command line

        :return: Result text, e.g. "5"
        :rtype: str
        :raises CalculatorError: If the command cannot be evaluated
        """
        return ExpressionParser.compute(expr).text


def evaluate(expr: str) -> str:
    """Shortcut for :meth:`ExpressionParser.evaluate`."""
    return ExpressionParser.evaluate(expr)
