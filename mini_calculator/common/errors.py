"""Errors raised while evaluating a calculator command."""


class CalculatorError(ValueError):
    """Base class for every recoverable evaluation error."""


class EmptyInputError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("Please enter an operation, e.g. '+ 2 3'")


class WrongArityError(CalculatorError):
    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("Expected 3 tokens: <op> <a> <b>")


class UnknownOperationError(CalculatorError):
    def __init__(self, token: str, valid: str) -> None:
        self.token = token
        super().__init__(f"Unknown operation '{token}'. Try one of: {valid}")


class InvalidNumberError(CalculatorError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"'{token}' is not a number")


class DivisionByZeroError(CalculatorError):
    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed")
