"""Render floats as calculator output text."""
from decimal import Decimal
import math


def format_number(value: float) -> str:
    """
    Convert a float to its display text.

    Finite values use the shortest round-tripping digits written out
    positionally, without an exponent, and integral values drop the ".0".

    Examples:
        - 5.0 -> "5"
        - -0.0 -> "-0"
        - 0.1 -> "0.1"
        - 1e-07 -> "0.0000001"
        - 1e+21 -> "1000000000000000000000"
        - 1e+23 -> "100000000000000000000000"
        - float("nan") -> "NaN"

    :param float value: Number to render

    :return: Display text
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    # repr keeps ".0" on integral values below 1e16
    return text[:-2] if text.endswith(".0") else text
