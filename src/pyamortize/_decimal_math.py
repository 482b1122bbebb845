# -*- coding: utf-8 -*-
"""
This module contains scale-explicit decimal arithmetic helpers.

Every function takes its operands as Decimal, int, numeric string or float and
returns a Decimal carrying exactly ``scale`` digits after the decimal point.
Results are truncated toward zero, never rounded up.
"""
import decimal
from decimal import Decimal

# Wide enough that add, sub and mul of monetary values stay exact and that
# div and power are truncated far below the requested scale.
_CONTEXT = decimal.Context(
    prec=200,
    rounding=decimal.ROUND_DOWN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)


def to_decimal(value):
    """Convert an operand to Decimal. Floats go through str() first."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("Boolean values are not valid decimal operands.")
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation:
            raise ValueError(f"Value {value!r} is not a valid decimal number.")
        if not result.is_finite():
            raise ValueError(f"Value {value!r} is not a finite decimal number.")
        return result
    raise TypeError(f"Unsupported decimal operand type: {type(value).__name__}.")


def _exponent(scale):
    if isinstance(scale, bool) or not isinstance(scale, int) or scale < 0:
        raise ValueError(f"Scale must be a non-negative integer, got {scale!r}.")
    return Decimal(1).scaleb(-scale)


def quantize(value, scale):
    """Truncate a value to ``scale`` fractional digits."""
    result = to_decimal(value).quantize(_exponent(scale), rounding=decimal.ROUND_DOWN, context=_CONTEXT)
    if result.is_zero() and result.is_signed():
        result = result.copy_abs()
    return result


def add(a, b, scale):
    return quantize(_CONTEXT.add(to_decimal(a), to_decimal(b)), scale)


def sub(a, b, scale):
    return quantize(_CONTEXT.subtract(to_decimal(a), to_decimal(b)), scale)


def mul(a, b, scale):
    return quantize(_CONTEXT.multiply(to_decimal(a), to_decimal(b)), scale)


def div(a, b, scale):
    """Divide ``a`` by ``b``; raises decimal.DivisionByZero when ``b`` is zero."""
    divisor = to_decimal(b)
    if divisor.is_zero():
        raise decimal.DivisionByZero(f"Division by zero: {a} / {b}")
    return quantize(_CONTEXT.divide(to_decimal(a), divisor), scale)


def power(base, exponent, scale):
    """
    Raise ``base`` to an integral ``exponent``.

    A negative exponent gives the reciprocal of the positive power.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int):
        exponent_value = to_decimal(exponent)
        if exponent_value != exponent_value.to_integral_value():
            raise ValueError(f"Exponent must be an integer, got {exponent!r}.")
        exponent = int(exponent_value)
    base_value = to_decimal(base)
    if exponent == 0:
        return quantize(1, scale)
    if exponent < 0:
        return div(1, _CONTEXT.power(base_value, -exponent), scale)
    return quantize(_CONTEXT.power(base_value, exponent), scale)
