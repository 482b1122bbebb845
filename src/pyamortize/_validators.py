# -*- coding: utf-8 -*-
"""
This module contains validator functions for the PaymentCalculator classes.
"""
import datetime as dt
from decimal import Decimal
from dateutil.parser import isoparse

from ._enums import RepaymentMethod


def _is_integer(value):
    return isinstance(value, int) and not isinstance(value, bool)


def validate_decimal_amount(value, name, allow_zero=False):
    """Validate that a value is a finite number, positive or (optionally) zero."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise TypeError(f"Variable {name} can only be of type integer, float, string or Decimal.")
    try:
        number = Decimal(str(value).strip())
    except ArithmeticError:
        raise ValueError(f"Variable {name} must be a valid decimal number, got {value!r}.")
    if not number.is_finite():
        raise ValueError(f"Variable {name} must be a finite number.")
    if allow_zero and number < 0:
        raise ValueError(f"Variable {name} can only be non-negative.")
    if not allow_zero and number <= 0:
        raise ValueError(f"Variable {name} can only be greater than 0.")


def validate_amount_precision(value, name, decimal_digits):
    """Validate that a positive amount is at least one unit at ``decimal_digits``."""
    if Decimal(str(value).strip()) < Decimal(1).scaleb(-decimal_digits):
        raise ValueError(f"Variable {name} must be at least one unit at {decimal_digits} decimal digits.")


def validate_positive_integer(value, name):
    """Validate that a value is a positive integer."""
    if not _is_integer(value):
        raise TypeError(f"Variable {name} can only be of type integer.")
    if value < 1:
        raise ValueError(f"Variable {name} can only be integers greater or equal to 1.")


def validate_non_negative_integer(value, name):
    """Validate that a value is an integer greater or equal to 0."""
    if not _is_integer(value):
        raise TypeError(f"Variable {name} can only be of type integer.")
    if value < 0:
        raise ValueError(f"Variable {name} can only be integers greater or equal to 0.")


def validate_start_time(value, name):
    """Validate that a value is a datetime, a date, a Unix timestamp or an ISO-8601 string."""
    if isinstance(value, (dt.datetime, dt.date)):
        return
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return
    if isinstance(value, str):
        try:
            isoparse(value)
        except ValueError:
            raise ValueError(f"Variable {name} must be a valid ISO-8601 date or datetime string.")
        return
    raise TypeError(f"Variable {name} must be a datetime, a date, a Unix timestamp or an ISO-8601 string.")


def validate_repayment_method(value, name):
    """Validate that a value names a known repayment method."""
    if isinstance(value, RepaymentMethod):
        return
    if not isinstance(value, str):
        raise TypeError(f"Attribute {name} must be of type string or RepaymentMethod")
    try:
        RepaymentMethod(value)
    except ValueError:
        valid_methods = [item.value for item in RepaymentMethod]
        raise ValueError(f"Attribute {name} must be set to one of the following: {', '.join(valid_methods)}.")
