# -*- coding: utf-8 -*-
"""
This module contains dataclasses for the PaymentCalculator classes.
"""
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal

from ._dates import normalize_start_time, to_timestamp
from ._decimal_math import to_decimal
from ._validators import (
    validate_decimal_amount,
    validate_amount_precision,
    validate_positive_integer,
    validate_non_negative_integer,
    validate_start_time,
)


@dataclass(frozen=True)
class LoanParameters:
    """
    The inputs of one loan calculation.

    :param principal: The amount borrowed.
    :param year_interest_rate: The annual nominal interest rate, 0.10 for 10%.
    :param months: The number of monthly repayment periods.
    :param start_time: The disbursement time, period k is due k months later.
    :param decimal_digits: The number of fractional digits reported amounts carry.
    """
    principal: Decimal
    year_interest_rate: Decimal
    months: int
    start_time: datetime
    decimal_digits: int = 2

    @classmethod
    def create(cls, principal, year_interest_rate, months, start_time, decimal_digits=2):
        validate_decimal_amount(principal, "PRINCIPAL")
        validate_decimal_amount(year_interest_rate, "YEAR_INTEREST_RATE", allow_zero=True)
        validate_positive_integer(months, "MONTHS")
        validate_start_time(start_time, "START_TIME")
        validate_non_negative_integer(decimal_digits, "DECIMAL_DIGITS")
        validate_amount_precision(principal, "PRINCIPAL", decimal_digits)
        return cls(
            principal=to_decimal(principal),
            year_interest_rate=to_decimal(year_interest_rate),
            months=months,
            start_time=normalize_start_time(start_time),
            decimal_digits=decimal_digits,
        )

    @classmethod
    def from_mapping(cls, mapping):
        """Build the parameters from a configuration mapping keyed by field name."""
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(mapping) - known)
        if unknown:
            raise ValueError(f"Unknown loan parameter(s): {', '.join(unknown)}.")
        missing = sorted(name for name in known - {'decimal_digits'} if name not in mapping)
        if missing:
            raise ValueError(f"Missing loan parameter(s): {', '.join(missing)}.")
        return cls.create(**mapping)


@dataclass
class PaymentPlanPeriod:
    period: int
    principal: Decimal
    interest: Decimal
    total_money: Decimal
    due_time: datetime
    remaining_principal: Decimal
    remaining_interest: Decimal

    @property
    def time(self):
        """Unix timestamp of the due time."""
        return to_timestamp(self.due_time)

    def as_dict(self):
        return {
            'period': self.period,
            'principal': str(self.principal),
            'interest': str(self.interest),
            'total_money': str(self.total_money),
            'time': self.time,
            'remain_principal': str(self.remaining_principal),
            'remain_interest': str(self.remaining_interest),
        }


@dataclass
class LoanSummary:
    loan_amount: Decimal
    total_principal_amount: Decimal
    total_interest_amount: Decimal
    total_payment_amount: Decimal
    total_period: int
    first_payment_amount: Decimal
    last_due_time: datetime
