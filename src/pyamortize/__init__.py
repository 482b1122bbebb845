# -*- coding: utf-8 -*-
from ._enums import RepaymentMethod
from ._models import LoanParameters, PaymentPlanPeriod, LoanSummary
from .pyamortize import (
    PaymentCalculator,
    EqualTotalPaymentCalculator,
    EqualPrincipalCalculator,
    MonthlyInterestCalculator,
    OnceRepaymentCalculator,
    CALCULATORS,
    create_calculator,
)

__version__ = '1.0.0'

__all__ = [
    'RepaymentMethod',
    'LoanParameters',
    'PaymentPlanPeriod',
    'LoanSummary',
    'PaymentCalculator',
    'EqualTotalPaymentCalculator',
    'EqualPrincipalCalculator',
    'MonthlyInterestCalculator',
    'OnceRepaymentCalculator',
    'CALCULATORS',
    'create_calculator',
]
