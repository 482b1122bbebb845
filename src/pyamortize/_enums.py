# -*- coding: utf-8 -*-
"""
This module contains enums for the PaymentCalculator classes.
"""
from enum import Enum


class RepaymentMethod(Enum):
    EQUAL_TOTAL_PAYMENT = 'equal_total_payment'
    EQUAL_PRINCIPAL = 'equal_principal'
    MONTHLY_INTEREST = 'monthly_interest'
    ONCE_REPAYMENT = 'once_repayment'
