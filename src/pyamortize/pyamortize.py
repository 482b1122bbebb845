# -*- coding: utf-8 -*-
import abc
import logging
from ._decimal_math import add, sub, mul, div, power, quantize
from ._validators import validate_repayment_method
from ._enums import RepaymentMethod
from ._dates import add_months
from ._models import LoanParameters, PaymentPlanPeriod, LoanSummary

_LOG = logging.getLogger(__name__)

# Extra fractional digits carried by intermediate results.
EXTRA_DIGITS = 5


class PaymentCalculator(abc.ABC):
    """
    The PaymentCalculator class is the shared contract of all repayment methods.

    A calculator is built for exactly one loan. Subclasses set the total period
    count in ``init`` and provide the per-period principal and interest; the
    schedule loop, the final period reconciliation and the clamping of
    negative interest live here so every method follows the same discipline.

    :param principal: The amount borrowed.
    :param year_interest_rate: The annual nominal interest rate, 0.10 for 10%.
    :param months: The loan term in months.
    :param start_time: The disbursement time (datetime, date, Unix timestamp or ISO string).
    :param decimal_digits: The number of fractional digits of reported amounts.
    """

    def __init__(self, principal, year_interest_rate, months, start_time, decimal_digits=2):
        self.parameters = LoanParameters.create(principal, year_interest_rate, months, start_time, decimal_digits)
        self.total_period = None
        self.init()
        _LOG.debug("%s created: principal=%s, year_interest_rate=%s, months=%d, total_period=%d",
                   type(self).__name__, self.principal, self.year_interest_rate, self.months, self.total_period)

    @classmethod
    def from_parameters(cls, parameters):
        return cls(parameters.principal, parameters.year_interest_rate, parameters.months,
                   parameters.start_time, parameters.decimal_digits)

    @property
    def principal(self):
        return self.parameters.principal

    @property
    def year_interest_rate(self):
        return self.parameters.year_interest_rate

    @property
    def months(self):
        return self.parameters.months

    @property
    def start_time(self):
        return self.parameters.start_time

    @property
    def decimal_digits(self):
        return self.parameters.decimal_digits

    @property
    def internal_digits(self):
        """Scale of intermediate results."""
        return self.decimal_digits + EXTRA_DIGITS

    @property
    def monthly_interest_rate(self):
        return div(self.year_interest_rate, 12, self.internal_digits)

    def _zero(self):
        return quantize(0, self.decimal_digits)

    @abc.abstractmethod
    def init(self):
        """Set up the method, at least ``self.total_period``."""

    def get_total_period(self):
        return self.total_period

    @abc.abstractmethod
    def get_total_interest(self):
        """Return the interest paid over the life of the loan."""

    @abc.abstractmethod
    def _calc_period(self, period):
        """Return the (principal, interest) due in ``period`` before reconciliation."""

    def _get_due_time(self, period):
        return add_months(self.start_time, period)

    def get_plan_lists(self):
        """
        Calculates the repayment plan of the loan.

        The last period is recomputed as the totals minus everything paid
        before it, so the periods always add up to the principal and to the
        total interest whatever rounding happened on the way.

        :return: A list of PaymentPlanPeriod objects, one per period in order.
        """
        digits = self.decimal_digits
        total_interest = self.get_total_interest()
        paid_principal = self._zero()
        paid_interest = self._zero()

        plan_lists = []
        for period in range(1, self.total_period + 1):
            principal, interest = self._calc_period(period)
            if period == self.total_period:
                principal = sub(self.principal, paid_principal, digits)
                interest = sub(total_interest, paid_interest, digits)
            if interest < 0:
                interest = self._zero()

            paid_principal = add(paid_principal, principal, digits)
            paid_interest = add(paid_interest, interest, digits)
            remaining_principal = sub(self.principal, paid_principal, digits)
            remaining_interest = sub(total_interest, paid_interest, digits)
            if remaining_interest < 0:
                remaining_interest = self._zero()

            plan_lists.append(PaymentPlanPeriod(
                period=period,
                principal=principal,
                interest=interest,
                total_money=add(principal, interest, digits),
                due_time=self._get_due_time(period),
                remaining_principal=remaining_principal,
                remaining_interest=remaining_interest,
            ))

        _LOG.debug("%s built %d periods, total interest %s",
                   type(self).__name__, len(plan_lists), total_interest)
        return plan_lists

    def get_loan_summary(self):
        """
        Calculates the loan summary.

        :return: A LoanSummary object.
        """
        digits = self.decimal_digits
        plan_lists = self.get_plan_lists()
        total_principal_amount = self._zero()
        total_interest_amount = self._zero()
        for plan in plan_lists:
            total_principal_amount = add(total_principal_amount, plan.principal, digits)
            total_interest_amount = add(total_interest_amount, plan.interest, digits)

        return LoanSummary(
            loan_amount=quantize(self.principal, digits),
            total_principal_amount=total_principal_amount,
            total_interest_amount=total_interest_amount,
            total_payment_amount=add(total_principal_amount, total_interest_amount, digits),
            total_period=self.total_period,
            first_payment_amount=plan_lists[0].total_money,
            last_due_time=plan_lists[-1].due_time,
        )


class EqualTotalPaymentCalculator(PaymentCalculator):
    """
    Equal total payment (French amortization).

    Every period pays the same amount; the principal share grows and the
    interest share shrinks as the loan is repaid. With r the monthly rate and
    n the number of months:

        monthly payment      M    = P * r * (1+r)^n / ((1+r)^n - 1)
        principal, period k  Pr_k = P * r * (1+r)^(k-1) / ((1+r)^n - 1)
        interest, period k   I_k  = M - Pr_k
        total interest            = n * M - P

    A zero rate makes the denominator vanish, so it degrades to P / n.
    """

    def init(self):
        self.total_period = self.months
        self.monthly_payment_money = self.calc_monthly_payment_money()

    def _is_interest_free(self):
        return self.monthly_interest_rate.is_zero()

    def _growth(self, exponent):
        """(1 + r) ** exponent"""
        digits = self.internal_digits
        return power(add(1, self.monthly_interest_rate, digits), exponent, digits)

    def _annuity_denominator(self):
        return sub(self._growth(self.months), 1, self.internal_digits)

    def calc_monthly_payment_money(self):
        """Return the installment paid every period (principal + interest)."""
        digits = self.internal_digits
        if self._is_interest_free():
            return div(self.principal, self.months, digits)
        result = mul(self.principal, self.monthly_interest_rate, digits)
        result = mul(result, self._growth(self.months), digits)
        return div(result, self._annuity_denominator(), digits)

    def calc_monthly_principal(self, period):
        if self._is_interest_free():
            return div(self.principal, self.months, self.decimal_digits)
        digits = self.internal_digits
        result = mul(self.principal, self.monthly_interest_rate, digits)
        result = mul(result, self._growth(period - 1), digits)
        return div(result, self._annuity_denominator(), self.decimal_digits)

    def calc_monthly_interest(self, period):
        """Closed-form interest of ``period``, at the internal scale."""
        digits = self.internal_digits
        if self._is_interest_free():
            return quantize(0, digits)
        result = mul(self.principal, self.monthly_interest_rate, digits)
        result = mul(result, sub(self._growth(self.months), self._growth(period - 1), digits), digits)
        return div(result, self._annuity_denominator(), digits)

    def get_total_interest(self):
        if self._is_interest_free():
            return self._zero()
        result = mul(self.monthly_payment_money, self.months, self.internal_digits)
        total_interest = sub(result, self.principal, self.decimal_digits)
        # A truncated rate can leave n * M just below P on tiny rates.
        if total_interest < 0:
            return self._zero()
        return total_interest

    def _calc_period(self, period):
        principal = self.calc_monthly_principal(period)
        # Derived from the installment so that principal + interest == M.
        interest = sub(self.monthly_payment_money, principal, self.decimal_digits)
        return principal, interest


class EqualPrincipalCalculator(PaymentCalculator):
    """
    Equal principal: P / n of principal every period, interest on the
    outstanding balance, so installments decline over time.

        interest, period k  I_k = (P - (k-1) * P / n) * r
        total interest          = (n + 1) * P * r / 2
    """

    def init(self):
        self.total_period = self.months

    def calc_monthly_principal(self):
        return div(self.principal, self.months, self.decimal_digits)

    def calc_monthly_interest(self, period):
        digits = self.internal_digits
        repaid = mul(div(self.principal, self.months, digits), period - 1, digits)
        outstanding = sub(self.principal, repaid, digits)
        return mul(outstanding, self.monthly_interest_rate, self.decimal_digits)

    def get_total_interest(self):
        digits = self.internal_digits
        result = mul(self.principal, self.monthly_interest_rate, digits)
        result = mul(result, self.months + 1, digits)
        return div(result, 2, self.decimal_digits)

    def _calc_period(self, period):
        return self.calc_monthly_principal(), self.calc_monthly_interest(period)


class MonthlyInterestCalculator(PaymentCalculator):
    """
    Interest only: each period pays P * r of interest and the whole principal
    is repaid with the last period.
    """

    def init(self):
        self.total_period = self.months

    def calc_monthly_interest(self):
        return mul(self.principal, self.monthly_interest_rate, self.decimal_digits)

    def get_total_interest(self):
        result = mul(self.principal, self.monthly_interest_rate, self.internal_digits)
        return mul(result, self.months, self.decimal_digits)

    def _calc_period(self, period):
        return self._zero(), self.calc_monthly_interest()


class OnceRepaymentCalculator(PaymentCalculator):
    """
    Principal and interest are repaid together in a single payment at maturity.

    The plan has one period, due ``months`` months after the start time.
    """

    def init(self):
        self.total_period = 1

    def get_total_interest(self):
        result = mul(self.principal, self.monthly_interest_rate, self.internal_digits)
        return mul(result, self.months, self.decimal_digits)

    def _calc_period(self, period):
        return quantize(self.principal, self.decimal_digits), self.get_total_interest()

    def _get_due_time(self, period):
        return add_months(self.start_time, self.months)


CALCULATORS = {
    RepaymentMethod.EQUAL_TOTAL_PAYMENT: EqualTotalPaymentCalculator,
    RepaymentMethod.EQUAL_PRINCIPAL: EqualPrincipalCalculator,
    RepaymentMethod.MONTHLY_INTEREST: MonthlyInterestCalculator,
    RepaymentMethod.ONCE_REPAYMENT: OnceRepaymentCalculator,
}


def create_calculator(method, principal, year_interest_rate, months, start_time, decimal_digits=2):
    """
    Creates the calculator of a repayment method.

    :param method: A RepaymentMethod or its string value, e.g. 'equal_principal'.
    :return: A PaymentCalculator instance.
    """
    validate_repayment_method(method, "REPAYMENT_METHOD")
    calculator_class = CALCULATORS[RepaymentMethod(method)]
    return calculator_class(principal, year_interest_rate, months, start_time, decimal_digits)
