import unittest
import datetime as dt
from decimal import Decimal
from pyamortize import LoanParameters, RepaymentMethod
from pyamortize._validators import validate_repayment_method

START = dt.datetime(2018, 3, 20, 10, 5)


class TestLoanParameters(unittest.TestCase):

    def test_create_normalizes_inputs(self):
        params = LoanParameters.create(10000, '0.10', 12, START)
        self.assertEqual(params.principal, Decimal('10000'))
        self.assertEqual(params.year_interest_rate, Decimal('0.10'))
        self.assertEqual(params.months, 12)
        self.assertEqual(params.decimal_digits, 2)
        self.assertEqual(params.start_time, START.replace(tzinfo=dt.timezone.utc))

    def test_principal_must_be_positive(self):
        for value in (0, -1, '0.00', Decimal('-5')):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    LoanParameters.create(value, '0.10', 12, START)

    def test_principal_must_reach_one_unit_at_decimal_digits(self):
        with self.assertRaises(ValueError):
            LoanParameters.create('0.001', '0.10', 12, START)
        with self.assertRaises(ValueError):
            LoanParameters.create('0.9', '0.10', 12, START, 0)
        self.assertEqual(LoanParameters.create('0.001', '0.10', 12, START, 3).principal, Decimal('0.001'))
        self.assertEqual(LoanParameters.create('0.01', '0.10', 12, START).principal, Decimal('0.01'))

    def test_principal_type(self):
        with self.assertRaises(TypeError):
            LoanParameters.create(True, '0.10', 12, START)
        with self.assertRaises(TypeError):
            LoanParameters.create(None, '0.10', 12, START)
        with self.assertRaises(ValueError):
            LoanParameters.create('abc', '0.10', 12, START)
        with self.assertRaises(ValueError):
            LoanParameters.create(float('inf'), '0.10', 12, START)

    def test_interest_rate_may_be_zero_but_not_negative(self):
        self.assertEqual(LoanParameters.create(10000, 0, 12, START).year_interest_rate, Decimal('0'))
        with self.assertRaises(ValueError):
            LoanParameters.create(10000, '-0.01', 12, START)

    def test_months(self):
        with self.assertRaises(ValueError):
            LoanParameters.create(10000, '0.10', 0, START)
        with self.assertRaises(TypeError):
            LoanParameters.create(10000, '0.10', 1.5, START)
        with self.assertRaises(TypeError):
            LoanParameters.create(10000, '0.10', True, START)

    def test_decimal_digits(self):
        self.assertEqual(LoanParameters.create(10000, '0.10', 12, START, 0).decimal_digits, 0)
        with self.assertRaises(ValueError):
            LoanParameters.create(10000, '0.10', 12, START, -1)
        with self.assertRaises(TypeError):
            LoanParameters.create(10000, '0.10', 12, START, '2')

    def test_start_time(self):
        with self.assertRaises(TypeError):
            LoanParameters.create(10000, '0.10', 12, None)
        with self.assertRaises(ValueError):
            LoanParameters.create(10000, '0.10', 12, 'not a date')

    def test_parameters_are_immutable(self):
        params = LoanParameters.create(10000, '0.10', 12, START)
        with self.assertRaises(AttributeError):
            params.months = 24

    def test_from_mapping(self):
        params = LoanParameters.from_mapping({
            'principal': '10000',
            'year_interest_rate': '0.10',
            'months': 12,
            'start_time': '2018-03-20T10:05:00',
        })
        self.assertEqual(params.principal, Decimal('10000'))
        self.assertEqual(params.decimal_digits, 2)

    def test_from_mapping_rejects_unknown_and_missing_keys(self):
        with self.assertRaises(ValueError):
            LoanParameters.from_mapping({'principal': 1, 'year_interest_rate': 0, 'months': 1,
                                         'start_time': START, 'currency': 'EUR'})
        with self.assertRaises(ValueError):
            LoanParameters.from_mapping({'principal': 1, 'months': 1, 'start_time': START})


class TestRepaymentMethodValidator(unittest.TestCase):

    def test_valid_methods(self):
        validate_repayment_method(RepaymentMethod.EQUAL_PRINCIPAL, "METHOD")
        validate_repayment_method('monthly_interest', "METHOD")

    def test_invalid_methods(self):
        with self.assertRaises(ValueError):
            validate_repayment_method('balloon', "METHOD")
        with self.assertRaises(TypeError):
            validate_repayment_method(1, "METHOD")


if __name__ == '__main__':
    unittest.main()
