from unittest import TestCase

from models import InvoiceBreakdown
from pricing import format_amount, format_price, format_total


class TestFormat(TestCase):
    def test_format_price(self) -> None:
        self.assertEqual(format_price(49900, 'INR'), 'INR 499.00')
        self.assertEqual(format_price(123456789, 'USD'), 'USD 1,234,567.89')

    def test_format_amount(self) -> None:
        self.assertEqual(format_amount(2), 'INR 2.00')

    def test_format_total(self) -> None:
        breakdown = InvoiceBreakdown(base_price=0, setup_fee=0, platform_fee=0, seat_charge=0, total=12.4)

        self.assertEqual(format_total(breakdown), '12.40')
