from models import InvoiceBreakdown

from .calculator import MINOR_UNITS


def format_amount(amount: float, currency: str = 'INR') -> str:
    return f'{currency} {amount:,.2f}'


def format_price(minor_amount: float, currency: str = 'INR') -> str:
    """Render an amount held in minor units (e.g. paise) as major units."""
    return format_amount(minor_amount / MINOR_UNITS, currency)


def format_total(breakdown: InvoiceBreakdown) -> str:
    return f'{breakdown.total:.2f}'
