"""
Value Objects for the domain layer.
Currencies, exchange rates and money formatting.
"""

from typing import Dict, Optional
from decimal import Decimal, ROUND_HALF_UP
from dataclasses import dataclass
from enum import Enum


class Currency(str, Enum):
    """Supported currencies."""
    USD = "USD"
    BDT = "BDT"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"


DEFAULT_CURRENCY = Currency.USD.value


@dataclass(frozen=True)
class CurrencyInfo:
    """Display information for a currency."""
    code: str
    name: str
    symbol: str


CURRENCIES: Dict[str, CurrencyInfo] = {
    "USD": CurrencyInfo("USD", "US Dollar", "$"),
    "BDT": CurrencyInfo("BDT", "Bangladeshi Taka", "৳"),
    "GBP": CurrencyInfo("GBP", "British Pound", "£"),
    "EUR": CurrencyInfo("EUR", "Euro", "€"),
    "CAD": CurrencyInfo("CAD", "Canadian Dollar", "C$"),
}

# Value of one unit in USD
EXCHANGE_RATES: Dict[str, float] = {
    "USD": 1.0,
    "BDT": 0.0091,
    "GBP": 1.29,
    "EUR": 1.09,
    "CAD": 0.74,
}


def _round2(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def convert_currency(
    amount: Optional[float],
    from_currency: Optional[str],
    to_currency: str = DEFAULT_CURRENCY
) -> float:
    """
    Convert an amount between currencies through USD.
    Unknown currencies are treated as USD.
    """
    if amount is None:
        return 0.0
    if not from_currency or not to_currency or from_currency == to_currency:
        return amount

    from_rate = EXCHANGE_RATES.get(from_currency, 1.0)
    to_rate = EXCHANGE_RATES.get(to_currency, 1.0)
    return _round2(amount * from_rate / to_rate)


def format_currency(amount: Optional[float] = 0, currency_code: str = DEFAULT_CURRENCY) -> str:
    """Format an amount with its currency symbol."""
    info = CURRENCIES.get(currency_code)
    value = amount or 0
    if info is None:
        return f"{currency_code} {value:,.2f}"
    return f"{info.symbol}{value:,.2f}"
