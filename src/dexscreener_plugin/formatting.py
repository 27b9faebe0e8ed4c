"""Pure numeric formatters for pair prices, price changes and USD amounts.

All inputs are normalized to Decimal before formatting so upstream
string prices ("0.00001234") and JSON numbers render identically.
"""

from decimal import Decimal

PRICE_WHOLE = Decimal("1")
PRICE_CENTS = Decimal("0.01")

MILLION = Decimal("1000000")
THOUSAND = Decimal("1000")


def _to_decimal(value: Decimal | float | int | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def format_price(price: Decimal | float | int | str) -> str:
    """Format a price with precision tiered by magnitude.

    >= 1 uses 2 decimals, >= 0.01 uses 4, anything smaller uses 8.
    Always fixed notation, never scientific.
    """
    value = _to_decimal(price)
    if value >= PRICE_WHOLE:
        return f"{value:.2f}"
    if value >= PRICE_CENTS:
        return f"{value:.4f}"
    return f"{value:.8f}"


def format_price_change(change: Decimal | float | int | str) -> str:
    """Format a percentage change as ``+5.50%`` / ``-3.25%``."""
    value = _to_decimal(change)
    if value >= 0:
        # abs() drops the sign of Decimal("-0")
        return f"+{abs(value):.2f}%"
    return f"{value:.2f}%"


def format_usd_value(value: Decimal | float | int | str) -> str:
    """Format a USD amount with an M/K suffix above a thousand."""
    amount = _to_decimal(value)
    if amount >= MILLION:
        return f"${amount / MILLION:.2f}M"
    if amount >= THOUSAND:
        return f"${amount / THOUSAND:.2f}K"
    return f"${amount:.2f}"
