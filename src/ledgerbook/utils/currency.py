"""Currency formatting."""

from decimal import Decimal, ROUND_HALF_EVEN


def format_currency(amount: Decimal | float | int, symbol: str = "$") -> str:
    """Format an amount as en-US currency, e.g. "$1,234.56" or "-$1,234.56"."""
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
