"""Number formatting for axis labels and tooltips."""

from decimal import Decimal

from wallet_history.shared.models.enums import ValueFormat

DEFAULT_CURRENCY_SYMBOL = "CW"
DEFAULT_DECIMALS = 2


def format_value(
    value: Decimal | float | int,
    value_format: ValueFormat = ValueFormat.PLAIN,
    *,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    decimals: int = DEFAULT_DECIMALS,
) -> str:
    """
    Format a balance for display.

    Args:
        value: Amount to print
        value_format: PLAIN ("1,234.50") or CURRENCY ("1,234.50 CW")
        currency_symbol: Unit appended in CURRENCY mode
        decimals: Fixed number of decimal places

    Returns:
        Formatted string
    """
    text = f"{value:,.{decimals}f}"
    if ValueFormat(value_format) is ValueFormat.CURRENCY:
        return f"{text} {currency_symbol}"
    return text
