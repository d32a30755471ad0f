"""pt-BR display formatting for dashboard values."""

from datetime import datetime

_SWAP_SEPARATORS = str.maketrans(",.", ".,")


def format_number(value: int | float) -> str:
    """``1234`` -> ``1.234``."""
    return f"{value:,.0f}".translate(_SWAP_SEPARATORS)


def format_currency(value: int | float) -> str:
    """``1234.5`` -> ``R$ 1.234,50``."""
    return f"R$ {value:,.2f}".translate(_SWAP_SEPARATORS)


def format_timestamp(value: datetime) -> str:
    """``datetime`` -> ``19/10/2026, 14:03:22`` in local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime("%d/%m/%Y, %H:%M:%S")
