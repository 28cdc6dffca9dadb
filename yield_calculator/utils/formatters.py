"""
Formatting utilities for token amounts and rates.
"""

from decimal import Decimal


def to_display_amount(amount: int, decimals: int = 18) -> Decimal:
    """
    Convert base units to a decimal token amount.

    Example:
        >>> to_display_amount(1_500_000_000_000_000_000)
        Decimal('1.5')
    """
    return Decimal(amount) / (Decimal(10) ** decimals)


def format_token_amount(
    amount: int,
    symbol: str = "TT",
    decimals: int = 18,
    precision: int = 4,
) -> str:
    """
    Format base units as a human-readable token amount.

    Example:
        >>> format_token_amount(10 * 10**18)
        '10.0000 TT'
    """
    value = to_display_amount(amount, decimals)
    return f"{value:,.{precision}f} {symbol}"


def format_bps(bps: int, decimals: int = 2) -> str:
    """
    Format basis points as a percentage.

    Example:
        >>> format_bps(50)
        '0.50%'
    """
    return f"{Decimal(bps) / 100:.{decimals}f}%"


def format_duration(seconds: int) -> str:
    """
    Format seconds as ``Xh Ym Zs``.

    Example:
        >>> format_duration(3725)
        '1h 2m 5s'
    """
    seconds = max(seconds, 0)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"
