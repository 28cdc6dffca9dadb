"""
Utility functions for yield calculator.
"""

from yield_calculator.utils.formatters import (
    format_bps,
    format_duration,
    format_token_amount,
    to_display_amount,
)

__all__ = [
    "format_bps",
    "format_duration",
    "format_token_amount",
    "to_display_amount",
]
