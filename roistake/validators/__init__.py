"""
Input validators.

Each validator returns a tuple of (is_valid, parsed_value, error_message).
"""

from roistake.validators.unified import (
    normalize_address,
    normalize_optional_address,
    validate_address,
    validate_token_amount,
)

__all__ = [
    "normalize_address",
    "normalize_optional_address",
    "validate_address",
    "validate_token_amount",
]
