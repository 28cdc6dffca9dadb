"""
Standard type definitions for database models.

Provides consistent types for token amounts and account addresses.
"""

from typing import Any

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

# Checksummed 0x-prefixed address: 42 characters
AddressType = String(42)


class TokenAmount(TypeDecorator):
    """
    Unsigned integer token amount in base units.

    Amounts span the full uint256 range, which overflows BIGINT and
    loses precision in SQLite NUMERIC columns, so values are stored as
    their decimal string and returned as Python ``int``.
    """

    impl = String(80)
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        amount = int(value)
        if amount < 0:
            raise ValueError(f"Token amount cannot be negative: {amount}")
        return str(amount)

    def process_result_value(self, value: Any, dialect: Dialect) -> int | None:
        if value is None:
            return None
        return int(value)
