"""
Fungible asset ledger.

Interface consumed by the staking engine and the database adapter.
"""

from roistake.services.token_ledger.base import FungibleAssetLedger, TransferResult
from roistake.services.token_ledger.database_ledger import DatabaseTokenLedger

__all__ = [
    "DatabaseTokenLedger",
    "FungibleAssetLedger",
    "TransferResult",
]
