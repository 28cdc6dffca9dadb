"""
Services.

Business logic layer.
"""

from roistake.services.base_service import (
    BaseService,
    ServiceResult,
    log_operation,
    transaction,
)
from roistake.services.staking import StakingService
from roistake.services.token_ledger import (
    DatabaseTokenLedger,
    FungibleAssetLedger,
    TransferResult,
)

__all__ = [
    "BaseService",
    "ServiceResult",
    "log_operation",
    "transaction",
    "StakingService",
    "DatabaseTokenLedger",
    "FungibleAssetLedger",
    "TransferResult",
]
