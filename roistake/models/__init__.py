"""
Database models.

Exports all SQLAlchemy models for easy imports.
"""

from roistake.models.base import Base
from roistake.models.enums import (
    InvariantViolation,
    LedgerEventType,
    StakingErrorCode,
    TransferFailure,
)
from roistake.models.ledger_event import LedgerEvent
from roistake.models.participant import Participant
from roistake.models.pool_state import PoolState
from roistake.models.token_account import TokenAllowance, TokenBalance

__all__ = [
    # Base
    "Base",
    # Enums
    "InvariantViolation",
    "LedgerEventType",
    "StakingErrorCode",
    "TransferFailure",
    # Staking
    "Participant",
    "PoolState",
    "LedgerEvent",
    # Asset ledger
    "TokenBalance",
    "TokenAllowance",
]
