"""
Enumerations shared by models and services.
"""

from enum import StrEnum


class LedgerEventType(StrEnum):
    """Audit event kinds emitted by the staking engine."""

    STAKED = "staked"
    REFERRAL_PAID = "referral_paid"
    CLAIMED = "claimed"
    WITHDRAWN = "withdrawn"


class StakingErrorCode(StrEnum):
    """Rejection kinds returned by staking operations."""

    INVALID_AMOUNT = "invalid_amount"
    INVALID_ADDRESS = "invalid_address"
    COOLDOWN_NOT_ELAPSED = "cooldown_not_elapsed"
    INSUFFICIENT_PRINCIPAL = "insufficient_principal"
    EXTERNAL_TRANSFER_FAILURE = "external_transfer_failure"
    NOT_STAKED = "not_staked"


class TransferFailure(StrEnum):
    """Reasons the asset ledger refuses a transfer."""

    INSUFFICIENT_FUNDS = "insufficient_funds"
    INSUFFICIENT_ALLOWANCE = "insufficient_allowance"
    INVALID_AMOUNT = "invalid_amount"


class InvariantViolation(StrEnum):
    """Pool accounting checks reported by the invariant checker."""

    TOTAL_STAKED_MISMATCH = "total_staked_mismatch"
    SELF_REFERRAL = "self_referral"
