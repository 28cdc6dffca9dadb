"""
Staking engine.

Submodules:
- service: StakingService facade
- stake_processor: principal intake and referral bonus
- yield_processor: yield settlement with degraded payout
- withdrawal_processor: auto-claim and principal return
- referral_resolver: referrer validity rules
- event_recorder: audit events
- results: value objects returned to callers
"""

from .results import (
    ClaimReceipt,
    PoolInfo,
    StakeReceipt,
    StakingEvent,
    UserInfo,
    WithdrawalReceipt,
)
from .service import StakingService, terms_from_settings


__all__ = [
    "StakingService",
    "terms_from_settings",
    "ClaimReceipt",
    "PoolInfo",
    "StakeReceipt",
    "StakingEvent",
    "UserInfo",
    "WithdrawalReceipt",
]
