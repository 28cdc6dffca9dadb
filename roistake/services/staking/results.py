"""
Staking result types.

Plain value objects returned by the staking engine. They never hold
ORM instances, so they stay valid after the session commits or rolls back.
"""

from dataclasses import dataclass, field

from roistake.models.enums import LedgerEventType


@dataclass(frozen=True)
class StakingEvent:
    """Event emitted by an operation (also persisted as LedgerEvent)."""

    event_type: LedgerEventType
    participant: str
    amount: int
    counterparty: str | None = None


@dataclass(frozen=True)
class StakeReceipt:
    """Outcome of a successful stake."""

    participant: str
    amount: int
    staked_amount: int
    referrer: str | None
    referrer_assigned: bool
    referral_bonus: int
    events: list[StakingEvent] = field(default_factory=list)


@dataclass(frozen=True)
class ClaimReceipt:
    """Outcome of a yield settlement."""

    participant: str
    owed: int
    paid: int
    shortfall: int
    claimed_at: int
    events: list[StakingEvent] = field(default_factory=list)

    @property
    def degraded(self) -> bool:
        """Pool paid less than owed."""
        return self.shortfall > 0


@dataclass(frozen=True)
class WithdrawalReceipt:
    """Outcome of a successful withdrawal."""

    participant: str
    claimed_amount: int
    withdrawn_amount: int
    staked_amount: int
    claim: ClaimReceipt | None = None
    events: list[StakingEvent] = field(default_factory=list)


@dataclass(frozen=True)
class UserInfo:
    """Read-only view of a participant record."""

    address: str
    staked_amount: int = 0
    last_claim_time: int | None = None
    total_claimed: int = 0
    referrer: str | None = None
    next_claim_time: int | None = None

    def as_tuple(self) -> tuple[int, int | None, int, str | None]:
        """(staked_amount, last_claim_time, total_claimed, referrer)."""
        return (
            self.staked_amount,
            self.last_claim_time,
            self.total_claimed,
            self.referrer,
        )


@dataclass(frozen=True)
class PoolInfo:
    """Read-only view of pool accounting."""

    pool_address: str
    total_staked: int
    pool_balance: int
    participant_count: int

    @property
    def surplus(self) -> int:
        """Custody balance above pooled principal (negative when underfunded)."""
        return self.pool_balance - self.total_staked
