"""
Participant model.

One record per address that has ever staked into the pool.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from roistake.models.base import Base
from roistake.models.types import AddressType, TokenAmount


class Participant(Base):
    """Participant record - principal, accrual clock and referrer."""

    __tablename__ = "participants"
    __table_args__ = (
        CheckConstraint(
            'referrer IS NULL OR referrer <> address',
            name='check_participant_not_self_referred'
        ),
        CheckConstraint(
            'last_claim_time IS NULL OR last_claim_time >= 0',
            name='check_participant_last_claim_time_non_negative'
        ),
    )

    # Checksummed account address
    address: Mapped[str] = mapped_column(AddressType, primary_key=True)

    # Principal currently held in the pool
    staked_amount: Mapped[int] = mapped_column(
        TokenAmount, nullable=False, default=0
    )

    # Unix seconds of the last (full or partial) yield payout
    last_claim_time: Mapped[int | None] = mapped_column(
        BigInteger, nullable=True
    )

    # Cumulative yield ever paid
    total_claimed: Mapped[int] = mapped_column(
        TokenAmount, nullable=False, default=0
    )

    # Immutable once set
    referrer: Mapped[str | None] = mapped_column(
        String(42), nullable=True, index=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<Participant(address={self.address}, "
            f"staked_amount={self.staked_amount}, "
            f"last_claim_time={self.last_claim_time}, "
            f"referrer={self.referrer})>"
        )

    @property
    def is_active(self) -> bool:
        """Participant currently has principal in the pool."""
        return (self.staked_amount or 0) > 0
