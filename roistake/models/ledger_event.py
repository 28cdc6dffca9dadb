"""
Ledger event model.

Append-only audit log of staking engine events.
"""

from datetime import UTC, datetime

from sqlalchemy import BigInteger, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from roistake.models.base import Base
from roistake.models.types import AddressType, TokenAmount


class LedgerEvent(Base):
    """Ledger event - Staked, ReferralPaid, Claimed or Withdrawn."""

    __tablename__ = "ledger_events"
    __table_args__ = (
        Index('idx_ledger_event_participant', 'participant'),
        Index('idx_ledger_event_type', 'event_type'),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    event_type: Mapped[str] = mapped_column(String(20), nullable=False)

    # Account the event is about (recipient for payouts)
    participant: Mapped[str] = mapped_column(AddressType, nullable=False)

    # Referee for ReferralPaid, otherwise empty
    counterparty: Mapped[str | None] = mapped_column(
        String(42), nullable=True
    )

    amount: Mapped[int] = mapped_column(TokenAmount, nullable=False)

    # Engine clock (unix seconds) at emission
    block_time: Mapped[int] = mapped_column(BigInteger, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), nullable=False
    )

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<LedgerEvent(id={self.id}, type={self.event_type}, "
            f"participant={self.participant}, amount={self.amount})>"
        )
