"""
Pool state model.

Singleton row with global pool accounting.
"""

from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from roistake.config.business_constants import POOL_STATE_ID
from roistake.models.base import Base
from roistake.models.types import TokenAmount


class PoolState(Base):
    """Pool state - sum of all participants' principal."""

    __tablename__ = "pool_state"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, default=POOL_STATE_ID
    )

    # Always equals the sum of participants.staked_amount
    total_staked: Mapped[int] = mapped_column(
        TokenAmount, nullable=False, default=0
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<PoolState(total_staked={self.total_staked})>"
