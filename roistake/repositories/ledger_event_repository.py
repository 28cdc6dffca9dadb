"""
Ledger event repository.

Data access layer for LedgerEvent model.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import LedgerEventType
from roistake.models.ledger_event import LedgerEvent
from roistake.repositories.base import BaseRepository


class LedgerEventRepository(BaseRepository[LedgerEvent]):
    """Ledger event repository (append-only)."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize ledger event repository."""
        super().__init__(LedgerEvent, session)

    async def record(
        self,
        event_type: LedgerEventType,
        participant: str,
        amount: int,
        block_time: int,
        counterparty: str | None = None,
    ) -> LedgerEvent:
        """
        Append an event.

        Args:
            event_type: Event kind
            participant: Account the event is about
            amount: Amount in base units
            block_time: Engine clock at emission
            counterparty: Related account (referee for ReferralPaid)

        Returns:
            Created event
        """
        return await self.create(
            event_type=event_type.value,
            participant=participant,
            counterparty=counterparty,
            amount=amount,
            block_time=block_time,
        )

    async def get_by_participant(
        self,
        participant: str,
        event_type: LedgerEventType | None = None,
    ) -> list[LedgerEvent]:
        """
        Get events of a participant in emission order.

        Args:
            participant: Checksummed address
            event_type: Optional event kind filter

        Returns:
            List of events
        """
        stmt = select(LedgerEvent).where(LedgerEvent.participant == participant)
        if event_type is not None:
            stmt = stmt.where(LedgerEvent.event_type == event_type.value)
        stmt = stmt.order_by(LedgerEvent.id)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
