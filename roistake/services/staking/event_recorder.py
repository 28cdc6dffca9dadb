"""
Event recorder module.

Persists staking events and mirrors them to the log.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import LedgerEventType
from roistake.repositories.ledger_event_repository import LedgerEventRepository
from roistake.services.staking.results import StakingEvent


class EventRecorder:
    """Records Staked, ReferralPaid, Claimed and Withdrawn events."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize event recorder."""
        self.event_repo = LedgerEventRepository(session)

    async def emit(
        self,
        event_type: LedgerEventType,
        participant: str,
        amount: int,
        block_time: int,
        counterparty: str | None = None,
    ) -> StakingEvent:
        """
        Persist an event.

        Args:
            event_type: Event kind
            participant: Account the event is about
            amount: Amount in base units
            block_time: Engine clock at emission
            counterparty: Related account, if any

        Returns:
            StakingEvent value
        """
        await self.event_repo.record(
            event_type=event_type,
            participant=participant,
            amount=amount,
            block_time=block_time,
            counterparty=counterparty,
        )
        logger.info(
            f"{event_type.value}({participant}, {amount})",
            extra={
                "event_type": event_type.value,
                "participant": participant,
                "amount": amount,
                "counterparty": counterparty,
            },
        )
        return StakingEvent(
            event_type=event_type,
            participant=participant,
            amount=amount,
            counterparty=counterparty,
        )
