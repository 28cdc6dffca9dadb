"""
Participant repository.

Data access layer for Participant model.
"""

from loguru import logger
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.participant import Participant
from roistake.repositories.base import BaseRepository

# Values a participant record starts with before its first stake is applied
PARTICIPANT_DEFAULTS = {
    "staked_amount": 0,
    "last_claim_time": None,
    "total_claimed": 0,
    "referrer": None,
}


class ParticipantRepository(BaseRepository[Participant]):
    """Participant repository with staking-specific queries."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize participant repository."""
        super().__init__(Participant, session)

    async def get_by_address(
        self, address: str, for_update: bool = False
    ) -> Participant | None:
        """
        Get participant by checksummed address.

        Args:
            address: Checksummed account address
            for_update: Lock the row for the rest of the transaction

        Returns:
            Participant or None
        """
        return await self.get_by_id(address, for_update=for_update)

    async def upsert(self, address: str) -> tuple[Participant, bool]:
        """
        Get participant record, creating it with defaults if missing.

        New records start from PARTICIPANT_DEFAULTS: no principal,
        no accrual clock, nothing claimed and no referrer.

        Args:
            address: Checksummed account address

        Returns:
            Tuple of (participant, created)
        """
        participant = await self.get_by_address(address, for_update=True)
        if participant is not None:
            return participant, False

        participant = await self.create(address=address, **PARTICIPANT_DEFAULTS)
        logger.debug(
            "Participant record created",
            extra={"address": address},
        )
        return participant, True

    async def save(self, participant: Participant) -> Participant:
        """
        Flush pending changes of a participant.

        Args:
            participant: Participant with modified fields

        Returns:
            The same participant
        """
        self.session.add(participant)
        await self.session.flush()
        return participant

    async def get_referrals(self, referrer: str) -> list[Participant]:
        """
        Get participants introduced by a referrer.

        Args:
            referrer: Checksummed referrer address

        Returns:
            Participants ordered by join time
        """
        stmt = (
            select(Participant)
            .where(Participant.referrer == referrer)
            .order_by(Participant.created_at, Participant.address)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def sum_staked_amounts(self) -> int:
        """
        Sum principal over all participant records.

        Amounts are stored as text to keep uint256 precision, so the sum
        is taken in Python rather than with SQL SUM().

        Returns:
            Total principal of all participants
        """
        stmt = select(Participant.staked_amount)
        result = await self.session.execute(stmt)
        return sum(result.scalars().all())

    async def find_self_referred(self) -> list[Participant]:
        """Get records whose referrer equals their own address."""
        stmt = select(Participant).where(
            Participant.referrer == Participant.address
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
