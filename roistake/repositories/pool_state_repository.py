"""
Pool state repository.

Data access layer for the PoolState singleton.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from roistake.config.business_constants import POOL_STATE_ID
from roistake.models.pool_state import PoolState
from roistake.repositories.base import BaseRepository


class PoolStateRepository(BaseRepository[PoolState]):
    """Pool state repository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize pool state repository."""
        super().__init__(PoolState, session)

    async def get_or_create(self, for_update: bool = False) -> PoolState:
        """
        Get the pool state row, creating it on first use.

        Args:
            for_update: Lock the row for the rest of the transaction

        Returns:
            PoolState singleton
        """
        state = await self.get_by_id(POOL_STATE_ID, for_update=for_update)
        if state is None:
            state = await self.create(id=POOL_STATE_ID, total_staked=0)
        return state

    async def adjust_total_staked(self, delta: int) -> PoolState:
        """
        Add delta (may be negative) to total staked.

        Args:
            delta: Signed change of pooled principal

        Returns:
            Updated PoolState

        Raises:
            ValueError: If the result would be negative
        """
        state = await self.get_or_create(for_update=True)
        new_total = state.total_staked + delta
        if new_total < 0:
            raise ValueError(
                f"Total staked cannot become negative: "
                f"{state.total_staked} + ({delta})"
            )
        state.total_staked = new_total
        await self.session.flush()
        return state
