"""
Referral resolver module.

Decides whether a proposed referrer may be attached to a participant.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.repositories.participant_repository import ParticipantRepository
from roistake.validators import normalize_optional_address


class ReferralResolver:
    """Validates referrer proposals at assignment time."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize referral resolver."""
        self.participant_repo = ParticipantRepository(session)

    async def resolve(
        self, caller: str, proposed_referrer: str | None
    ) -> str | None:
        """
        Resolve a proposed referrer to a valid address.

        A referrer is valid when it is not the caller and already holds
        principal in the pool. Anything else is ignored, never rejected.

        Args:
            caller: Checksummed address of the staking participant
            proposed_referrer: Proposed address (None / zero address = none)

        Returns:
            Checksummed referrer address, or None
        """
        referrer = normalize_optional_address(proposed_referrer)
        if referrer is None:
            if proposed_referrer is not None:
                logger.debug(
                    "Referrer proposal ignored: empty or malformed",
                    extra={"caller": caller, "proposed": proposed_referrer},
                )
            return None

        if referrer == caller:
            logger.info(
                "Referrer proposal ignored: self-referral",
                extra={"caller": caller},
            )
            return None

        record = await self.participant_repo.get_by_address(referrer)
        if record is None or not record.is_active:
            logger.info(
                "Referrer proposal ignored: referrer has no stake",
                extra={"caller": caller, "proposed": referrer},
            )
            return None

        return referrer
