"""
Stake processor module.

Pulls principal into the pool, assigns referrers and pays referral bonuses.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import LedgerEventType, StakingErrorCode
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.repositories.pool_state_repository import PoolStateRepository
from roistake.services.base_service import ServiceResult
from roistake.services.staking.event_recorder import EventRecorder
from roistake.services.staking.referral_resolver import ReferralResolver
from roistake.services.staking.results import StakeReceipt
from roistake.services.token_ledger.base import FungibleAssetLedger
from yield_calculator import YieldCalculator


class StakeProcessor:
    """Applies stake requests."""

    def __init__(
        self,
        session: AsyncSession,
        token_ledger: FungibleAssetLedger,
        calculator: YieldCalculator,
        pool_address: str,
    ) -> None:
        """Initialize stake processor."""
        self.participant_repo = ParticipantRepository(session)
        self.pool_repo = PoolStateRepository(session)
        self.referrals = ReferralResolver(session)
        self.events = EventRecorder(session)
        self.token_ledger = token_ledger
        self.calculator = calculator
        self.pool_address = pool_address

    async def process(
        self,
        caller: str,
        amount: int,
        proposed_referrer: str | None,
        now: int,
    ) -> ServiceResult[StakeReceipt]:
        """
        Stake ``amount`` for ``caller``.

        Args:
            caller: Checksummed participant address
            amount: Validated positive amount
            proposed_referrer: Referrer proposal (ignored unless valid)
            now: Engine clock

        Returns:
            ServiceResult with StakeReceipt
        """
        transfer = await self.token_ledger.transfer(
            caller, self.pool_address, amount, spender=self.pool_address
        )
        if not transfer.success:
            logger.info(
                "Stake transfer-in refused",
                extra={
                    "caller": caller,
                    "amount": amount,
                    "failure": str(transfer.failure),
                },
            )
            return ServiceResult.fail(
                StakingErrorCode.EXTERNAL_TRANSFER_FAILURE,
                f"Stake transfer failed: {transfer.detail}",
                data=transfer.failure,
            )

        participant, created = await self.participant_repo.upsert(caller)

        referrer_assigned = False
        if participant.referrer is None:
            referrer = await self.referrals.resolve(caller, proposed_referrer)
            if referrer is not None:
                participant.referrer = referrer
                referrer_assigned = True
                logger.info(
                    "Referrer assigned",
                    extra={"participant": caller, "referrer": referrer},
                )

        # First stake starts the accrual clock
        if participant.last_claim_time is None:
            participant.last_claim_time = now

        participant.staked_amount += amount
        await self.participant_repo.save(participant)
        await self.pool_repo.adjust_total_staked(amount)

        events = [
            await self.events.emit(LedgerEventType.STAKED, caller, amount, now)
        ]

        bonus = 0
        if participant.referrer is not None:
            bonus = self.calculator.calculate_referral_bonus(amount)
            if bonus > 0:
                payout = await self.token_ledger.transfer(
                    self.pool_address, participant.referrer, bonus
                )
                if not payout.success:
                    return ServiceResult.fail(
                        StakingErrorCode.EXTERNAL_TRANSFER_FAILURE,
                        f"Referral transfer failed: {payout.detail}",
                        data=payout.failure,
                    )
                events.append(
                    await self.events.emit(
                        LedgerEventType.REFERRAL_PAID,
                        participant.referrer,
                        bonus,
                        now,
                        counterparty=caller,
                    )
                )

        return ServiceResult.ok(
            StakeReceipt(
                participant=caller,
                amount=amount,
                staked_amount=participant.staked_amount,
                referrer=participant.referrer,
                referrer_assigned=referrer_assigned,
                referral_bonus=bonus,
                events=events,
            )
        )
