"""
Yield settlement processor module.

Pays a participant's pending yield out of the pool, degrading to
whatever the pool holds when it cannot pay in full.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import LedgerEventType, StakingErrorCode
from roistake.models.participant import Participant
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.services.base_service import ServiceResult
from roistake.services.staking.event_recorder import EventRecorder
from roistake.services.staking.results import ClaimReceipt
from roistake.services.token_ledger.base import FungibleAssetLedger
from yield_calculator import YieldCalculator


class YieldSettlementProcessor:
    """Settles pending yield for claims and withdrawal auto-claims."""

    def __init__(
        self,
        session: AsyncSession,
        token_ledger: FungibleAssetLedger,
        calculator: YieldCalculator,
        pool_address: str,
    ) -> None:
        """
        Initialize yield settlement processor.

        Args:
            session: Database session
            token_ledger: Asset ledger holding the pool balance
            calculator: Yield calculator with the pool's terms
            pool_address: Pool custody account
        """
        self.participant_repo = ParticipantRepository(session)
        self.events = EventRecorder(session)
        self.token_ledger = token_ledger
        self.calculator = calculator
        self.pool_address = pool_address

    async def settle(
        self,
        participant: Participant,
        now: int,
        emit_zero: bool = True,
    ) -> ServiceResult[ClaimReceipt]:
        """
        Pay pending yield and restart the accrual clock.

        Must only be called once the cooldown has elapsed. When the pool
        balance is below the owed yield, the available balance (possibly
        zero) is paid, the shortfall is forfeited and the clock still
        restarts.

        Args:
            participant: Locked participant record
            now: Engine clock
            emit_zero: Record a Claimed event even when nothing is paid

        Returns:
            ServiceResult with ClaimReceipt
        """
        owed = self.calculator.calculate_pending_yield(
            participant.staked_amount, participant.last_claim_time, now
        )
        balance = await self.token_ledger.balance_of(self.pool_address)
        payout = self.calculator.split_payout(owed, balance)

        if payout.paid > 0:
            transfer = await self.token_ledger.transfer(
                self.pool_address, participant.address, payout.paid
            )
            if not transfer.success:
                logger.error(
                    "Yield transfer refused by asset ledger",
                    extra={
                        "participant": participant.address,
                        "amount": payout.paid,
                        "failure": str(transfer.failure),
                    },
                )
                return ServiceResult.fail(
                    StakingErrorCode.EXTERNAL_TRANSFER_FAILURE,
                    f"Yield transfer failed: {transfer.detail}",
                    data=transfer.failure,
                )

        if payout.degraded:
            logger.warning(
                "Degraded yield payout: pool balance below owed yield",
                extra={
                    "participant": participant.address,
                    "owed": payout.owed,
                    "paid": payout.paid,
                    "forfeited": payout.shortfall,
                },
            )

        participant.total_claimed += payout.paid
        participant.last_claim_time = max(participant.last_claim_time or now, now)
        await self.participant_repo.save(participant)

        events = []
        if payout.paid > 0 or emit_zero:
            events.append(
                await self.events.emit(
                    LedgerEventType.CLAIMED,
                    participant.address,
                    payout.paid,
                    now,
                )
            )

        return ServiceResult.ok(
            ClaimReceipt(
                participant=participant.address,
                owed=payout.owed,
                paid=payout.paid,
                shortfall=payout.shortfall,
                claimed_at=participant.last_claim_time,
                events=events,
            )
        )
