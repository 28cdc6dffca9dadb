"""
Withdrawal processor module.

Returns principal in full or not at all, then auto-claims eligible yield.
Principal leaves the pool before the auto-claim sizes its payout, so a
short pool degrades the yield rather than the withdrawal, and a refused
principal transfer leaves no yield paid out.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import LedgerEventType, StakingErrorCode
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.repositories.pool_state_repository import PoolStateRepository
from roistake.services.base_service import ServiceResult
from roistake.services.staking.event_recorder import EventRecorder
from roistake.services.staking.results import WithdrawalReceipt
from roistake.services.staking.yield_processor import YieldSettlementProcessor
from roistake.services.token_ledger.base import FungibleAssetLedger
from yield_calculator import YieldCalculator


class WithdrawalProcessor:
    """Applies withdrawal requests."""

    def __init__(
        self,
        session: AsyncSession,
        token_ledger: FungibleAssetLedger,
        calculator: YieldCalculator,
        pool_address: str,
        yield_processor: YieldSettlementProcessor,
    ) -> None:
        """Initialize withdrawal processor."""
        self.participant_repo = ParticipantRepository(session)
        self.pool_repo = PoolStateRepository(session)
        self.events = EventRecorder(session)
        self.token_ledger = token_ledger
        self.calculator = calculator
        self.pool_address = pool_address
        self.yield_processor = yield_processor

    async def process(
        self, caller: str, amount: int, now: int
    ) -> ServiceResult[WithdrawalReceipt]:
        """
        Withdraw ``amount`` of principal for ``caller``.

        Args:
            caller: Checksummed participant address
            amount: Validated positive amount
            now: Engine clock

        Returns:
            ServiceResult with WithdrawalReceipt
        """
        participant = await self.participant_repo.get_by_address(
            caller, for_update=True
        )
        staked = participant.staked_amount if participant else 0
        if participant is None or amount > staked:
            return ServiceResult.fail(
                StakingErrorCode.INSUFFICIENT_PRINCIPAL,
                f"Withdraw amount {amount} exceeds staked amount {staked}",
            )

        transfer = await self.token_ledger.transfer(
            self.pool_address, caller, amount
        )
        if not transfer.success:
            logger.warning(
                "Principal transfer refused; withdrawal rolled back",
                extra={
                    "caller": caller,
                    "amount": amount,
                    "failure": str(transfer.failure),
                },
            )
            return ServiceResult.fail(
                StakingErrorCode.EXTERNAL_TRANSFER_FAILURE,
                f"Principal transfer failed: {transfer.detail}",
                data=transfer.failure,
            )

        events = []
        claim = None
        # Yield accrues on the principal held before this withdrawal
        if self.calculator.is_cooldown_elapsed(participant.last_claim_time, now):
            settled = await self.yield_processor.settle(
                participant, now, emit_zero=False
            )
            if not settled.success:
                return ServiceResult.fail(
                    settled.error_code, settled.error, data=settled.data
                )
            claim = settled.data
            events.extend(claim.events)

        participant.staked_amount -= amount
        await self.participant_repo.save(participant)
        await self.pool_repo.adjust_total_staked(-amount)

        events.append(
            await self.events.emit(LedgerEventType.WITHDRAWN, caller, amount, now)
        )

        return ServiceResult.ok(
            WithdrawalReceipt(
                participant=caller,
                claimed_amount=claim.paid if claim else 0,
                withdrawn_amount=amount,
                staked_amount=participant.staked_amount,
                claim=claim,
                events=events,
            )
        )
