"""
Staking service facade.

Single entry point of the staking ledger engine. Validates requests,
serialises mutating operations and runs each one in its own database
transaction, delegating the work to specialized modules:
- StakeProcessor: principal intake, referrer assignment, referral bonus
- YieldSettlementProcessor: yield claims with degraded payout
- WithdrawalProcessor: auto-claim and principal return
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from roistake.config.business_constants import POOL_STATE_ID
from roistake.config.settings import settings
from roistake.models.enums import (
    InvariantViolation,
    LedgerEventType,
    StakingErrorCode,
)
from roistake.models.ledger_event import LedgerEvent
from roistake.repositories.ledger_event_repository import LedgerEventRepository
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.repositories.pool_state_repository import PoolStateRepository
from roistake.services.base_service import (
    BaseService,
    ServiceResult,
    log_operation,
    transaction,
)
from roistake.services.staking.results import (
    ClaimReceipt,
    PoolInfo,
    StakeReceipt,
    UserInfo,
    WithdrawalReceipt,
)
from roistake.services.staking.stake_processor import StakeProcessor
from roistake.services.staking.withdrawal_processor import WithdrawalProcessor
from roistake.services.staking.yield_processor import YieldSettlementProcessor
from roistake.services.token_ledger.base import FungibleAssetLedger
from roistake.services.token_ledger.database_ledger import DatabaseTokenLedger
from roistake.utils.datetime_utils import Clock, SystemClock
from roistake.utils.exceptions import InvariantViolationError
from roistake.validators import normalize_address, validate_address, validate_token_amount
from yield_calculator import StakingTerms, YieldCalculator


def terms_from_settings() -> StakingTerms:
    """Build staking terms from application settings."""
    return StakingTerms(
        roi_bps=settings.roi_bps,
        referral_bps=settings.referral_bps,
        cooldown_seconds=settings.cooldown_seconds,
    )


class StakingService(BaseService):
    """
    Staking ledger engine.

    Mutating operations (stake, claim_roi, withdraw) return a
    ServiceResult whose ``error_code`` is a StakingErrorCode on
    rejection; a rejected operation leaves no state behind. Reads
    (pending_roi, user_info, pool_info, ...) return values directly.
    """

    def __init__(
        self,
        session: AsyncSession,
        token_ledger: FungibleAssetLedger | None = None,
        terms: StakingTerms | None = None,
        pool_address: str | None = None,
        clock: Clock | None = None,
    ) -> None:
        """
        Initialize staking service.

        Args:
            session: Async database session (the participant store)
            token_ledger: Asset ledger; defaults to the database ledger
                sharing ``session``
            terms: Yield/referral/cooldown terms; defaults to settings
            pool_address: Pool custody account; defaults to settings
            clock: Time source; defaults to wall-clock seconds
        """
        super().__init__(session)
        self.token_ledger = token_ledger or DatabaseTokenLedger(session)
        self.terms = terms or terms_from_settings()
        self.pool_address = normalize_address(pool_address or settings.pool_address)
        self.clock = clock or SystemClock()
        self.calculator = YieldCalculator(self.terms)

        self.participant_repo = ParticipantRepository(session)
        self.pool_repo = PoolStateRepository(session)
        self.event_repo = LedgerEventRepository(session)

        self.yield_processor = YieldSettlementProcessor(
            session, self.token_ledger, self.calculator, self.pool_address
        )
        self.stake_processor = StakeProcessor(
            session, self.token_ledger, self.calculator, self.pool_address
        )
        self.withdrawal_processor = WithdrawalProcessor(
            session,
            self.token_ledger,
            self.calculator,
            self.pool_address,
            self.yield_processor,
        )

        # Operations are applied strictly one at a time
        self._lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    async def stake(
        self, caller: str, amount: int, referrer: str | None = None
    ) -> ServiceResult[StakeReceipt]:
        """
        Stake ``amount`` from ``caller`` into the pool.

        The caller must have approved the pool address to pull ``amount``.
        ``referrer`` is recorded only while the caller has none and only
        if it is another participant with principal in the pool; invalid
        proposals are ignored.

        Args:
            caller: Participant address
            amount: Amount in base units
            referrer: Optional referrer proposal (None or zero address = none)

        Returns:
            ServiceResult with StakeReceipt
        """
        async with self._lock:
            return await self._stake(caller, amount, referrer)

    async def claim_roi(self, caller: str) -> ServiceResult[ClaimReceipt]:
        """
        Claim one cooldown window's yield.

        Rejected with COOLDOWN_NOT_ELAPSED inside the cooldown window.
        Pays less than owed (possibly nothing) when the pool balance is
        short; the shortfall is forfeited and the clock still restarts.

        Args:
            caller: Participant address

        Returns:
            ServiceResult with ClaimReceipt
        """
        async with self._lock:
            return await self._claim_roi(caller)

    async def withdraw(
        self, caller: str, amount: int
    ) -> ServiceResult[WithdrawalReceipt]:
        """
        Withdraw principal, auto-claiming yield first when eligible.

        Args:
            caller: Participant address
            amount: Principal to return, 0 < amount <= staked amount

        Returns:
            ServiceResult with WithdrawalReceipt (claimed and withdrawn amounts)
        """
        async with self._lock:
            return await self._withdraw(caller, amount)

    @transaction
    @log_operation
    async def _stake(
        self, caller: str, amount: int, referrer: str | None
    ) -> ServiceResult[StakeReceipt]:
        rejected, address = self._check_caller(caller)
        if rejected:
            return rejected

        is_valid, amount, error = validate_token_amount(amount)
        if not is_valid:
            return ServiceResult.fail(StakingErrorCode.INVALID_AMOUNT, error)

        return await self.stake_processor.process(
            address, amount, referrer, self.clock.now()
        )

    @transaction
    @log_operation
    async def _claim_roi(self, caller: str) -> ServiceResult[ClaimReceipt]:
        rejected, address = self._check_caller(caller)
        if rejected:
            return rejected

        now = self.clock.now()
        participant = await self.participant_repo.get_by_address(
            address, for_update=True
        )
        if participant is None:
            return ServiceResult.fail(
                StakingErrorCode.NOT_STAKED,
                f"No participant record for {address}",
            )

        if not self.calculator.is_cooldown_elapsed(participant.last_claim_time, now):
            remaining = self.calculator.seconds_until_eligible(
                participant.last_claim_time, now
            )
            return ServiceResult.fail(
                StakingErrorCode.COOLDOWN_NOT_ELAPSED,
                f"Wait {self.terms.cooldown_seconds // 3600}h between claims",
                data=remaining,
            )

        return await self.yield_processor.settle(participant, now)

    @transaction
    @log_operation
    async def _withdraw(
        self, caller: str, amount: int
    ) -> ServiceResult[WithdrawalReceipt]:
        rejected, address = self._check_caller(caller)
        if rejected:
            return rejected

        is_valid, amount, error = validate_token_amount(amount)
        if not is_valid:
            return ServiceResult.fail(StakingErrorCode.INVALID_AMOUNT, error)

        return await self.withdrawal_processor.process(
            address, amount, self.clock.now()
        )

    def _check_caller(self, caller: str) -> tuple[ServiceResult | None, str | None]:
        is_valid, address, error = validate_address(caller)
        if not is_valid:
            return ServiceResult.fail(StakingErrorCode.INVALID_ADDRESS, error), None
        if address == self.pool_address:
            return ServiceResult.fail(
                StakingErrorCode.INVALID_ADDRESS,
                "Pool address cannot act as a participant",
            ), None
        return None, address

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def pending_roi(self, participant: str) -> int:
        """
        Yield claimable right now (0 inside the cooldown window).

        Raises:
            ValueError: If the address is malformed
        """
        record = await self.participant_repo.get_by_address(
            normalize_address(participant)
        )
        if record is None:
            return 0
        return self.calculator.calculate_pending_yield(
            record.staked_amount, record.last_claim_time, self.clock.now()
        )

    async def user_info(self, participant: str) -> UserInfo:
        """
        Participant record view; zero defaults for unknown addresses.

        Raises:
            ValueError: If the address is malformed
        """
        address = normalize_address(participant)
        record = await self.participant_repo.get_by_address(address)
        if record is None:
            return UserInfo(address=address)

        next_claim_time = None
        if record.last_claim_time is not None:
            next_claim_time = record.last_claim_time + self.terms.cooldown_seconds

        return UserInfo(
            address=address,
            staked_amount=record.staked_amount,
            last_claim_time=record.last_claim_time,
            total_claimed=record.total_claimed,
            referrer=record.referrer,
            next_claim_time=next_claim_time,
        )

    async def pool_info(self) -> PoolInfo:
        """Pool accounting and custody balance."""
        state = await self.pool_repo.get_by_id(POOL_STATE_ID)
        return PoolInfo(
            pool_address=self.pool_address,
            total_staked=state.total_staked if state else 0,
            pool_balance=await self.token_ledger.balance_of(self.pool_address),
            participant_count=await self.participant_repo.count(),
        )

    async def referrals_of(self, referrer: str) -> list[str]:
        """Addresses whose recorded referrer is ``referrer``."""
        records = await self.participant_repo.get_referrals(
            normalize_address(referrer)
        )
        return [record.address for record in records]

    async def events_for(
        self,
        participant: str,
        event_type: LedgerEventType | None = None,
    ) -> list[LedgerEvent]:
        """Audit trail of a participant in emission order."""
        return await self.event_repo.get_by_participant(
            normalize_address(participant), event_type=event_type
        )

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    async def check_invariants(self) -> ServiceResult[dict]:
        """
        Verify pool accounting against participant records.

        Checks that total staked equals the sum of principals and that
        no participant refers to itself.

        Returns:
            ServiceResult with the checked figures in ``data``
        """
        state = await self.pool_repo.get_by_id(POOL_STATE_ID)
        total_staked = state.total_staked if state else 0
        summed = await self.participant_repo.sum_staked_amounts()
        self_referred = await self.participant_repo.find_self_referred()

        data = {
            "total_staked": total_staked,
            "sum_staked": summed,
            "self_referred": [record.address for record in self_referred],
        }

        if total_staked != summed:
            self.logger.error("Total staked mismatch", extra=data)
            return ServiceResult.fail(
                InvariantViolation.TOTAL_STAKED_MISMATCH,
                f"total_staked {total_staked} != sum of principals {summed}",
                data=data,
            )
        if self_referred:
            self.logger.error("Self-referred participants found", extra=data)
            return ServiceResult.fail(
                InvariantViolation.SELF_REFERRAL,
                f"{len(self_referred)} participant(s) refer to themselves",
                data=data,
            )
        return ServiceResult.ok(data)

    async def assert_invariants(self) -> None:
        """
        Raise if pool accounting is inconsistent.

        Raises:
            InvariantViolationError: If check_invariants fails
        """
        result = await self.check_invariants()
        if not result.success:
            raise InvariantViolationError(result.error)
