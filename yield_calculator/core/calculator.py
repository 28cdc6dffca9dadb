"""
Pure business logic calculator for staking yield and referral bonuses.

This module contains standalone calculation logic without any
dependencies on database, ORM, or app-specific code. All amounts are
integers in token base units and divisions floor.
"""

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from yield_calculator.core.models import StakingTerms, YieldPayout, YieldProjection


class YieldCalculator:
    """
    Pure business logic calculator for staking yield.

    Wraps a set of StakingTerms; every method works on plain ints.
    """

    def __init__(self, terms: "StakingTerms") -> None:
        self.terms = terms

    def apply_bps(self, amount: int, bps: int) -> int:
        """
        Apply a basis-point rate to an amount.

        Formula: amount * bps // bps_denominator

        Example:
            >>> calc.apply_bps(2000, 50)
            10
        """
        if amount <= 0 or bps <= 0:
            return 0
        return amount * bps // self.terms.bps_denominator

    def calculate_daily_yield(self, principal: int) -> int:
        """
        Calculate one cooldown window's yield on a principal.

        Example:
            >>> calc.calculate_daily_yield(1000)
            10
        """
        return self.apply_bps(principal, self.terms.roi_bps)

    def calculate_referral_bonus(self, stake_amount: int) -> int:
        """
        Calculate the referral bonus for one stake.

        Example:
            >>> calc.calculate_referral_bonus(2000)
            10
        """
        return self.apply_bps(stake_amount, self.terms.referral_bps)

    def elapsed_since(self, last_claim_time: int | None, now: int) -> int | None:
        """Seconds since last claim, or None when the clock never started."""
        if last_claim_time is None:
            return None
        return max(now - last_claim_time, 0)

    def is_cooldown_elapsed(self, last_claim_time: int | None, now: int) -> bool:
        """
        Check whether a claim is allowed at ``now``.

        A participant whose accrual clock never started is never eligible.
        """
        elapsed = self.elapsed_since(last_claim_time, now)
        if elapsed is None:
            return False
        return elapsed >= self.terms.cooldown_seconds

    def seconds_until_eligible(self, last_claim_time: int | None, now: int) -> int:
        """
        Seconds left until the next claim is allowed.

        Returns 0 when already eligible or when the clock never started.
        """
        elapsed = self.elapsed_since(last_claim_time, now)
        if elapsed is None:
            return 0
        return max(self.terms.cooldown_seconds - elapsed, 0)

    def calculate_pending_yield(
        self, principal: int, last_claim_time: int | None, now: int
    ) -> int:
        """
        Calculate yield claimable at ``now``.

        Zero inside the cooldown window; otherwise exactly one window's
        yield regardless of how many windows have passed.
        """
        if not self.is_cooldown_elapsed(last_claim_time, now):
            return 0
        return self.calculate_daily_yield(principal)

    def split_payout(self, owed: int, available: int) -> "YieldPayout":
        """
        Cap an owed yield to the pool's available balance.

        Example:
            >>> calc.split_payout(10, 4)
            YieldPayout(owed=10, paid=4, shortfall=6)
        """
        from yield_calculator.core.models import YieldPayout

        owed = max(owed, 0)
        paid = min(owed, max(available, 0))
        return YieldPayout(owed=owed, paid=paid, shortfall=owed - paid)

    def project_yield(self, principal: int, days: int) -> "YieldProjection":
        """
        Project yield from claiming every window over ``days`` days.

        Example:
            >>> calc.project_yield(1000, 30).total_yield
            300
        """
        from yield_calculator.core.models import YieldProjection

        days = max(days, 0)
        window_days = self.terms.cooldown_seconds / 86_400
        claims = int(days // window_days) if window_days > 0 else 0
        daily = self.calculate_daily_yield(principal)

        return YieldProjection(
            principal=max(principal, 0),
            days=days,
            daily_yield=daily,
            claims=claims,
            total_yield=daily * claims,
        )
