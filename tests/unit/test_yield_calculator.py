"""
Tests for standalone yield calculator.

Tests the yield_calculator package without database dependencies.
"""

import pytest
from pydantic import ValidationError

from yield_calculator import (
    DEFAULT_TERMS,
    StakingTerms,
    YieldCalculator,
    YieldPayout,
    format_bps,
    format_duration,
    format_token_amount,
    to_display_amount,
)

UNIT = 10**18
DAY = 86_400
T0 = 1_700_000_000


class TestYieldCalculator:
    """Tests for YieldCalculator class."""

    # === Daily Yield Tests ===

    def test_daily_yield_is_one_percent(self, calculator: YieldCalculator) -> None:
        """1000 units of principal yield 10 units per window."""
        assert calculator.calculate_daily_yield(1000 * UNIT) == 10 * UNIT

    def test_daily_yield_floors(self, calculator: YieldCalculator) -> None:
        """Integer division floors like on-chain arithmetic."""
        assert calculator.calculate_daily_yield(199) == 1
        assert calculator.calculate_daily_yield(99) == 0

    def test_daily_yield_zero_principal(self, calculator: YieldCalculator) -> None:
        assert calculator.calculate_daily_yield(0) == 0

    # === Referral Bonus Tests ===

    def test_referral_bonus_half_percent(self, calculator: YieldCalculator) -> None:
        """2000 units staked pay the referrer 10 units."""
        assert calculator.calculate_referral_bonus(2000 * UNIT) == 10 * UNIT

    def test_referral_bonus_small_stake_rounds_to_zero(
        self, calculator: YieldCalculator
    ) -> None:
        assert calculator.calculate_referral_bonus(199) == 0

    # === Cooldown Tests ===

    def test_cooldown_not_elapsed_one_second_early(
        self, calculator: YieldCalculator
    ) -> None:
        assert calculator.is_cooldown_elapsed(T0, T0 + DAY - 1) is False

    def test_cooldown_elapsed_exactly_at_window(
        self, calculator: YieldCalculator
    ) -> None:
        assert calculator.is_cooldown_elapsed(T0, T0 + DAY) is True

    def test_cooldown_never_started(self, calculator: YieldCalculator) -> None:
        """A participant without an accrual clock is never eligible."""
        assert calculator.is_cooldown_elapsed(None, T0) is False
        assert calculator.seconds_until_eligible(None, T0) == 0

    def test_seconds_until_eligible(self, calculator: YieldCalculator) -> None:
        assert calculator.seconds_until_eligible(T0, T0 + 3600) == DAY - 3600
        assert calculator.seconds_until_eligible(T0, T0 + 2 * DAY) == 0

    # === Pending Yield Tests ===

    def test_pending_zero_inside_window(self, calculator: YieldCalculator) -> None:
        assert calculator.calculate_pending_yield(1000, T0, T0 + DAY - 1) == 0

    def test_pending_not_compounded_over_days(
        self, calculator: YieldCalculator
    ) -> None:
        """Waiting three days still pays a single window's yield."""
        one_day = calculator.calculate_pending_yield(1000 * UNIT, T0, T0 + DAY)
        three_days = calculator.calculate_pending_yield(1000 * UNIT, T0, T0 + 3 * DAY)

        assert one_day == three_days == 10 * UNIT

    # === Payout Split Tests ===

    def test_split_payout_fully_funded(self, calculator: YieldCalculator) -> None:
        payout = calculator.split_payout(10, 1000)

        assert payout == YieldPayout(owed=10, paid=10, shortfall=0)
        assert payout.degraded is False

    def test_split_payout_underfunded(self, calculator: YieldCalculator) -> None:
        payout = calculator.split_payout(10, 4)

        assert payout.paid == 4
        assert payout.shortfall == 6
        assert payout.degraded is True

    def test_split_payout_empty_pool(self, calculator: YieldCalculator) -> None:
        payout = calculator.split_payout(10, 0)

        assert payout.paid == 0
        assert payout.shortfall == 10

    def test_split_payout_nothing_owed(self, calculator: YieldCalculator) -> None:
        payout = calculator.split_payout(0, 0)

        assert payout.degraded is False

    # === Projection Tests ===

    def test_project_yield_thirty_days(self, calculator: YieldCalculator) -> None:
        projection = calculator.project_yield(1000, 30)

        assert projection.claims == 30
        assert projection.daily_yield == 10
        assert projection.total_yield == 300

    def test_project_yield_with_longer_cooldown(self) -> None:
        terms = StakingTerms(roi_bps=100, referral_bps=50, cooldown_seconds=2 * DAY)
        projection = YieldCalculator(terms).project_yield(1000, 7)

        assert projection.claims == 3
        assert projection.total_yield == 30


class TestStakingTerms:
    """Tests for StakingTerms model."""

    def test_default_terms(self) -> None:
        assert DEFAULT_TERMS.roi_bps == 100
        assert DEFAULT_TERMS.referral_bps == 50
        assert DEFAULT_TERMS.cooldown_seconds == DAY

    def test_rejects_bps_above_denominator(self) -> None:
        with pytest.raises(ValidationError):
            StakingTerms(roi_bps=10_001, referral_bps=50, cooldown_seconds=DAY)

    def test_rejects_zero_cooldown(self) -> None:
        with pytest.raises(ValidationError):
            StakingTerms(roi_bps=100, referral_bps=50, cooldown_seconds=0)

    def test_payout_split_must_add_up(self) -> None:
        with pytest.raises(ValidationError):
            YieldPayout(owed=10, paid=4, shortfall=5)


class TestFormatters:
    """Tests for formatting utilities."""

    def test_format_token_amount(self) -> None:
        assert format_token_amount(10 * UNIT) == "10.0000 TT"
        assert format_token_amount(1234 * UNIT, symbol="STK", precision=2) == "1,234.00 STK"

    def test_to_display_amount(self) -> None:
        assert str(to_display_amount(15 * UNIT // 10)) == "1.5"

    def test_format_token_amount_uses_token_decimals(self) -> None:
        assert format_token_amount(1_234_567, decimals=6) == "1.2346 TT"
        assert format_token_amount(-10 * UNIT) == "-10.0000 TT"

    def test_format_bps(self) -> None:
        assert format_bps(50) == "0.50%"
        assert format_bps(100) == "1.00%"

    def test_format_duration(self) -> None:
        assert format_duration(DAY) == "24h 0m 0s"
        assert format_duration(3725) == "1h 2m 5s"
        assert format_duration(-5) == "0h 0m 0s"
