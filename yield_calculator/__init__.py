"""
Staking yield calculator.

Standalone package for staking yield and referral arithmetic.

Example:
    >>> from yield_calculator import YieldCalculator, DEFAULT_TERMS
    >>>
    >>> calc = YieldCalculator(DEFAULT_TERMS)
    >>> calc.calculate_daily_yield(1000)
    10
    >>> calc.calculate_referral_bonus(2000)
    10
"""

from yield_calculator.constants import DEFAULT_TERMS, SECONDS_PER_DAY
from yield_calculator.core.calculator import YieldCalculator
from yield_calculator.core.models import StakingTerms, YieldPayout, YieldProjection
from yield_calculator.utils import (
    format_bps,
    format_duration,
    format_token_amount,
    to_display_amount,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "YieldCalculator",
    # Models
    "StakingTerms",
    "YieldPayout",
    "YieldProjection",
    # Constants
    "DEFAULT_TERMS",
    "SECONDS_PER_DAY",
    # Formatters
    "format_bps",
    "format_duration",
    "format_token_amount",
    "to_display_amount",
]
