"""
Default constants for yield calculator.
"""

from yield_calculator.core.models import StakingTerms

SECONDS_PER_DAY = 86_400

DEFAULT_TERMS = StakingTerms(
    roi_bps=100,
    referral_bps=50,
    cooldown_seconds=SECONDS_PER_DAY,
)
