"""
Core calculator functionality.

Holds the yield arithmetic and its data models.
"""

from yield_calculator.core.calculator import YieldCalculator
from yield_calculator.core.models import StakingTerms, YieldPayout, YieldProjection

__all__ = [
    "YieldCalculator",
    "StakingTerms",
    "YieldPayout",
    "YieldProjection",
]
