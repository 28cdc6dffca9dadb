"""
ROI staking ledger.

Single-pool staking engine with fixed daily yield and referral bonuses.
"""

__version__ = "1.0.0"
