"""
Business logic constants for the staking ledger.

Central location for yield, referral and cooldown rules.
These are the defaults; deployments override them through settings.
"""

# Basis points denominator (100% == 10_000 bps)
BPS_DENOMINATOR = 10_000

# Daily yield on current principal: 1%
ROI_BPS = 100

# Referral bonus on every stake of a referred participant: 0.5%
REFERRAL_BPS = 50

# Minimum time between two yield claims
COOLDOWN_SECONDS = 24 * 60 * 60

# Largest amount the ledger accepts (uint256)
MAX_TOKEN_AMOUNT = 2**256 - 1

# Address meaning "no referrer"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Account holding the pool's custody balance on the asset ledger
DEFAULT_POOL_ADDRESS = "0x00000000000000000000000000000000000057a1"

# Single row id of the pool_state table
POOL_STATE_ID = 1
