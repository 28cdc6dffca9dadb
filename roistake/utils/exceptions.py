"""
Exception handling utilities.

Rejected staking operations are reported as ServiceResult values;
the exceptions here mark conditions that must never be handled as
ordinary outcomes.
"""

from sqlalchemy.exc import IntegrityError


class StakingLedgerError(Exception):
    """Base error of the staking ledger."""


class InvariantViolationError(StakingLedgerError):
    """Raised when persisted ledger state breaks an invariant."""


# Exception categories based on handling strategy

# Must raise - ledger state or constraints are broken
MUST_RAISE = (
    InvariantViolationError,
    IntegrityError,
    ValueError,
    TypeError,
)


def must_raise(exc: Exception) -> bool:
    """
    Check if exception must be raised.

    Args:
        exc: Exception to check

    Returns:
        True if exception must be raised
    """
    return isinstance(exc, MUST_RAISE)
