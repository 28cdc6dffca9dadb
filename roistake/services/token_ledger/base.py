"""
Fungible asset ledger interface.

The staking engine moves custody only through ``transfer`` and reads
the pool's spendable balance only through ``balance_of``.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from roistake.models.enums import TransferFailure


@dataclass(frozen=True)
class TransferResult:
    """Outcome of a transfer request."""

    success: bool
    failure: TransferFailure | None = None
    detail: str | None = None

    @classmethod
    def ok(cls) -> "TransferResult":
        return cls(success=True)

    @classmethod
    def refused(cls, failure: TransferFailure, detail: str) -> "TransferResult":
        return cls(success=False, failure=failure, detail=detail)


@runtime_checkable
class FungibleAssetLedger(Protocol):
    """
    Custody system of record for the staked token.

    Transfers must join the caller's unit of work: a staking operation
    that is rejected after some of its transfers succeeded relies on the
    rollback undoing them. Withdrawals move principal before any yield,
    so a refused principal transfer never leaves yield paid out.
    """

    async def balance_of(self, account: str) -> int:
        """Balance of an account in base units."""
        ...

    async def transfer(
        self,
        sender: str,
        recipient: str,
        amount: int,
        *,
        spender: str | None = None,
    ) -> TransferResult:
        """
        Move ``amount`` from sender to recipient.

        When ``spender`` is given and differs from ``sender`` the move
        consumes the sender's allowance for that spender.
        """
        ...
