"""
Database-backed fungible asset ledger.

Keeps balances and allowances in the ledger database so a staking
operation and the transfers it triggers share one transaction. Methods
flush but never commit: the caller owns the unit of work.
"""

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.enums import TransferFailure
from roistake.repositories.token_repository import TokenRepository
from roistake.services.token_ledger.base import TransferResult


class DatabaseTokenLedger:
    """Token ledger stored in token_balances / token_allowances."""

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize token ledger.

        Args:
            session: Async database session shared with the caller
        """
        self.session = session
        self.token_repo = TokenRepository(session)

    async def balance_of(self, account: str) -> int:
        """Balance of an account in base units."""
        return await self.token_repo.get_balance(account)

    async def allowance(self, owner: str, spender: str) -> int:
        """Remaining amount ``spender`` may move out of ``owner``."""
        return await self.token_repo.get_allowance(owner, spender)

    async def approve(self, owner: str, spender: str, amount: int) -> None:
        """
        Set the allowance of ``spender`` over ``owner``'s balance.

        Args:
            owner: Account granting the allowance
            spender: Account receiving it
            amount: New allowance (replaces the previous one)

        Raises:
            ValueError: If amount is negative
        """
        if amount < 0:
            raise ValueError(f"Allowance cannot be negative: {amount}")
        await self.token_repo.set_allowance(owner, spender, amount)
        logger.debug(
            "Allowance set",
            extra={"owner": owner, "spender": spender, "amount": amount},
        )

    async def mint(self, account: str, amount: int) -> int:
        """
        Create ``amount`` new tokens in ``account``.

        Bootstrap and test helper; not part of the engine interface.

        Returns:
            New balance of the account
        """
        if amount < 0:
            raise ValueError(f"Mint amount cannot be negative: {amount}")
        balance = await self.token_repo.get_balance(account)
        row = await self.token_repo.set_balance(account, balance + amount)
        return row.balance

    async def transfer(
        self,
        sender: str,
        recipient: str,
        amount: int,
        *,
        spender: str | None = None,
    ) -> TransferResult:
        """
        Move tokens between accounts.

        Args:
            sender: Account debited
            recipient: Account credited
            amount: Amount in base units
            spender: Account acting on the sender's behalf, if any

        Returns:
            TransferResult; refusals leave balances and allowances untouched
        """
        if amount < 0:
            return TransferResult.refused(
                TransferFailure.INVALID_AMOUNT,
                f"Transfer amount cannot be negative: {amount}",
            )

        uses_allowance = spender is not None and spender != sender
        allowance = 0
        if uses_allowance:
            allowance = await self.token_repo.get_allowance(sender, spender)
            if allowance < amount:
                return TransferResult.refused(
                    TransferFailure.INSUFFICIENT_ALLOWANCE,
                    f"Allowance {allowance} < {amount}",
                )

        sender_balance = await self.token_repo.get_balance(sender)
        if sender_balance < amount:
            return TransferResult.refused(
                TransferFailure.INSUFFICIENT_FUNDS,
                f"Balance {sender_balance} < {amount}",
            )

        if amount == 0 or sender == recipient:
            return TransferResult.ok()

        if uses_allowance:
            await self.token_repo.set_allowance(sender, spender, allowance - amount)

        await self.token_repo.set_balance(sender, sender_balance - amount)
        recipient_balance = await self.token_repo.get_balance(recipient)
        await self.token_repo.set_balance(recipient, recipient_balance + amount)

        logger.debug(
            "Token transfer",
            extra={"sender": sender, "recipient": recipient, "amount": amount},
        )
        return TransferResult.ok()
