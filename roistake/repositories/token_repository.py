"""
Token repository.

Data access layer for asset ledger balances and allowances.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from roistake.models.token_account import TokenAllowance, TokenBalance
from roistake.repositories.base import BaseRepository


class TokenRepository(BaseRepository[TokenBalance]):
    """Token balance and allowance repository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize token repository."""
        super().__init__(TokenBalance, session)

    async def get_balance(self, account: str) -> int:
        """
        Get balance of an account (0 for unknown accounts).

        Args:
            account: Checksummed address

        Returns:
            Balance in base units
        """
        row = await self.get_by_id(account)
        return row.balance if row else 0

    async def set_balance(self, account: str, balance: int) -> TokenBalance:
        """
        Set balance of an account, creating the row if needed.

        Args:
            account: Checksummed address
            balance: New balance in base units

        Returns:
            TokenBalance row
        """
        row = await self.get_by_id(account, for_update=True)
        if row is None:
            row = TokenBalance(account=account, balance=balance)
            self.session.add(row)
        else:
            row.balance = balance
        await self.session.flush()
        return row

    async def get_allowance_row(
        self, owner: str, spender: str
    ) -> TokenAllowance | None:
        """Get allowance row for an owner/spender pair."""
        stmt = select(TokenAllowance).where(
            TokenAllowance.owner == owner,
            TokenAllowance.spender == spender,
        ).with_for_update()
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_allowance(self, owner: str, spender: str) -> int:
        """
        Get remaining allowance.

        Args:
            owner: Account whose balance may be moved
            spender: Account allowed to move it

        Returns:
            Allowance in base units
        """
        row = await self.get_allowance_row(owner, spender)
        return row.amount if row else 0

    async def set_allowance(
        self, owner: str, spender: str, amount: int
    ) -> TokenAllowance:
        """
        Set allowance, creating the row if needed.

        Args:
            owner: Account whose balance may be moved
            spender: Account allowed to move it
            amount: New allowance in base units

        Returns:
            TokenAllowance row
        """
        row = await self.get_allowance_row(owner, spender)
        if row is None:
            row = TokenAllowance(owner=owner, spender=spender, amount=amount)
            self.session.add(row)
        else:
            row.amount = amount
        await self.session.flush()
        return row
