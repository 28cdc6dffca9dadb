"""
Token account models.

Balances and allowances of the database-backed asset ledger.
"""

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from roistake.models.base import Base
from roistake.models.types import AddressType, TokenAmount


class TokenBalance(Base):
    """Token balance of one account."""

    __tablename__ = "token_balances"

    account: Mapped[str] = mapped_column(AddressType, primary_key=True)
    balance: Mapped[int] = mapped_column(TokenAmount, nullable=False, default=0)

    def __repr__(self) -> str:
        """String representation."""
        return f"<TokenBalance(account={self.account}, balance={self.balance})>"


class TokenAllowance(Base):
    """Amount a spender may move out of an owner's balance."""

    __tablename__ = "token_allowances"
    __table_args__ = (
        UniqueConstraint('owner', 'spender', name='uq_token_allowance_pair'),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    owner: Mapped[str] = mapped_column(AddressType, nullable=False, index=True)
    spender: Mapped[str] = mapped_column(AddressType, nullable=False)
    amount: Mapped[int] = mapped_column(TokenAmount, nullable=False, default=0)

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"<TokenAllowance(owner={self.owner}, spender={self.spender}, "
            f"amount={self.amount})>"
        )
