"""Integration tests for the database-backed asset ledger."""

import pytest

from roistake.models.enums import TransferFailure
from roistake.services.token_ledger import FungibleAssetLedger

UNIT = 10**18


class TestDatabaseTokenLedger:
    """Balances, allowances and transfer refusals."""

    def test_implements_asset_ledger_protocol(self, token_ledger):
        assert isinstance(token_ledger, FungibleAssetLedger)

    @pytest.mark.asyncio
    async def test_unknown_account_has_zero_balance(self, token_ledger, funded_accounts):
        assert await token_ledger.balance_of(funded_accounts["carol"]) == 0

    @pytest.mark.asyncio
    async def test_mint_preserves_uint256_precision(self, token_ledger, funded_accounts):
        huge = 2**255 + 12345
        carol = funded_accounts["carol"]

        await token_ledger.mint(carol, huge)

        assert await token_ledger.balance_of(carol) == huge

    @pytest.mark.asyncio
    async def test_direct_transfer(self, token_ledger, funded_accounts):
        alice, carol = funded_accounts["alice"], funded_accounts["carol"]
        before = await token_ledger.balance_of(alice)

        result = await token_ledger.transfer(alice, carol, 5 * UNIT)

        assert result.success is True
        assert await token_ledger.balance_of(alice) == before - 5 * UNIT
        assert await token_ledger.balance_of(carol) == 5 * UNIT

    @pytest.mark.asyncio
    async def test_transfer_insufficient_funds(self, token_ledger, funded_accounts):
        carol, alice = funded_accounts["carol"], funded_accounts["alice"]

        result = await token_ledger.transfer(carol, alice, 1)

        assert result.success is False
        assert result.failure is TransferFailure.INSUFFICIENT_FUNDS

    @pytest.mark.asyncio
    async def test_spender_consumes_allowance(self, token_ledger, funded_accounts):
        alice, pool = funded_accounts["alice"], funded_accounts["pool"]
        allowance = await token_ledger.allowance(alice, pool)

        result = await token_ledger.transfer(alice, pool, 100 * UNIT, spender=pool)

        assert result.success is True
        assert await token_ledger.allowance(alice, pool) == allowance - 100 * UNIT
        assert await token_ledger.balance_of(pool) == 100 * UNIT

    @pytest.mark.asyncio
    async def test_spender_without_allowance_refused(self, token_ledger, funded_accounts):
        deployer, pool = funded_accounts["deployer"], funded_accounts["pool"]

        result = await token_ledger.transfer(deployer, pool, 1, spender=pool)

        assert result.success is False
        assert result.failure is TransferFailure.INSUFFICIENT_ALLOWANCE
        assert await token_ledger.balance_of(pool) == 0

    @pytest.mark.asyncio
    async def test_refused_transfer_keeps_allowance(self, token_ledger, funded_accounts):
        carol, pool = funded_accounts["carol"], funded_accounts["pool"]
        await token_ledger.approve(carol, pool, 10 * UNIT)

        result = await token_ledger.transfer(carol, pool, 10 * UNIT, spender=pool)

        assert result.failure is TransferFailure.INSUFFICIENT_FUNDS
        assert await token_ledger.allowance(carol, pool) == 10 * UNIT

    @pytest.mark.asyncio
    async def test_negative_amount_refused(self, token_ledger, funded_accounts):
        result = await token_ledger.transfer(
            funded_accounts["alice"], funded_accounts["bob"], -1
        )

        assert result.failure is TransferFailure.INVALID_AMOUNT

    @pytest.mark.asyncio
    async def test_approve_rejects_negative(self, token_ledger, funded_accounts):
        with pytest.raises(ValueError):
            await token_ledger.approve(funded_accounts["alice"], funded_accounts["pool"], -1)
