"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Минимальные переменные окружения для тестов
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import pytest_asyncio
from eth_utils import to_checksum_address
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from roistake.config.business_constants import DEFAULT_POOL_ADDRESS
from roistake.models import Base
from roistake.services.staking import StakingService
from roistake.services.token_ledger import DatabaseTokenLedger
from roistake.utils.datetime_utils import ManualClock
from yield_calculator import DEFAULT_TERMS

# Token base units per whole token (18 decimals)
UNIT = 10**18
INITIAL_BALANCE = 1_000_000 * UNIT
DAY = 24 * 60 * 60

POOL = to_checksum_address(DEFAULT_POOL_ADDRESS)
DEPLOYER = to_checksum_address("0xf39fd6e51aad88f6f4ce6ab8827279cfffb92266")
ALICE = to_checksum_address("0x70997970c51812dc3a010c7d01b50e0d17dc79c8")
BOB = to_checksum_address("0x3c44cdddb6a900fa2b585dd299e03d12fa4293bc")
CAROL = to_checksum_address("0x90f79bf6eb2c4f870365e785982e1f101e93b906")


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with all ledger tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine):
    """Async session bound to the in-memory database."""
    session_maker = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_maker() as session:
        yield session


@pytest.fixture
def clock():
    """Manually advanced engine clock."""
    return ManualClock()


@pytest.fixture
def token_ledger(session):
    """Database-backed asset ledger sharing the test session."""
    return DatabaseTokenLedger(session)


@pytest.fixture
def staking_service(session, token_ledger, clock):
    """Staking engine with default terms (1%/day, 0.5% referral, 24h)."""
    return StakingService(
        session,
        token_ledger=token_ledger,
        terms=DEFAULT_TERMS,
        pool_address=POOL,
        clock=clock,
    )


@pytest_asyncio.fixture
async def funded_accounts(session, token_ledger):
    """
    Mint initial balances and approve the pool.

    Deployer, Alice and Bob receive INITIAL_BALANCE; Alice and Bob
    approve the pool for their whole balance. Carol starts empty.
    """
    for account in (DEPLOYER, ALICE, BOB):
        await token_ledger.mint(account, INITIAL_BALANCE)
    for account in (ALICE, BOB):
        await token_ledger.approve(account, POOL, INITIAL_BALANCE)
    await session.commit()
    return {
        "pool": POOL,
        "deployer": DEPLOYER,
        "alice": ALICE,
        "bob": BOB,
        "carol": CAROL,
    }
