#!/usr/bin/env python3
"""Initialize staking ledger tables and the pool state row."""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from roistake.config.settings import settings
from roistake.database import create_engine, create_session_maker, create_tables
from roistake.repositories.pool_state_repository import PoolStateRepository

# Configure logger for script
logger.remove()
logger.add(sys.stderr, level="INFO")


async def init_database(database_url: str) -> None:
    """Create all tables and seed the pool state singleton."""
    logger.info("Connecting to database...")
    engine = create_engine(database_url)

    try:
        logger.info("Creating tables (checkfirst=True)...")
        await create_tables(engine)

        session_maker = create_session_maker(engine)
        async with session_maker() as session:
            state = await PoolStateRepository(session).get_or_create()
            await session.commit()
            logger.info(f"Pool state ready: total_staked={state.total_staked}")
    finally:
        await engine.dispose()

    logger.success("Database tables created successfully!")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help="Async SQLAlchemy URL (default: DATABASE_URL setting)",
    )
    args = parser.parse_args()
    asyncio.run(init_database(args.database_url))


if __name__ == "__main__":
    main()
