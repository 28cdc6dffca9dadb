#!/usr/bin/env python3
"""
Print pool accounting, participant records and the invariant check.

Usage:
    python scripts/ledger_report.py
    python scripts/ledger_report.py --participant 0xabc...
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from loguru import logger

from roistake.config.settings import settings
from roistake.database import create_engine, create_session_maker
from roistake.logging import setup_logging
from roistake.repositories.participant_repository import ParticipantRepository
from roistake.services.staking import StakingService
from roistake.utils.datetime_utils import from_timestamp, utc_now
from yield_calculator import format_bps, format_duration, format_token_amount


def fmt(amount: int) -> str:
    return format_token_amount(
        amount, symbol=settings.token_symbol, decimals=settings.token_decimals
    )


async def print_participant(service: StakingService, address: str) -> None:
    info = await service.user_info(address)
    pending = await service.pending_roi(address)
    wait = service.calculator.seconds_until_eligible(
        info.last_claim_time, service.clock.now()
    )
    print(f"  {info.address}")
    print(f"    staked:        {fmt(info.staked_amount)}")
    print(f"    total claimed: {fmt(info.total_claimed)}")
    last_claim = from_timestamp(info.last_claim_time)
    print(f"    last claim:    {last_claim.isoformat() if last_claim else '-'}")
    print(f"    referrer:      {info.referrer or '-'}")
    print(f"    pending yield: {fmt(pending)}")
    print(f"    next claim in: {format_duration(wait)}")


async def report(participant: str | None) -> int:
    engine = create_engine()
    session_maker = create_session_maker(engine)

    try:
        async with session_maker() as session:
            service = StakingService(session)
            pool = await service.pool_info()

            print(f"Ledger report at {utc_now().isoformat()}")
            print("Pool")
            print(f"  address:      {pool.pool_address}")
            print(f"  total staked: {fmt(pool.total_staked)}")
            print(f"  balance:      {fmt(pool.pool_balance)}")
            print(f"  surplus:      {fmt(pool.surplus)}")
            print(f"  participants: {pool.participant_count}")
            print(
                f"  terms:        yield {format_bps(service.terms.roi_bps)} / "
                f"{format_duration(service.terms.cooldown_seconds)}, "
                f"referral {format_bps(service.terms.referral_bps)}"
            )

            print("Participants")
            if participant:
                await print_participant(service, participant)
            else:
                for record in await ParticipantRepository(session).find_all():
                    await print_participant(service, record.address)

            result = await service.check_invariants()
            if result.success:
                logger.success("Invariants hold")
                return 0
            logger.error(f"Invariant violation: {result.error}")
            return 1
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Staking ledger report")
    parser.add_argument("--participant", help="Show a single participant")
    args = parser.parse_args()
    setup_logging(level="INFO")
    sys.exit(asyncio.run(report(args.participant)))


if __name__ == "__main__":
    main()
