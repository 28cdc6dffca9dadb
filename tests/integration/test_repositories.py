"""Integration tests for participant and pool repositories."""

import pytest

from roistake.models.enums import LedgerEventType
from roistake.repositories import (
    LedgerEventRepository,
    ParticipantRepository,
    PoolStateRepository,
)

ALICE = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
BOB = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"


class TestParticipantRepository:
    """Participant store upsert and queries."""

    @pytest.mark.asyncio
    async def test_upsert_creates_record_with_defaults(self, session):
        repo = ParticipantRepository(session)

        participant, created = await repo.upsert(ALICE)

        assert created is True
        assert participant.staked_amount == 0
        assert participant.last_claim_time is None
        assert participant.total_claimed == 0
        assert participant.referrer is None

    @pytest.mark.asyncio
    async def test_upsert_returns_existing_record(self, session):
        repo = ParticipantRepository(session)
        first, _ = await repo.upsert(ALICE)
        first.staked_amount = 500
        await repo.save(first)

        second, created = await repo.upsert(ALICE)

        assert created is False
        assert second.staked_amount == 500

    @pytest.mark.asyncio
    async def test_sum_staked_amounts_beyond_bigint(self, session):
        repo = ParticipantRepository(session)
        big = 2**70
        for address, amount in ((ALICE, big), (BOB, big + 1)):
            participant, _ = await repo.upsert(address)
            participant.staked_amount = amount
            await repo.save(participant)

        assert await repo.sum_staked_amounts() == 2 * big + 1

    @pytest.mark.asyncio
    async def test_get_referrals(self, session):
        repo = ParticipantRepository(session)
        await repo.upsert(BOB)
        alice, _ = await repo.upsert(ALICE)
        alice.referrer = BOB
        await repo.save(alice)

        referrals = await repo.get_referrals(BOB)

        assert [record.address for record in referrals] == [ALICE]
        assert await repo.get_referrals(ALICE) == []


    @pytest.mark.asyncio
    async def test_find_all_and_count(self, session):
        repo = ParticipantRepository(session)
        await repo.upsert(ALICE)
        await repo.upsert(BOB)

        assert await repo.count() == 2
        assert len(await repo.find_all()) == 2
        assert len(await repo.find_all(limit=1)) == 1
        assert [p.address for p in await repo.find_all(address=BOB)] == [BOB]


class TestPoolStateRepository:
    """Pool state singleton."""

    @pytest.mark.asyncio
    async def test_get_or_create_is_singleton(self, session):
        repo = PoolStateRepository(session)

        first = await repo.get_or_create()
        second = await repo.get_or_create()

        assert first is second
        assert first.total_staked == 0

    @pytest.mark.asyncio
    async def test_adjust_total_staked(self, session):
        repo = PoolStateRepository(session)

        await repo.adjust_total_staked(1000)
        state = await repo.adjust_total_staked(-400)

        assert state.total_staked == 600

    @pytest.mark.asyncio
    async def test_total_staked_cannot_go_negative(self, session):
        repo = PoolStateRepository(session)

        with pytest.raises(ValueError):
            await repo.adjust_total_staked(-1)


class TestLedgerEventRepository:
    """Append-only audit events."""

    @pytest.mark.asyncio
    async def test_record_and_filter(self, session):
        repo = LedgerEventRepository(session)
        await repo.record(LedgerEventType.STAKED, ALICE, 1000, 1)
        await repo.record(LedgerEventType.CLAIMED, ALICE, 10, 2)
        await repo.record(LedgerEventType.STAKED, BOB, 5, 3)

        events = await repo.get_by_participant(ALICE)
        claims = await repo.get_by_participant(ALICE, LedgerEventType.CLAIMED)

        assert [event.event_type for event in events] == ["staked", "claimed"]
        assert [event.amount for event in claims] == [10]
