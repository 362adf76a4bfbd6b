"""Property-based tests for booking system invariants."""

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hotel_booking.core.database import Base
from hotel_booking.core.exceptions import RoomFullError
from hotel_booking.repositories import RoomRepository
from hotel_booking.services.booking_service import BookingService

from ..factories import create_booking, create_eligible_user, create_hotel, create_room

# Strategies for generating test data
capacity_values = st.integers(min_value=0, max_value=4)
attempt_counts = st.integers(min_value=1, max_value=8)


async def _run_scenario(scenario):
    """Run a scenario against a fresh in-memory database."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            return await scenario(session)
    finally:
        await engine.dispose()


@pytest.mark.property
@settings(max_examples=25, deadline=None)
@given(capacity=capacity_values, attempts=attempt_counts)
def test_room_never_exceeds_capacity(capacity, attempts):
    """Test that sequential bookings never put more guests in a room than it holds."""

    async def scenario(session):
        hotel = await create_hotel(session)
        room = await create_room(session, hotel, capacity=capacity)
        service = BookingService(session)

        successes = 0
        rejections = 0
        for _ in range(attempts):
            user, _ = await create_eligible_user(session)
            try:
                await service.create_booking(user.id, room.id)
                successes += 1
            except RoomFullError:
                rejections += 1

        occupancy = await RoomRepository(session).count_bookings(room.id)
        return successes, rejections, occupancy

    successes, rejections, occupancy = asyncio.run(_run_scenario(scenario))

    assert occupancy <= capacity
    assert successes == min(capacity, attempts)
    assert rejections == attempts - successes
    assert occupancy == successes


@pytest.mark.property
@settings(max_examples=20, deadline=None)
@given(capacity=st.integers(min_value=1, max_value=4), others=st.integers(min_value=0, max_value=4))
def test_change_to_same_room_never_blocked_by_itself(capacity, others):
    """Test moving a booking into its own room succeeds whenever it already fits there."""
    others = min(others, capacity - 1)

    async def scenario(session):
        hotel = await create_hotel(session)
        room = await create_room(session, hotel, capacity=capacity)
        user, _ = await create_eligible_user(session)
        booking = await create_booking(session, user, room)
        for _ in range(others):
            occupant, _ = await create_eligible_user(session)
            await create_booking(session, occupant, room)

        changed = await BookingService(session).change_booking(user.id, booking.id, room.id)
        occupancy = await RoomRepository(session).count_bookings(room.id)
        return changed.room_id, room.id, occupancy

    changed_room_id, room_id, occupancy = asyncio.run(_run_scenario(scenario))

    assert changed_room_id == room_id
    assert occupancy == others + 1
    assert occupancy <= capacity
