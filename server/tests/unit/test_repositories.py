"""Unit tests for the persistence access layer."""

import pytest

from hotel_booking.repositories import (
    BookingRepository,
    PaymentRepository,
    RoomRepository,
    SessionRepository,
    TicketRepository,
    UserRepository,
)

from ..factories import (
    create_booking,
    create_enrollment,
    create_hotel,
    create_payment,
    create_room,
    create_ticket,
    create_ticket_type,
    create_user,
    generate_valid_token,
)


@pytest.mark.asyncio
async def test_user_lookup(test_session):
    """Test users can be found by email and by id with their bookings."""
    user = await create_user(test_session, email="guest@example.com")
    hotel = await create_hotel(test_session)
    room = await create_room(test_session, hotel)
    await create_booking(test_session, user, room)
    repository = UserRepository(test_session)

    by_email = await repository.find_by_email("guest@example.com")
    by_id = await repository.find_by_id(user.id)

    assert by_email.id == user.id
    assert len(by_id.bookings) == 1
    assert by_id.bookings[0].room.id == room.id
    assert await repository.find_by_id(user.id + 100) is None


@pytest.mark.asyncio
async def test_session_lookup_by_token(test_session):
    """Test a stored session is found by its token."""
    user = await create_user(test_session)
    token = await generate_valid_token(test_session, user)

    session = await SessionRepository(test_session).find_by_token(token)

    assert session is not None
    assert session.user_id == user.id
    assert await SessionRepository(test_session).find_by_token("unknown") is None


@pytest.mark.asyncio
async def test_ticket_loaded_with_type(test_session):
    """Test the enrollment's ticket comes with its type flags."""
    user = await create_user(test_session)
    enrollment = await create_enrollment(test_session, user)
    ticket_type = await create_ticket_type(test_session, is_remote=False, includes_hotel=True)
    await create_ticket(test_session, enrollment, ticket_type)

    ticket = await TicketRepository(test_session).find_by_enrollment_id(enrollment.id)

    assert ticket.ticket_type.includes_hotel is True
    assert ticket.ticket_type.is_remote is False


@pytest.mark.asyncio
async def test_payment_by_ticket(test_session):
    """Test a ticket's payment is found, and a missing one returns None."""
    user = await create_user(test_session)
    enrollment = await create_enrollment(test_session, user)
    ticket_type = await create_ticket_type(test_session)
    ticket = await create_ticket(test_session, enrollment, ticket_type)
    repository = PaymentRepository(test_session)

    assert await repository.find_by_ticket_id(ticket.id) is None

    payment = await create_payment(test_session, ticket, value=1500)

    found = await repository.find_by_ticket_id(ticket.id)
    assert found.id == payment.id
    assert found.value == 1500


@pytest.mark.asyncio
async def test_room_booking_count(test_session):
    """Test room occupancy counts bookings and honours the exclusion."""
    hotel = await create_hotel(test_session)
    room = await create_room(test_session, hotel)
    first = await create_booking(test_session, await create_user(test_session), room)
    await create_booking(test_session, await create_user(test_session), room)
    repository = RoomRepository(test_session)

    assert await repository.count_bookings(room.id) == 2
    assert await repository.count_bookings(room.id, exclude_booking_id=first.id) == 1
    assert await repository.find_by_id(room.id + 1) is None


@pytest.mark.asyncio
async def test_booking_update_room(test_session):
    """Test a booking can be moved and re-read."""
    user = await create_user(test_session)
    hotel = await create_hotel(test_session)
    room = await create_room(test_session, hotel)
    target = await create_room(test_session, hotel, name="1021")
    booking = await create_booking(test_session, user, room)
    repository = BookingRepository(test_session)

    await repository.update_room(booking, target.id)

    reloaded = await repository.find_by_user_id(user.id)
    assert [b.room.id for b in reloaded] == [target.id]
    assert (await repository.find_by_id(booking.id)).room_id == target.id
