"""Booking router for viewing, creating and changing hotel bookings."""

import logging

from fastapi import APIRouter, Path
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.dependencies import DatabaseSession, RequiredAuth
from ..core.exceptions import InternalServerError, ProblemDetailsException
from ..schemas.booking import Booking, BookingIdResponse, BookingRoomRequest
from ..schemas.common import Problem
from ..services.booking_service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/booking", tags=["booking"])

BOOKING_ID_PATH = Path(..., ge=1, description="Booking to change")

ERROR_RESPONSES = {
    400: {"model": Problem, "description": "Invalid request"},
    401: {"model": Problem, "description": "Missing or invalid session token"},
    403: {"model": Problem, "description": "Booking forbidden by a business rule"},
    404: {"model": Problem, "description": "Booking or room not found"},
}


def _booking_id_response(booking_model) -> dict:
    return BookingIdResponse(booking_id=booking_model.id).model_dump(by_alias=True)


@router.get("", response_model=list[Booking], responses={401: ERROR_RESPONSES[401], 404: ERROR_RESPONSES[404]})
async def find_booking(
    user_id: int = RequiredAuth,
    db: AsyncSession = DatabaseSession
) -> JSONResponse:
    """
    Get the authenticated user's booking.

    Responds with a one-element list holding the booking and its room.
    """
    booking_service = BookingService(db)

    try:
        booking = await booking_service.get_booking(user_id)
        response_data = Booking.model_validate(booking)

        return JSONResponse(
            status_code=200,
            content=[response_data.model_dump(by_alias=True, mode="json")]
        )

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking retrieval",
            extra={"user_id": user_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError() from e


@router.post("", response_model=BookingIdResponse, responses=ERROR_RESPONSES)
async def create_booking(
    request: BookingRoomRequest,
    user_id: int = RequiredAuth,
    db: AsyncSession = DatabaseSession
) -> JSONResponse:
    """Book a room for the authenticated user."""
    booking_service = BookingService(db)

    try:
        booking = await booking_service.create_booking(user_id, request.room_id)

        return JSONResponse(status_code=200, content=_booking_id_response(booking))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking creation",
            extra={"user_id": user_id, "room_id": request.room_id, "error": str(e)},
            exc_info=True
        )
        raise InternalServerError() from e


@router.put("/{booking_id}", response_model=BookingIdResponse, responses=ERROR_RESPONSES)
async def change_booking_room(
    request: BookingRoomRequest,
    booking_id: int = BOOKING_ID_PATH,
    user_id: int = RequiredAuth,
    db: AsyncSession = DatabaseSession
) -> JSONResponse:
    """Move one of the authenticated user's bookings to another room."""
    booking_service = BookingService(db)

    try:
        booking = await booking_service.change_booking(user_id, booking_id, request.room_id)

        return JSONResponse(status_code=200, content=_booking_id_response(booking))

    except ProblemDetailsException:
        raise

    except Exception as e:
        logger.error(
            "Unexpected error in booking change",
            extra={
                "user_id": user_id,
                "booking_id": booking_id,
                "room_id": request.room_id,
                "error": str(e)
            },
            exc_info=True
        )
        raise InternalServerError() from e
