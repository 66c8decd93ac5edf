from typing import List

from fastapi import APIRouter, Depends, Response, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.booking.app.command.refund_booking_use_case import RefundBookingUseCase
from src.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from src.service.booking.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
    BookingResultResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


@router.get('')
@Logger.io
async def list_bookings(
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    return [BookingResponse.from_entity(booking) for booking in await use_case.list_all()]


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    response: Response,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResultResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('user_id', request.user_id)

        result = await booking_use_case.create_booking(request.to_dto())

        if not result.success:
            response.status_code = status.HTTP_400_BAD_REQUEST
        else:
            span.set_attribute('booking.id', result.booking_id or 0)
            response.headers['Location'] = f'/api/booking/{result.booking_id}'
        return BookingResultResponse.from_result(result)


@router.get('/user/{user_id}')
@Logger.io
async def list_user_bookings(
    user_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_by_user(user_id=user_id)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get('/venue/{venue_id}')
@Logger.io
async def list_venue_bookings(
    venue_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_by_venue(venue_id=venue_id)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get('/venue/{venue_id}/paid-users')
@Logger.io
async def list_paid_user_bookings_at_venue(
    venue_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[BookingResponse]:
    bookings = await use_case.list_paid_user_bookings_at_venue(venue_id=venue_id)
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get('/venue/{venue_id}/users-without-bookings')
@Logger.io
async def list_users_without_bookings_in_venue(
    venue_id: int,
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> List[int]:
    return await use_case.list_users_without_bookings_in_venue(venue_id=venue_id)


@router.get('/{booking_id}')
@Logger.io
async def get_booking(
    booking_id: int,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_booking(booking_id=booking_id)
    return BookingResponse.from_entity(booking)


@router.post('/{booking_id}/refund')
@Logger.io
async def refund_booking(
    booking_id: int,
    use_case: RefundBookingUseCase = Depends(RefundBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.refund(booking_id=booking_id)
    return BookingResponse.from_entity(booking)


@router.delete('/{booking_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_booking(
    booking_id: int,
    use_case: DeleteBookingUseCase = Depends(DeleteBookingUseCase.depends),
) -> None:
    await use_case.delete(booking_id=booking_id)
