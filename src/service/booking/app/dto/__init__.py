"""Application layer DTOs"""

from src.service.booking.app.dto.booking_dto import BookingResult, CreateBookingRequest
from src.service.booking.app.dto.event_availability import EventAvailability
from src.service.booking.app.dto.payment_result import PaymentResult

__all__ = [
    'BookingResult',
    'CreateBookingRequest',
    'EventAvailability',
    'PaymentResult',
]
