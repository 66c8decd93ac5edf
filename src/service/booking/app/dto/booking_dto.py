"""Booking pipeline request / result DTOs."""

from decimal import Decimal
from typing import Optional

import attrs


@attrs.define(frozen=True)
class CreateBookingRequest:
    user_id: int
    event_id: int
    number_of_seats: int
    credit_card_token: str = attrs.field(repr=False)
    total_amount: Decimal = attrs.field(converter=Decimal, default=Decimal('0'))
    section_identifier: Optional[str] = None


@attrs.define(frozen=True)
class BookingResult:
    """
    Outcome of a booking attempt.

    Business failures (not found, sold out, payment rejected...) come back as
    ``success=False`` with a human readable message instead of being raised.
    """

    success: bool
    message: str
    booking_id: Optional[int] = None
    payment_id: Optional[str] = None

    @classmethod
    def success_result(cls, *, booking_id: int, payment_id: str) -> 'BookingResult':
        return cls(
            success=True,
            message='Booking created successfully',
            booking_id=booking_id,
            payment_id=payment_id,
        )

    @classmethod
    def failure(cls, message: str) -> 'BookingResult':
        return cls(success=False, message=message)
