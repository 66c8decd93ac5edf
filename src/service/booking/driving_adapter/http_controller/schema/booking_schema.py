from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.booking.app.dto.booking_dto import BookingResult, CreateBookingRequest
from src.service.booking.domain.entity.booking_entity import Booking


class BookingCreateRequest(BaseModel):
    user_id: int
    event_id: int
    number_of_seats: int
    credit_card_token: str = Field(repr=False)
    total_amount: Decimal = Decimal('0')
    section_identifier: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'user_id': 1,
                    'event_id': 1,
                    'number_of_seats': 2,
                    'credit_card_token': '4111-1111-1111-1111',
                    'total_amount': '150.00',
                },
                {
                    'user_id': 2,
                    'event_id': 3,
                    'number_of_seats': 2,
                    'credit_card_token': '4111111111111111',
                    'total_amount': '200.00',
                    'section_identifier': 'GoldenCircle',
                },
            ]
        }
    )

    def to_dto(self) -> CreateBookingRequest:
        return CreateBookingRequest(
            user_id=self.user_id,
            event_id=self.event_id,
            number_of_seats=self.number_of_seats,
            credit_card_token=self.credit_card_token,
            total_amount=self.total_amount,
            section_identifier=self.section_identifier,
        )


class BookingResultResponse(BaseModel):
    success: bool
    message: str
    booking_id: Optional[int] = None
    payment_id: Optional[str] = None

    @classmethod
    def from_result(cls, result: BookingResult) -> 'BookingResultResponse':
        return cls(
            success=result.success,
            message=result.message,
            booking_id=result.booking_id,
            payment_id=result.payment_id,
        )


class BookingResponse(BaseModel):
    id: int
    user_id: int
    event_id: int
    venue_id: int
    number_of_seats: int
    section_identifier: Optional[str] = None
    total_amount: Decimal
    payment_status: str
    payment_id: Optional[str] = None
    booking_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            id=booking.id or 0,
            user_id=booking.user_id,
            event_id=booking.event_id,
            venue_id=booking.venue_id,
            number_of_seats=booking.number_of_seats,
            section_identifier=booking.section_identifier,
            total_amount=booking.total_amount,
            payment_status=booking.payment_status.value,
            payment_id=booking.payment_id,
            booking_date=booking.booking_date,
            created_at=booking.created_at,
        )
