from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.booking.domain.enum.payment_status import PaymentStatus


def _validate_number_of_seats(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise DomainError('Number of seats must be greater than zero')


@attrs.define
class Booking:
    user_id: int
    event_id: int
    venue_id: int
    number_of_seats: int = attrs.field(validator=_validate_number_of_seats)
    total_amount: Decimal = attrs.field(converter=Decimal)
    section_identifier: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.PENDING
    payment_id: Optional[str] = None
    id: Optional[int] = None
    booking_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        user_id: int,
        event_id: int,
        venue_id: int,
        number_of_seats: int,
        total_amount: Decimal,
        section_identifier: Optional[str] = None,
    ) -> 'Booking':
        now = datetime.now(timezone.utc)
        return cls(
            user_id=user_id,
            event_id=event_id,
            venue_id=venue_id,
            number_of_seats=number_of_seats,
            total_amount=total_amount,
            section_identifier=section_identifier or None,
            payment_status=PaymentStatus.PENDING,
            booking_date=now,
            created_at=now,
        )

    @Logger.io
    def mark_as_paid(self, *, payment_id: str) -> 'Booking':
        if self.payment_status != PaymentStatus.PENDING:
            raise DomainError(f'Cannot mark {self.payment_status} booking as paid')
        if not payment_id:
            raise DomainError('payment_id is required to mark a booking as paid')
        return attrs.evolve(self, payment_status=PaymentStatus.PAID, payment_id=payment_id)

    @Logger.io
    def mark_as_failed(self) -> 'Booking':
        if self.payment_status != PaymentStatus.PENDING:
            raise DomainError(f'Cannot mark {self.payment_status} booking as failed')
        return attrs.evolve(self, payment_status=PaymentStatus.FAILED)

    @Logger.io
    def refund(self) -> 'Booking':
        """
        Refund a paid booking

        Raises:
            DomainError: When the booking was never paid or is already refunded
        """
        if self.payment_status == PaymentStatus.REFUNDED:
            raise DomainError('Booking already refunded')
        if self.payment_status != PaymentStatus.PAID:
            raise DomainError(f'Cannot refund {self.payment_status} booking')
        return attrs.evolve(self, payment_status=PaymentStatus.REFUNDED)
