"""Demo catalogue loaded into the in-memory stores when SEED_DEMO_DATA is on."""

from datetime import datetime, timezone
from decimal import Decimal

from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.entity.venue_entity import VenueEntity
from src.service.booking.domain.enum.payment_status import PaymentStatus
from src.service.booking.domain.seating_policy import (
    FullReservedSeating,
    OpenSeating,
    SectionReservedSeating,
)


def seed_users() -> list[UserEntity]:
    return [
        UserEntity(id=1, first_name='John', last_name='Doe', email='john.doe@example.com'),
        UserEntity(id=2, first_name='Jane', last_name='Smith', email='jane.smith@example.com'),
        UserEntity(
            id=3, first_name='Robert', last_name='Johnson', email='robert.johnson@example.com'
        ),
        UserEntity(
            id=4, first_name='Emily', last_name='Williams', email='emily.williams@example.com'
        ),
        UserEntity(
            id=5, first_name='Michael', last_name='Brown', email='michael.brown@example.com'
        ),
    ]


def seed_venues() -> list[VenueEntity]:
    return [
        VenueEntity(
            id=1,
            name='Grand Concert Hall',
            location='123 Music Street, New York',
            total_capacity=5000,
        ),
        VenueEntity(
            id=2,
            name='Open Air Festival Grounds',
            location='456 Park Avenue, Los Angeles',
            total_capacity=20000,
        ),
        VenueEntity(
            id=3, name='Jazz Club Downtown', location='789 Blues Road, Chicago', total_capacity=300
        ),
    ]


def seed_events() -> list[EventEntity]:
    return [
        EventEntity(
            id=1,
            name='Rock Concert 2027',
            description='Amazing rock concert',
            venue_id=1,
            event_date=datetime(2027, 12, 15, 20, 0, tzinfo=timezone.utc),
            event_type='Concert',
            seating_policy=FullReservedSeating(total_seats=5000),
        ),
        EventEntity(
            id=2,
            name='Summer Music Festival',
            description='All-day music festival',
            venue_id=2,
            event_date=datetime(2027, 8, 20, 12, 0, tzinfo=timezone.utc),
            event_type='Festival',
            seating_policy=OpenSeating(),
        ),
        EventEntity(
            id=3,
            name='Jazz Night',
            description='Evening jazz performance',
            venue_id=3,
            event_date=datetime(2027, 7, 10, 19, 0, tzinfo=timezone.utc),
            event_type='Concert',
            seating_policy=SectionReservedSeating(sections={'GoldenCircle': 100, 'Balcony': 200}),
        ),
    ]


def seed_bookings() -> list[Booking]:
    def _booking(
        booking_id: int,
        user_id: int,
        event_id: int,
        seats: int,
        section: str | None,
        amount: str,
        payment_id: str | None,
    ) -> Booking:
        # Seeded events sit in the venue with the same id
        return Booking(
            id=booking_id,
            user_id=user_id,
            event_id=event_id,
            venue_id=event_id,
            number_of_seats=seats,
            section_identifier=section,
            total_amount=Decimal(amount),
            payment_status=PaymentStatus.PAID if payment_id else PaymentStatus.PENDING,
            payment_id=payment_id,
        )

    return [
        _booking(1, 1, 1, 2, None, '150.00', 'PAY-123456'),
        _booking(2, 2, 1, 4, None, '300.00', 'PAY-123457'),
        _booking(3, 3, 2, 5, None, '250.00', 'PAY-123458'),
        _booking(4, 1, 3, 2, 'GoldenCircle', '200.00', 'PAY-123459'),
        _booking(5, 4, 3, 3, 'Balcony', '120.00', None),
    ]
