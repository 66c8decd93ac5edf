from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.payment_status import PaymentStatus
from src.service.booking.driven_adapter.repo.in_memory_store import InMemoryStore


class InMemoryBookingRepoImpl(IBookingRepo):
    def __init__(self, *, seed: Iterable[Booking] = ()) -> None:
        self._store: InMemoryStore[Booking] = InMemoryStore(seed)

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        return self._store.get(booking_id)

    @Logger.io
    async def get_all(self) -> List[Booking]:
        return self._store.values()

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> List[Booking]:
        return self._store.values(lambda booking: booking.user_id == user_id)

    @Logger.io
    async def get_by_venue_id(self, *, venue_id: int) -> List[Booking]:
        return self._store.values(lambda booking: booking.venue_id == venue_id)

    @Logger.io
    async def get_by_event_id(self, *, event_id: int) -> List[Booking]:
        return self._store.values(lambda booking: booking.event_id == event_id)

    @Logger.io
    async def add(self, *, booking: Booking) -> int:
        return self._store.insert(booking)

    @Logger.io
    async def update(self, *, booking: Booking) -> None:
        self._store.replace(booking)

    @Logger.io
    async def delete(self, *, booking_id: int) -> None:
        self._store.remove(booking_id)

    @Logger.io
    async def get_booking_count_for_event(self, *, event_id: int) -> int:
        bookings = self._store.values(lambda booking: booking.event_id == event_id)
        return sum(booking.number_of_seats for booking in bookings)

    @Logger.io
    async def get_booking_count_for_event_section(
        self, *, event_id: int, section_identifier: str
    ) -> int:
        bookings = self._store.values(
            lambda booking: booking.event_id == event_id
            and booking.section_identifier == section_identifier
        )
        return sum(booking.number_of_seats for booking in bookings)

    @Logger.io
    async def find_bookings_for_paid_users_at_venue(self, *, venue_id: int) -> List[Booking]:
        venue_bookings = self._store.values(lambda booking: booking.venue_id == venue_id)
        paid_user_ids = {
            booking.user_id
            for booking in venue_bookings
            if booking.payment_status == PaymentStatus.PAID
        }
        return [booking for booking in venue_bookings if booking.user_id in paid_user_ids]

    @Logger.io
    async def find_users_without_bookings_in_venue(self, *, venue_id: int) -> List[int]:
        all_bookings = self._store.values()
        booked_user_ids = {booking.user_id for booking in all_bookings}
        venue_user_ids = {
            booking.user_id for booking in all_bookings if booking.venue_id == venue_id
        }
        return sorted(booked_user_ids - venue_user_ids)
