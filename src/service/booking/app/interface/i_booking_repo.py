from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    """Booking ledger: CRUD plus the seat totals and venue audience queries"""

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Booking]:
        pass

    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> List[Booking]:
        pass

    @abstractmethod
    async def get_by_venue_id(self, *, venue_id: int) -> List[Booking]:
        pass

    @abstractmethod
    async def get_by_event_id(self, *, event_id: int) -> List[Booking]:
        pass

    @abstractmethod
    async def add(self, *, booking: Booking) -> int:
        """Persist a new booking and return its id"""
        pass

    @abstractmethod
    async def update(self, *, booking: Booking) -> None:
        pass

    @abstractmethod
    async def delete(self, *, booking_id: int) -> None:
        pass

    @abstractmethod
    async def get_booking_count_for_event(self, *, event_id: int) -> int:
        """Seats booked for the event, across every payment status"""
        pass

    @abstractmethod
    async def get_booking_count_for_event_section(
        self, *, event_id: int, section_identifier: str
    ) -> int:
        pass

    @abstractmethod
    async def find_bookings_for_paid_users_at_venue(self, *, venue_id: int) -> List[Booking]:
        """All venue bookings of users holding at least one paid booking there"""
        pass

    @abstractmethod
    async def find_users_without_bookings_in_venue(self, *, venue_id: int) -> List[int]:
        """Users seen in any booking, minus those with a booking at the venue"""
        pass
