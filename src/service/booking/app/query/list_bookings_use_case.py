from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking


class ListBookingsUseCase:
    def __init__(self, *, booking_repo: IBookingRepo):
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def list_all(self) -> List[Booking]:
        return await self.booking_repo.get_all()

    @Logger.io
    async def list_by_user(self, *, user_id: int) -> List[Booking]:
        return await self.booking_repo.get_by_user_id(user_id=user_id)

    @Logger.io
    async def list_by_venue(self, *, venue_id: int) -> List[Booking]:
        return await self.booking_repo.get_by_venue_id(venue_id=venue_id)

    @Logger.io
    async def list_paid_user_bookings_at_venue(self, *, venue_id: int) -> List[Booking]:
        return await self.booking_repo.find_bookings_for_paid_users_at_venue(venue_id=venue_id)

    @Logger.io
    async def list_users_without_bookings_in_venue(self, *, venue_id: int) -> List[int]:
        return await self.booking_repo.find_users_without_bookings_in_venue(venue_id=venue_id)
