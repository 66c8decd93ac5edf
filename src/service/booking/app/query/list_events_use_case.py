from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.dto.event_availability import EventAvailability
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.app.interface.i_event_repo import IEventRepo
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.seating_policy import (
    available_capacity,
    section_info,
    seating_type_name,
)


class ListEventsUseCase:
    def __init__(
        self, *, event_repo: IEventRepo, venue_repo: IVenueRepo, booking_repo: IBookingRepo
    ) -> None:
        self.event_repo = event_repo
        self.venue_repo = venue_repo
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(event_repo=event_repo, venue_repo=venue_repo, booking_repo=booking_repo)

    @Logger.io
    async def get_event(self, *, event_id: int) -> EventEntity:
        event = await self.event_repo.get_by_id(event_id=event_id)
        if not event:
            raise NotFoundError(f'Event with ID {event_id} not found')
        return event

    @Logger.io
    async def list_events(self) -> List[EventEntity]:
        return await self.event_repo.get_all()

    @Logger.io
    async def list_future_events(self) -> List[EventEntity]:
        return await self.event_repo.get_future_events()

    @Logger.io
    async def list_future_events_with_availability(self) -> List[EventAvailability]:
        """Upcoming events with remaining seats; events whose venue is gone are skipped"""
        catalog: List[EventAvailability] = []
        for event in await self.event_repo.get_future_events():
            venue = await self.venue_repo.get_by_id(venue_id=event.venue_id)
            if not venue:
                continue

            booked = await self.booking_repo.get_booking_count_for_event(event_id=event.id)
            catalog.append(
                EventAvailability(
                    event_id=event.id,
                    event_name=event.name,
                    description=event.description,
                    event_date=event.event_date,
                    event_type=event.event_type,
                    seating_type=seating_type_name(event.seating_policy),
                    section_info=section_info(event.seating_policy),
                    venue_id=venue.id,
                    venue_name=venue.name,
                    venue_location=venue.location,
                    total_capacity=venue.total_capacity,
                    booked_seats=booked,
                    available_seats=available_capacity(
                        event.seating_policy, venue.total_capacity, booked
                    ),
                )
            )
        return catalog
