from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_event_repo import IEventRepo
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.seating_policy import SeatingPolicy


class ManageEventUseCase:
    def __init__(self, *, event_repo: IEventRepo, venue_repo: IVenueRepo) -> None:
        self.event_repo = event_repo
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
    ) -> Self:
        return cls(event_repo=event_repo, venue_repo=venue_repo)

    @Logger.io
    async def create(
        self,
        *,
        name: str,
        description: str,
        venue_id: int,
        event_date: datetime,
        event_type: str,
        seating_policy: SeatingPolicy,
    ) -> EventEntity:
        await self._ensure_venue_exists(venue_id)

        event = EventEntity(
            name=name,
            description=description,
            venue_id=venue_id,
            event_date=event_date,
            event_type=event_type,
            seating_policy=seating_policy,
        )
        event_id = await self.event_repo.add(event=event)
        created = await self.event_repo.get_by_id(event_id=event_id)
        if not created:
            raise NotFoundError(f'Event with ID {event_id} not found')
        return created

    @Logger.io
    async def update(
        self,
        *,
        event_id: int,
        name: str,
        description: str,
        venue_id: int,
        event_date: datetime,
        event_type: str,
        seating_policy: SeatingPolicy,
    ) -> EventEntity:
        existing = await self.event_repo.get_by_id(event_id=event_id)
        if not existing:
            raise NotFoundError(f'Event with ID {event_id} not found')
        await self._ensure_venue_exists(venue_id)

        updated = EventEntity(
            id=event_id,
            name=name,
            description=description,
            venue_id=venue_id,
            event_date=event_date,
            event_type=event_type,
            seating_policy=seating_policy,
            created_at=existing.created_at,
        )
        await self.event_repo.update(event=updated)
        return updated

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        if not await self.event_repo.get_by_id(event_id=event_id):
            raise NotFoundError(f'Event with ID {event_id} not found')
        await self.event_repo.delete(event_id=event_id)

    async def _ensure_venue_exists(self, venue_id: int) -> None:
        if not await self.venue_repo.get_by_id(venue_id=venue_id):
            raise DomainError(f'Venue with ID {venue_id} not found')
