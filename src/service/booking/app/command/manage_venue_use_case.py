from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.venue_entity import VenueEntity


class ManageVenueUseCase:
    def __init__(self, *, venue_repo: IVenueRepo) -> None:
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(cls, venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo])) -> Self:
        return cls(venue_repo=venue_repo)

    @Logger.io
    async def create(self, *, name: str, location: str, total_capacity: int) -> VenueEntity:
        venue = VenueEntity(name=name, location=location, total_capacity=total_capacity)
        venue_id = await self.venue_repo.add(venue=venue)
        created = await self.venue_repo.get_by_id(venue_id=venue_id)
        if not created:
            raise NotFoundError(f'Venue with ID {venue_id} not found')
        return created

    @Logger.io
    async def update(
        self, *, venue_id: int, name: str, location: str, total_capacity: int
    ) -> VenueEntity:
        existing = await self.venue_repo.get_by_id(venue_id=venue_id)
        if not existing:
            raise NotFoundError(f'Venue with ID {venue_id} not found')

        updated = VenueEntity(
            id=venue_id,
            name=name,
            location=location,
            total_capacity=total_capacity,
            created_at=existing.created_at,
        )
        await self.venue_repo.update(venue=updated)
        return updated

    @Logger.io
    async def delete(self, *, venue_id: int) -> None:
        if not await self.venue_repo.get_by_id(venue_id=venue_id):
            raise NotFoundError(f'Venue with ID {venue_id} not found')
        await self.venue_repo.delete(venue_id=venue_id)
