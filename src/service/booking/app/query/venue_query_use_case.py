from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.venue_entity import VenueEntity


class VenueQueryUseCase:
    def __init__(self, *, venue_repo: IVenueRepo) -> None:
        self.venue_repo = venue_repo

    @classmethod
    @inject
    def depends(cls, venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo])) -> Self:
        return cls(venue_repo=venue_repo)

    @Logger.io
    async def get_venue(self, *, venue_id: int) -> VenueEntity:
        venue = await self.venue_repo.get_by_id(venue_id=venue_id)
        if not venue:
            raise NotFoundError(f'Venue with ID {venue_id} not found')
        return venue

    @Logger.io
    async def list_venues(self) -> List[VenueEntity]:
        return await self.venue_repo.get_all()
