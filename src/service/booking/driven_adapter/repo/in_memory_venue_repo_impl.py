from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.venue_entity import VenueEntity
from src.service.booking.driven_adapter.repo.in_memory_store import InMemoryStore


class InMemoryVenueRepoImpl(IVenueRepo):
    def __init__(self, *, seed: Iterable[VenueEntity] = ()) -> None:
        self._store: InMemoryStore[VenueEntity] = InMemoryStore(seed)

    @Logger.io
    async def get_by_id(self, *, venue_id: int) -> Optional[VenueEntity]:
        return self._store.get(venue_id)

    @Logger.io
    async def get_all(self) -> List[VenueEntity]:
        return self._store.values()

    @Logger.io
    async def add(self, *, venue: VenueEntity) -> int:
        return self._store.insert(venue)

    @Logger.io
    async def update(self, *, venue: VenueEntity) -> None:
        self._store.replace(venue)

    @Logger.io
    async def delete(self, *, venue_id: int) -> None:
        self._store.remove(venue_id)
