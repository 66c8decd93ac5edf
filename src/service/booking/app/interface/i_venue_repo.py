from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.venue_entity import VenueEntity


class IVenueRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, venue_id: int) -> Optional[VenueEntity]:
        pass

    @abstractmethod
    async def get_all(self) -> List[VenueEntity]:
        pass

    @abstractmethod
    async def add(self, *, venue: VenueEntity) -> int:
        pass

    @abstractmethod
    async def update(self, *, venue: VenueEntity) -> None:
        pass

    @abstractmethod
    async def delete(self, *, venue_id: int) -> None:
        pass
