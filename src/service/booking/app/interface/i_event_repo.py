from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.event_entity import EventEntity


class IEventRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def get_all(self) -> List[EventEntity]:
        pass

    @abstractmethod
    async def get_future_events(self) -> List[EventEntity]:
        """Events dated after now, earliest first"""
        pass

    @abstractmethod
    async def add(self, *, event: EventEntity) -> int:
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> None:
        pass

    @abstractmethod
    async def delete(self, *, event_id: int) -> None:
        pass
