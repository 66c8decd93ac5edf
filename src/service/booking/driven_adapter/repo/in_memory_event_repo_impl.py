from datetime import datetime, timezone
from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_event_repo import IEventRepo
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.driven_adapter.repo.in_memory_store import InMemoryStore


class InMemoryEventRepoImpl(IEventRepo):
    def __init__(self, *, seed: Iterable[EventEntity] = ()) -> None:
        self._store: InMemoryStore[EventEntity] = InMemoryStore(seed)

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        return self._store.get(event_id)

    @Logger.io
    async def get_all(self) -> List[EventEntity]:
        return self._store.values()

    @Logger.io
    async def get_future_events(self) -> List[EventEntity]:
        now = datetime.now(timezone.utc)
        upcoming = self._store.values(lambda event: event.event_date > now)
        return sorted(upcoming, key=lambda event: event.event_date)

    @Logger.io
    async def add(self, *, event: EventEntity) -> int:
        return self._store.insert(event)

    @Logger.io
    async def update(self, *, event: EventEntity) -> None:
        self._store.replace(event)

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        self._store.remove(event_id)
