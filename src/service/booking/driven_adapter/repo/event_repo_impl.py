from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_event_repo import IEventRepo
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.driven_adapter.model import seating_policy_codec
from src.service.booking.driven_adapter.model.event_model import EventModel


class EventRepoImpl(IEventRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event_id)
            return self._to_entity(event_model) if event_model else None

    @Logger.io
    async def get_all(self) -> List[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).order_by(EventModel.id))
            return [self._to_entity(event_model) for event_model in result.scalars()]

    @Logger.io
    async def get_future_events(self) -> List[EventEntity]:
        # Filtered in Python: SQLite stores DateTime as naive text, so a SQL
        # comparison against an aware "now" is not reliable across backends
        events = await self.get_all()
        now = datetime.now(timezone.utc)
        return sorted(
            (event for event in events if event.event_date > now),
            key=lambda event: event.event_date,
        )

    @Logger.io
    async def add(self, *, event: EventEntity) -> int:
        seating_type, seating_config = seating_policy_codec.to_record(event.seating_policy)
        async with self.session_factory() as session:
            event_model = EventModel(
                name=event.name,
                description=event.description,
                venue_id=event.venue_id,
                event_date=event.event_date,
                event_type=event.event_type,
                seating_type=seating_type,
                seating_config=seating_config,
                created_at=event.created_at or datetime.now(timezone.utc),
            )
            session.add(event_model)
            await session.commit()
            return event_model.id

    @Logger.io
    async def update(self, *, event: EventEntity) -> None:
        seating_type, seating_config = seating_policy_codec.to_record(event.seating_policy)
        async with self.session_factory() as session:
            event_model = await session.get(EventModel, event.id) if event.id else None
            if not event_model:
                return
            event_model.name = event.name
            event_model.description = event.description
            event_model.venue_id = event.venue_id
            event_model.event_date = event.event_date
            event_model.event_type = event.event_type
            event_model.seating_type = seating_type
            event_model.seating_config = seating_config
            await session.commit()

    @Logger.io
    async def delete(self, *, event_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(EventModel).where(EventModel.id == event_id))
            await session.commit()

    @staticmethod
    def _to_entity(event_model: EventModel) -> EventEntity:
        return EventEntity(
            id=event_model.id,
            name=event_model.name,
            description=event_model.description,
            venue_id=event_model.venue_id,
            event_date=event_model.event_date,
            event_type=event_model.event_type,
            seating_policy=seating_policy_codec.from_record(
                event_model.seating_type, event_model.seating_config
            ),
            created_at=event_model.created_at,
        )
