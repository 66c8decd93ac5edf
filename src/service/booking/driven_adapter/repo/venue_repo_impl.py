from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.venue_entity import VenueEntity
from src.service.booking.driven_adapter.model.venue_model import VenueModel


class VenueRepoImpl(IVenueRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, venue_id: int) -> Optional[VenueEntity]:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue_id)
            return self._to_entity(venue_model) if venue_model else None

    @Logger.io
    async def get_all(self) -> List[VenueEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(VenueModel).order_by(VenueModel.id))
            return [self._to_entity(venue_model) for venue_model in result.scalars()]

    @Logger.io
    async def add(self, *, venue: VenueEntity) -> int:
        async with self.session_factory() as session:
            venue_model = VenueModel(
                name=venue.name,
                location=venue.location,
                total_capacity=venue.total_capacity,
                created_at=venue.created_at or datetime.now(timezone.utc),
            )
            session.add(venue_model)
            await session.commit()
            return venue_model.id

    @Logger.io
    async def update(self, *, venue: VenueEntity) -> None:
        async with self.session_factory() as session:
            venue_model = await session.get(VenueModel, venue.id) if venue.id else None
            if not venue_model:
                return
            venue_model.name = venue.name
            venue_model.location = venue.location
            venue_model.total_capacity = venue.total_capacity
            await session.commit()

    @Logger.io
    async def delete(self, *, venue_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(VenueModel).where(VenueModel.id == venue_id))
            await session.commit()

    @staticmethod
    def _to_entity(venue_model: VenueModel) -> VenueEntity:
        return VenueEntity(
            id=venue_model.id,
            name=venue_model.name,
            location=venue_model.location,
            total_capacity=venue_model.total_capacity,
            created_at=venue_model.created_at,
        )
