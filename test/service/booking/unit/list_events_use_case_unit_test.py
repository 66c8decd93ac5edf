from datetime import datetime, timedelta, timezone

import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.booking.app.query.list_events_use_case import ListEventsUseCase
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.driven_adapter.repo import in_memory_seed_data
from src.service.booking.driven_adapter.repo.in_memory_booking_repo_impl import (
    InMemoryBookingRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_event_repo_impl import (
    InMemoryEventRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_venue_repo_impl import (
    InMemoryVenueRepoImpl,
)


@pytest.fixture
def event_repo() -> InMemoryEventRepoImpl:
    return InMemoryEventRepoImpl(seed=in_memory_seed_data.seed_events())


@pytest.fixture
def use_case(event_repo: InMemoryEventRepoImpl) -> ListEventsUseCase:
    return ListEventsUseCase(
        event_repo=event_repo,
        venue_repo=InMemoryVenueRepoImpl(seed=in_memory_seed_data.seed_venues()),
        booking_repo=InMemoryBookingRepoImpl(seed=in_memory_seed_data.seed_bookings()),
    )


@pytest.mark.unit
class TestListEventsUseCase:
    @pytest.mark.asyncio
    async def test_get_missing_event_raises(self, use_case: ListEventsUseCase):
        with pytest.raises(NotFoundError, match='Event with ID 99 not found'):
            await use_case.get_event(event_id=99)

    @pytest.mark.asyncio
    async def test_future_events_skip_past_ones(
        self, use_case: ListEventsUseCase, event_repo: InMemoryEventRepoImpl
    ):
        # Arrange
        await event_repo.add(
            event=EventEntity(
                name='Last Year Gala',
                venue_id=1,
                event_date=datetime.now(timezone.utc) - timedelta(days=365),
            )
        )

        # Act
        future = await use_case.list_future_events()

        # Assert
        assert len(await use_case.list_events()) == 4
        assert {event.id for event in future} == {1, 2, 3}

    @pytest.mark.asyncio
    async def test_availability_per_event(self, use_case: ListEventsUseCase):
        catalog = {row.event_id: row for row in await use_case.list_future_events_with_availability()}

        assert catalog[1].booked_seats == 6
        assert catalog[1].available_seats == 4994
        assert catalog[1].seating_type == 'Full Reserved Seating'
        assert catalog[2].available_seats == 19995
        assert catalog[3].venue_name == 'Jazz Club Downtown'
        assert catalog[3].available_seats == 295
        assert catalog[3].is_available is True

    @pytest.mark.asyncio
    async def test_events_without_venue_are_skipped(
        self, use_case: ListEventsUseCase, event_repo: InMemoryEventRepoImpl
    ):
        await event_repo.add(
            event=EventEntity(
                name='Orphan Show',
                venue_id=404,
                event_date=datetime.now(timezone.utc) + timedelta(days=10),
            )
        )

        catalog = await use_case.list_future_events_with_availability()

        assert {row.event_id for row in catalog} == {1, 2, 3}
