"""
Unit tests for catalogue and ledger maintenance use cases

- ManageUserUseCase: email uniqueness on create / update
- ManageEventUseCase: events must point at an existing venue
- RefundBookingUseCase / DeleteBookingUseCase: missing bookings, illegal refunds
"""

from datetime import datetime, timezone

import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.booking.app.command.delete_booking_use_case import DeleteBookingUseCase
from src.service.booking.app.command.manage_event_use_case import ManageEventUseCase
from src.service.booking.app.command.manage_user_use_case import ManageUserUseCase
from src.service.booking.app.command.refund_booking_use_case import RefundBookingUseCase
from src.service.booking.domain.enum.payment_status import PaymentStatus
from src.service.booking.domain.seating_policy import SectionReservedSeating
from src.service.booking.driven_adapter.repo import in_memory_seed_data
from src.service.booking.driven_adapter.repo.in_memory_booking_repo_impl import (
    InMemoryBookingRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_event_repo_impl import (
    InMemoryEventRepoImpl,
)
from src.service.booking.driven_adapter.repo.in_memory_user_repo_impl import InMemoryUserRepoImpl
from src.service.booking.driven_adapter.repo.in_memory_venue_repo_impl import (
    InMemoryVenueRepoImpl,
)


@pytest.mark.unit
class TestManageUserUseCase:
    @pytest.fixture
    def use_case(self) -> ManageUserUseCase:
        return ManageUserUseCase(
            user_repo=InMemoryUserRepoImpl(seed=in_memory_seed_data.seed_users())
        )

    @pytest.mark.asyncio
    async def test_create(self, use_case: ManageUserUseCase):
        user = await use_case.create(first_name='Ada', last_name='Lovelace', email='ada@example.com')

        assert user.id == 6
        assert user.full_name == 'Ada Lovelace'

    @pytest.mark.asyncio
    async def test_create_with_taken_email_conflicts(self, use_case: ManageUserUseCase):
        with pytest.raises(ConflictError):
            await use_case.create(first_name='J', last_name='D', email='john.doe@example.com')

    @pytest.mark.asyncio
    async def test_update_keeping_own_email(self, use_case: ManageUserUseCase):
        user = await use_case.update(
            user_id=1, first_name='Johnny', last_name='Doe', email='john.doe@example.com'
        )

        assert user.first_name == 'Johnny'

    @pytest.mark.asyncio
    async def test_update_to_someone_elses_email_conflicts(self, use_case: ManageUserUseCase):
        with pytest.raises(ConflictError):
            await use_case.update(
                user_id=1, first_name='John', last_name='Doe', email='jane.smith@example.com'
            )

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, use_case: ManageUserUseCase):
        with pytest.raises(NotFoundError):
            await use_case.delete(user_id=99)


@pytest.mark.unit
class TestManageEventUseCase:
    @pytest.fixture
    def use_case(self) -> ManageEventUseCase:
        return ManageEventUseCase(
            event_repo=InMemoryEventRepoImpl(seed=in_memory_seed_data.seed_events()),
            venue_repo=InMemoryVenueRepoImpl(seed=in_memory_seed_data.seed_venues()),
        )

    @pytest.mark.asyncio
    async def test_create_keeps_seating_policy(self, use_case: ManageEventUseCase):
        event = await use_case.create(
            name='Blues Night',
            description='',
            venue_id=3,
            event_date=datetime(2028, 1, 1, tzinfo=timezone.utc),
            event_type='Concert',
            seating_policy=SectionReservedSeating(sections={'Front': 50}),
        )

        assert event.id == 4
        assert event.seating_policy == SectionReservedSeating(sections={'Front': 50})

    @pytest.mark.asyncio
    async def test_create_for_missing_venue(self, use_case: ManageEventUseCase):
        with pytest.raises(DomainError, match='Venue with ID 42 not found'):
            await use_case.create(
                name='Nowhere',
                description='',
                venue_id=42,
                event_date=datetime(2028, 1, 1, tzinfo=timezone.utc),
                event_type='',
                seating_policy=SectionReservedSeating(),
            )

    @pytest.mark.asyncio
    async def test_update_missing_event(self, use_case: ManageEventUseCase):
        with pytest.raises(NotFoundError):
            await use_case.update(
                event_id=99,
                name='Ghost',
                description='',
                venue_id=1,
                event_date=datetime(2028, 1, 1, tzinfo=timezone.utc),
                event_type='',
                seating_policy=SectionReservedSeating(),
            )


@pytest.mark.unit
class TestBookingMaintenance:
    @pytest.fixture
    def booking_repo(self) -> InMemoryBookingRepoImpl:
        return InMemoryBookingRepoImpl(seed=in_memory_seed_data.seed_bookings())

    @pytest.mark.asyncio
    async def test_refund_paid_booking(self, booking_repo: InMemoryBookingRepoImpl):
        refunded = await RefundBookingUseCase(booking_repo=booking_repo).refund(booking_id=1)

        assert refunded.payment_status == PaymentStatus.REFUNDED
        stored = await booking_repo.get_by_id(booking_id=1)
        assert stored.payment_status == PaymentStatus.REFUNDED  # type: ignore[union-attr]
        # Refunds keep the seats counted
        assert await booking_repo.get_booking_count_for_event(event_id=1) == 6

    @pytest.mark.asyncio
    async def test_refund_pending_booking_fails(self, booking_repo: InMemoryBookingRepoImpl):
        with pytest.raises(DomainError, match='Cannot refund'):
            await RefundBookingUseCase(booking_repo=booking_repo).refund(booking_id=5)

    @pytest.mark.asyncio
    async def test_refund_missing_booking(self, booking_repo: InMemoryBookingRepoImpl):
        with pytest.raises(NotFoundError, match='Booking with ID 99 not found'):
            await RefundBookingUseCase(booking_repo=booking_repo).refund(booking_id=99)

    @pytest.mark.asyncio
    async def test_delete_frees_seats(self, booking_repo: InMemoryBookingRepoImpl):
        await DeleteBookingUseCase(booking_repo=booking_repo).delete(booking_id=2)

        assert await booking_repo.get_booking_count_for_event(event_id=1) == 2

    @pytest.mark.asyncio
    async def test_delete_missing_booking(self, booking_repo: InMemoryBookingRepoImpl):
        with pytest.raises(NotFoundError):
            await DeleteBookingUseCase(booking_repo=booking_repo).delete(booking_id=99)
