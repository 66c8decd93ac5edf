"""
Integration tests for the SQLAlchemy repositories

Each test gets its own SQLite file (aiosqlite) seeded with the demo
catalogue through script/seed_data.py, so ids match the in-memory seed.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio

from script.seed_data import seed
from src.platform.database.orm_db_setting import Database
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.app.dto.booking_dto import CreateBookingRequest
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.domain.enum.payment_status import PaymentStatus
from src.service.booking.domain.seating_policy import (
    FullReservedSeating,
    OpenSeating,
    SectionReservedSeating,
)
from src.service.booking.driven_adapter.payment.simulated_payment_gateway_impl import (
    SimulatedPaymentGatewayImpl,
)
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.booking.driven_adapter.repo.event_repo_impl import EventRepoImpl
from src.service.booking.driven_adapter.repo.user_repo_impl import UserRepoImpl
from src.service.booking.driven_adapter.repo.venue_repo_impl import VenueRepoImpl


@pytest_asyncio.fixture
async def seeded_database(database: Database) -> Database:
    await seed(database)
    return database


@pytest.mark.integration
class TestSqlRepositories:
    @pytest.mark.asyncio
    async def test_seed_counts(self, seeded_database: Database):
        assert len(await UserRepoImpl(session_factory=seeded_database.session).get_all()) == 5
        assert len(await VenueRepoImpl(session_factory=seeded_database.session).get_all()) == 3
        assert len(await EventRepoImpl(session_factory=seeded_database.session).get_all()) == 3
        assert len(await BookingRepoImpl(session_factory=seeded_database.session).get_all()) == 5

    @pytest.mark.asyncio
    async def test_seating_policies_survive_storage(self, seeded_database: Database):
        event_repo = EventRepoImpl(session_factory=seeded_database.session)

        rock = await event_repo.get_by_id(event_id=1)
        festival = await event_repo.get_by_id(event_id=2)
        jazz = await event_repo.get_by_id(event_id=3)

        assert rock.seating_policy == FullReservedSeating(total_seats=5000)  # type: ignore[union-attr]
        assert festival.seating_policy == OpenSeating()  # type: ignore[union-attr]
        assert jazz.seating_policy == SectionReservedSeating(  # type: ignore[union-attr]
            sections={'GoldenCircle': 100, 'Balcony': 200}
        )
        assert jazz.event_date.tzinfo is not None  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_future_events(self, seeded_database: Database):
        event_repo = EventRepoImpl(session_factory=seeded_database.session)
        await event_repo.add(
            event=EventEntity(
                name='Old Show',
                venue_id=1,
                event_date=datetime.now(timezone.utc) - timedelta(days=1),
            )
        )

        future = await event_repo.get_future_events()

        assert {event.id for event in future} == {1, 2, 3}

    @pytest.mark.asyncio
    async def test_user_lookup_by_email(self, seeded_database: Database):
        user_repo = UserRepoImpl(session_factory=seeded_database.session)

        user = await user_repo.get_by_email(email='jane.smith@example.com')

        assert user is not None and user.id == 2
        assert await user_repo.get_by_email(email='nobody@example.com') is None

    @pytest.mark.asyncio
    async def test_user_update_and_delete(self, seeded_database: Database):
        user_repo = UserRepoImpl(session_factory=seeded_database.session)

        await user_repo.update(
            user=UserEntity(id=5, first_name='Mike', last_name='Brown', email='mike@example.com')
        )
        assert (await user_repo.get_by_id(user_id=5)).first_name == 'Mike'  # type: ignore[union-attr]

        await user_repo.delete(user_id=5)
        assert await user_repo.get_by_id(user_id=5) is None

    @pytest.mark.asyncio
    async def test_booking_counts(self, seeded_database: Database):
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)

        assert await booking_repo.get_booking_count_for_event(event_id=1) == 6
        assert await booking_repo.get_booking_count_for_event(event_id=99) == 0
        assert (
            await booking_repo.get_booking_count_for_event_section(
                event_id=3, section_identifier='GoldenCircle'
            )
            == 2
        )

    @pytest.mark.asyncio
    async def test_booking_round_trip(self, seeded_database: Database):
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)
        booking = Booking.create(
            user_id=5,
            event_id=2,
            venue_id=2,
            number_of_seats=3,
            total_amount=Decimal('75.50'),
        ).mark_as_paid(payment_id='PAY-xyz')

        booking_id = await booking_repo.add(booking=booking)
        stored = await booking_repo.get_by_id(booking_id=booking_id)

        assert stored is not None
        assert stored.payment_status == PaymentStatus.PAID
        assert stored.payment_id == 'PAY-xyz'
        assert stored.total_amount == Decimal('75.50')
        assert stored.section_identifier is None

    @pytest.mark.asyncio
    async def test_refund_is_persisted(self, seeded_database: Database):
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)
        booking = await booking_repo.get_by_id(booking_id=1)

        await booking_repo.update(booking=booking.refund())  # type: ignore[union-attr]

        stored = await booking_repo.get_by_id(booking_id=1)
        assert stored.payment_status == PaymentStatus.REFUNDED  # type: ignore[union-attr]

    @pytest.mark.asyncio
    async def test_paid_users_at_venue(self, seeded_database: Database):
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)

        venue_one = await booking_repo.find_bookings_for_paid_users_at_venue(venue_id=1)
        venue_three = await booking_repo.find_bookings_for_paid_users_at_venue(venue_id=3)

        assert [b.id for b in venue_one] == [1, 2]
        assert [b.user_id for b in venue_three] == [1]

    @pytest.mark.asyncio
    async def test_users_without_bookings_in_venue(self, seeded_database: Database):
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)

        assert await booking_repo.find_users_without_bookings_in_venue(venue_id=1) == [3, 4]
        assert await booking_repo.find_users_without_bookings_in_venue(venue_id=3) == [2, 3]


@pytest.mark.integration
class TestCreateBookingOnSql:
    @pytest.mark.asyncio
    async def test_booking_is_stored_and_counted(self, seeded_database: Database):
        # Arrange
        booking_repo = BookingRepoImpl(session_factory=seeded_database.session)
        use_case = CreateBookingUseCase(
            booking_repo=booking_repo,
            user_repo=UserRepoImpl(session_factory=seeded_database.session),
            event_repo=EventRepoImpl(session_factory=seeded_database.session),
            venue_repo=VenueRepoImpl(session_factory=seeded_database.session),
            payment_gateway=SimulatedPaymentGatewayImpl(),
        )

        # Act
        result = await use_case.create_booking(
            CreateBookingRequest(
                user_id=2,
                event_id=3,
                number_of_seats=4,
                credit_card_token='4111111111111111',
                total_amount=Decimal('400.00'),
                section_identifier='GoldenCircle',
            )
        )

        # Assert
        assert result.success is True
        assert (
            await booking_repo.get_booking_count_for_event_section(
                event_id=3, section_identifier='GoldenCircle'
            )
            == 6
        )
        stored = await booking_repo.get_by_id(booking_id=result.booking_id)  # type: ignore[arg-type]
        assert stored.venue_id == 3  # type: ignore[union-attr]
        assert stored.payment_id == result.payment_id  # type: ignore[union-attr]
