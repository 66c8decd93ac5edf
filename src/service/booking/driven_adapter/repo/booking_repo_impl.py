from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.enum.payment_status import PaymentStatus
from src.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingRepoImpl(IBookingRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[Booking]:
        async with self.session_factory() as session:
            booking_model = await session.get(BookingModel, booking_id)
            return self._to_entity(booking_model) if booking_model else None

    @Logger.io
    async def get_all(self) -> List[Booking]:
        return await self._find(select(BookingModel))

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> List[Booking]:
        return await self._find(select(BookingModel).where(BookingModel.user_id == user_id))

    @Logger.io
    async def get_by_venue_id(self, *, venue_id: int) -> List[Booking]:
        return await self._find(select(BookingModel).where(BookingModel.venue_id == venue_id))

    @Logger.io
    async def get_by_event_id(self, *, event_id: int) -> List[Booking]:
        return await self._find(select(BookingModel).where(BookingModel.event_id == event_id))

    @Logger.io
    async def add(self, *, booking: Booking) -> int:
        now = datetime.now(timezone.utc)
        async with self.session_factory() as session:
            booking_model = BookingModel(
                user_id=booking.user_id,
                event_id=booking.event_id,
                venue_id=booking.venue_id,
                number_of_seats=booking.number_of_seats,
                section_identifier=booking.section_identifier,
                total_amount=booking.total_amount,
                payment_status=booking.payment_status.value,
                payment_id=booking.payment_id,
                booking_date=booking.booking_date or now,
                created_at=booking.created_at or now,
            )
            session.add(booking_model)
            await session.commit()
            return booking_model.id

    @Logger.io
    async def update(self, *, booking: Booking) -> None:
        async with self.session_factory() as session:
            booking_model = await session.get(BookingModel, booking.id) if booking.id else None
            if not booking_model:
                return
            booking_model.user_id = booking.user_id
            booking_model.event_id = booking.event_id
            booking_model.venue_id = booking.venue_id
            booking_model.number_of_seats = booking.number_of_seats
            booking_model.section_identifier = booking.section_identifier
            booking_model.total_amount = booking.total_amount
            booking_model.payment_status = booking.payment_status.value
            booking_model.payment_id = booking.payment_id
            await session.commit()

    @Logger.io
    async def delete(self, *, booking_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(BookingModel).where(BookingModel.id == booking_id))
            await session.commit()

    @Logger.io
    async def get_booking_count_for_event(self, *, event_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.coalesce(func.sum(BookingModel.number_of_seats), 0)).where(
                    BookingModel.event_id == event_id
                )
            )
            return int(result.scalar_one())

    @Logger.io
    async def get_booking_count_for_event_section(
        self, *, event_id: int, section_identifier: str
    ) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.coalesce(func.sum(BookingModel.number_of_seats), 0)).where(
                    BookingModel.event_id == event_id,
                    BookingModel.section_identifier == section_identifier,
                )
            )
            return int(result.scalar_one())

    @Logger.io
    async def find_bookings_for_paid_users_at_venue(self, *, venue_id: int) -> List[Booking]:
        """
        Semi-join:

            SELECT * FROM booking
            WHERE venue_id = :venue_id
              AND user_id IN (SELECT DISTINCT user_id FROM booking
                              WHERE venue_id = :venue_id AND payment_status = 'paid')
        """
        paid_users = (
            select(BookingModel.user_id)
            .where(
                BookingModel.venue_id == venue_id,
                BookingModel.payment_status == PaymentStatus.PAID.value,
            )
            .distinct()
        )
        return await self._find(
            select(BookingModel).where(
                BookingModel.venue_id == venue_id,
                BookingModel.user_id.in_(paid_users),
            )
        )

    @Logger.io
    async def find_users_without_bookings_in_venue(self, *, venue_id: int) -> List[int]:
        """
        Anti-join over users known to the booking ledger:

            SELECT DISTINCT user_id FROM booking
            EXCEPT
            SELECT DISTINCT user_id FROM booking WHERE venue_id = :venue_id
        """
        venue_users = select(BookingModel.user_id).where(BookingModel.venue_id == venue_id)
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel.user_id)
                .where(BookingModel.user_id.not_in(venue_users))
                .distinct()
                .order_by(BookingModel.user_id)
            )
            return list(result.scalars())

    async def _find(self, statement) -> List[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(statement.order_by(BookingModel.id))
            return [self._to_entity(booking_model) for booking_model in result.scalars()]

    @staticmethod
    def _to_entity(booking_model: BookingModel) -> Booking:
        return Booking(
            id=booking_model.id,
            user_id=booking_model.user_id,
            event_id=booking_model.event_id,
            venue_id=booking_model.venue_id,
            number_of_seats=booking_model.number_of_seats,
            section_identifier=booking_model.section_identifier,
            total_amount=booking_model.total_amount,
            payment_status=PaymentStatus(booking_model.payment_status),
            payment_id=booking_model.payment_id,
            booking_date=booking_model.booking_date,
            created_at=booking_model.created_at,
        )
