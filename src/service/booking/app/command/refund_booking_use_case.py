from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking


class RefundBookingUseCase:
    def __init__(self, *, booking_repo: IBookingRepo) -> None:
        self.booking_repo = booking_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def refund(self, *, booking_id: int) -> Booking:
        """
        Mark a paid booking as refunded. Only the status flag changes; the
        seats stay counted against the event.

        Raises:
            NotFoundError: Booking does not exist
            DomainError: Booking is not in Paid state
        """
        booking = await self.booking_repo.get_by_id(booking_id=booking_id)
        if not booking:
            raise NotFoundError(f'Booking with ID {booking_id} not found')

        refunded = booking.refund()
        await self.booking_repo.update(booking=refunded)
        Logger.base.info(f'💸 [REFUND] Booking {booking_id} refunded')
        return refunded
