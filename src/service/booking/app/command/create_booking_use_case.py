import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import PreconditionError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import booking_metrics
from src.platform.state.event_lock_registry import EventLockRegistry
from src.service.booking.app.dto.booking_dto import BookingResult, CreateBookingRequest
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.app.interface.i_event_repo import IEventRepo
from src.service.booking.app.interface.i_payment_gateway import IPaymentGateway
from src.service.booking.app.interface.i_user_repo import IUserRepo
from src.service.booking.app.interface.i_venue_repo import IVenueRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.entity.venue_entity import VenueEntity
from src.service.booking.domain.seating_policy import (
    SectionReservedSeating,
    available_capacity,
    can_accommodate,
)


class CreateBookingUseCase:
    """
    Create booking use case - validate, charge, persist

    Flow (first failing step wins, nothing is written before step 9):
    1. Reject a missing request (PreconditionError, not a BookingResult)
    2. Seats must be positive
    3. User must exist
    4. Event must exist
    5. Event must be in the future
    6. Event's venue must exist
    7. Capacity check against the event's seating policy
    8. Charge the card through the payment gateway
    9. Persist the paid booking

    Steps 7-9 run under a per-event lock so two requests in this process
    cannot both take the last seats.
    """

    def __init__(
        self,
        *,
        booking_repo: IBookingRepo,
        user_repo: IUserRepo,
        event_repo: IEventRepo,
        venue_repo: IVenueRepo,
        payment_gateway: IPaymentGateway,
        lock_registry: Optional[EventLockRegistry] = None,
    ) -> None:
        collaborators = {
            'booking_repo': booking_repo,
            'user_repo': user_repo,
            'event_repo': event_repo,
            'venue_repo': venue_repo,
            'payment_gateway': payment_gateway,
        }
        for name, collaborator in collaborators.items():
            if collaborator is None:
                raise PreconditionError(f'{name} is required')

        self.booking_repo = booking_repo
        self.user_repo = user_repo
        self.event_repo = event_repo
        self.venue_repo = venue_repo
        self.payment_gateway = payment_gateway
        self.lock_registry = lock_registry or EventLockRegistry()
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
        user_repo: IUserRepo = Depends(Provide[Container.user_repo]),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        venue_repo: IVenueRepo = Depends(Provide[Container.venue_repo]),
        payment_gateway: IPaymentGateway = Depends(Provide[Container.payment_gateway]),
        lock_registry: EventLockRegistry = Depends(Provide[Container.event_lock_registry]),
    ) -> Self:
        return cls(
            booking_repo=booking_repo,
            user_repo=user_repo,
            event_repo=event_repo,
            venue_repo=venue_repo,
            payment_gateway=payment_gateway,
            lock_registry=lock_registry,
        )

    @Logger.io
    async def create_booking(self, request: Optional[CreateBookingRequest]) -> BookingResult:
        if request is None:
            raise PreconditionError('request is required')

        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'booking.user_id': request.user_id,
                'booking.event_id': request.event_id,
                'booking.seats': request.number_of_seats,
            },
        ):
            if request.number_of_seats <= 0:
                return self._reject('validation', 'Number of seats must be greater than zero')

            user = await self.user_repo.get_by_id(user_id=request.user_id)
            if user is None:
                return self._reject('not_found', f'User with ID {request.user_id} not found')

            event = await self.event_repo.get_by_id(event_id=request.event_id)
            if event is None:
                return self._reject('not_found', f'Event with ID {request.event_id} not found')

            if not event.is_future_event():
                return self._reject('past_event', 'Cannot book tickets for past events')

            venue = await self.venue_repo.get_by_id(venue_id=event.venue_id)
            if venue is None:
                return self._reject('not_found', f'Venue with ID {event.venue_id} not found')

            async with self.lock_registry.hold(event.id):
                capacity_error = await self._check_capacity(
                    request=request, event=event, venue=venue
                )
                if capacity_error:
                    return self._reject('capacity', capacity_error)

                payment_id, payment_error = await self._charge(request.credit_card_token)
                if payment_error:
                    return self._reject('payment', payment_error)

                booking = Booking.create(
                    user_id=request.user_id,
                    event_id=request.event_id,
                    venue_id=event.venue_id,
                    number_of_seats=request.number_of_seats,
                    total_amount=request.total_amount,
                    section_identifier=request.section_identifier,
                ).mark_as_paid(payment_id=payment_id)
                booking_id = await self.booking_repo.add(booking=booking)

            Logger.base.info(
                f'🎫 [CREATE-BOOKING] Booking {booking_id} created: user={request.user_id}, '
                f'event={request.event_id}, seats={request.number_of_seats}, payment={payment_id}'
            )
            booking_metrics.record_outcome(result='success')
            booking_metrics.record_seats_sold(
                event_id=request.event_id, seats=request.number_of_seats
            )
            return BookingResult.success_result(booking_id=booking_id, payment_id=payment_id)

    async def _check_capacity(
        self, *, request: CreateBookingRequest, event: EventEntity, venue: VenueEntity
    ) -> Optional[str]:
        """Return the rejection message, or None when the seats fit"""
        policy = event.seating_policy
        section = request.section_identifier

        event_booked = await self.booking_repo.get_booking_count_for_event(event_id=event.id)
        available = available_capacity(policy, venue.total_capacity, event_booked)

        if isinstance(policy, SectionReservedSeating) and section:
            section_booked = await self.booking_repo.get_booking_count_for_event_section(
                event_id=event.id, section_identifier=section
            )
            available = policy.section_capacity(section) - section_booked

        if can_accommodate(policy, request.number_of_seats, available, section):
            return None

        # A supplied section is always named, whatever the seating policy
        if section:
            return (
                f"Insufficient capacity in section '{section}'. "
                f'Requested: {request.number_of_seats}, Available: {available}'
            )
        return (
            f'Insufficient capacity. '
            f'Requested: {request.number_of_seats}, Available: {available}'
        )

    async def _charge(self, card_number: str) -> tuple[str, Optional[str]]:
        """Return (payment_id, None) on success or ('', message) on failure"""
        started = time.perf_counter()
        try:
            payment = await self.payment_gateway.process_payment(card_number=card_number)
        except Exception as e:
            Logger.base.warning(f'💳 [PAYMENT] Gateway error: {type(e).__name__}: {e}')
            return '', f'Payment processing failed: {e}'
        finally:
            booking_metrics.payment_duration.labels(
                gateway=type(self.payment_gateway).__name__
            ).observe(time.perf_counter() - started)

        if not payment.is_valid or not payment.payment_id:
            return '', 'Payment was rejected. Please check your payment information'
        return payment.payment_id, None

    @staticmethod
    def _reject(reason: str, message: str) -> BookingResult:
        Logger.base.info(f'🚫 [CREATE-BOOKING] Rejected ({reason}): {message}')
        booking_metrics.record_outcome(result=reason)
        return BookingResult.failure(message)
