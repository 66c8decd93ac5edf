from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.manage_event_use_case import ManageEventUseCase
from src.service.booking.app.query.list_events_use_case import ListEventsUseCase
from src.service.booking.driving_adapter.http_controller.schema.event_schema import (
    EventAvailabilityResponse,
    EventCreateRequest,
    EventResponse,
    EventUpdateRequest,
    seating_policy_from_schema,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [EventResponse.from_entity(event) for event in await use_case.list_events()]


@router.get('/future')
@Logger.io
async def list_future_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventResponse]:
    return [EventResponse.from_entity(event) for event in await use_case.list_future_events()]


@router.get('/future-with-availability')
@Logger.io
async def list_future_events_with_availability(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[EventAvailabilityResponse]:
    catalog = await use_case.list_future_events_with_availability()
    return [EventAvailabilityResponse.from_dto(row) for row in catalog]


@router.get('/{event_id}')
@Logger.io
async def get_event(
    event_id: int,
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventResponse:
    return EventResponse.from_entity(await use_case.get_event(event_id=event_id))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> EventResponse:
    event = await use_case.create(
        name=request.name,
        description=request.description,
        venue_id=request.venue_id,
        event_date=request.event_date,
        event_type=request.event_type,
        seating_policy=seating_policy_from_schema(request.seating_policy),
    )
    return EventResponse.from_entity(event)


@router.put('/{event_id}')
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> EventResponse:
    event = await use_case.update(
        event_id=event_id,
        name=request.name,
        description=request.description,
        venue_id=request.venue_id,
        event_date=request.event_date,
        event_type=request.event_type,
        seating_policy=seating_policy_from_schema(request.seating_policy),
    )
    return EventResponse.from_entity(event)


@router.delete('/{event_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_event(
    event_id: int,
    use_case: ManageEventUseCase = Depends(ManageEventUseCase.depends),
) -> None:
    await use_case.delete(event_id=event_id)
