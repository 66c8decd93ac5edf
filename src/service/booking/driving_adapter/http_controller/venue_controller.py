from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.manage_venue_use_case import ManageVenueUseCase
from src.service.booking.app.query.venue_query_use_case import VenueQueryUseCase
from src.service.booking.driving_adapter.http_controller.schema.venue_schema import (
    VenueCreateRequest,
    VenueResponse,
    VenueUpdateRequest,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_venues(
    use_case: VenueQueryUseCase = Depends(VenueQueryUseCase.depends),
) -> List[VenueResponse]:
    return [VenueResponse.from_entity(venue) for venue in await use_case.list_venues()]


@router.get('/{venue_id}')
@Logger.io
async def get_venue(
    venue_id: int,
    use_case: VenueQueryUseCase = Depends(VenueQueryUseCase.depends),
) -> VenueResponse:
    return VenueResponse.from_entity(await use_case.get_venue(venue_id=venue_id))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_venue(
    request: VenueCreateRequest,
    use_case: ManageVenueUseCase = Depends(ManageVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.create(
        name=request.name, location=request.location, total_capacity=request.total_capacity
    )
    return VenueResponse.from_entity(venue)


@router.put('/{venue_id}')
@Logger.io
async def update_venue(
    venue_id: int,
    request: VenueUpdateRequest,
    use_case: ManageVenueUseCase = Depends(ManageVenueUseCase.depends),
) -> VenueResponse:
    venue = await use_case.update(
        venue_id=venue_id,
        name=request.name,
        location=request.location,
        total_capacity=request.total_capacity,
    )
    return VenueResponse.from_entity(venue)


@router.delete('/{venue_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_venue(
    venue_id: int,
    use_case: ManageVenueUseCase = Depends(ManageVenueUseCase.depends),
) -> None:
    await use_case.delete(venue_id=venue_id)
