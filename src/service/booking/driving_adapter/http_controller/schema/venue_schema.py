from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from src.service.booking.domain.entity.venue_entity import VenueEntity


class VenueCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    location: str = Field(min_length=1, max_length=500)
    total_capacity: int = Field(gt=0)


class VenueUpdateRequest(VenueCreateRequest):
    pass


class VenueResponse(BaseModel):
    id: int
    name: str
    location: str
    total_capacity: int
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, venue: VenueEntity) -> 'VenueResponse':
        return cls(
            id=venue.id or 0,
            name=venue.name,
            location=venue.location,
            total_capacity=venue.total_capacity,
            created_at=venue.created_at,
        )
