from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.service.booking.app.dto.event_availability import EventAvailability
from src.service.booking.domain.entity.event_entity import EventEntity
from src.service.booking.domain.seating_policy import (
    FullReservedSeating,
    OpenSeating,
    SeatingPolicy,
    SectionReservedSeating,
    section_info,
    seating_type_name,
)


class OpenSeatingSchema(BaseModel):
    type: Literal['Open'] = 'Open'


class FullReservedSeatingSchema(BaseModel):
    type: Literal['FullReserved']
    total_seats: int = Field(ge=0)


class SectionReservedSeatingSchema(BaseModel):
    type: Literal['SectionReserved']
    sections: dict[str, Annotated[int, Field(ge=0)]] = {}


SeatingPolicySchema = Annotated[
    Union[OpenSeatingSchema, FullReservedSeatingSchema, SectionReservedSeatingSchema],
    Field(discriminator='type'),
]


def seating_policy_from_schema(
    schema: Union[OpenSeatingSchema, FullReservedSeatingSchema, SectionReservedSeatingSchema],
) -> SeatingPolicy:
    match schema:
        case FullReservedSeatingSchema(total_seats=total_seats):
            return FullReservedSeating(total_seats=total_seats)
        case SectionReservedSeatingSchema(sections=sections):
            return SectionReservedSeating(sections=sections)
    return OpenSeating()


def seating_policy_to_schema(
    policy: SeatingPolicy,
) -> Union[OpenSeatingSchema, FullReservedSeatingSchema, SectionReservedSeatingSchema]:
    match policy:
        case FullReservedSeating(total_seats=total_seats):
            return FullReservedSeatingSchema(type='FullReserved', total_seats=total_seats)
        case SectionReservedSeating(sections=sections):
            return SectionReservedSeatingSchema(type='SectionReserved', sections=sections)
    return OpenSeatingSchema()


class EventCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str = ''
    venue_id: int
    event_date: datetime
    event_type: str = ''
    seating_policy: SeatingPolicySchema = Field(default_factory=OpenSeatingSchema)

    model_config = ConfigDict(
        json_schema_extra={
            'examples': [
                {
                    'name': 'Jazz Night',
                    'description': 'Evening jazz performance',
                    'venue_id': 3,
                    'event_date': '2027-07-10T19:00:00Z',
                    'event_type': 'Concert',
                    'seating_policy': {
                        'type': 'SectionReserved',
                        'sections': {'GoldenCircle': 100, 'Balcony': 200},
                    },
                }
            ]
        }
    )


class EventUpdateRequest(EventCreateRequest):
    pass


class EventResponse(BaseModel):
    id: int
    name: str
    description: str
    venue_id: int
    event_date: datetime
    event_type: str
    seating_policy: SeatingPolicySchema
    seating_type_name: str
    section_info: str
    is_future_event: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, event: EventEntity) -> 'EventResponse':
        return cls(
            id=event.id or 0,
            name=event.name,
            description=event.description,
            venue_id=event.venue_id,
            event_date=event.event_date,
            event_type=event.event_type,
            seating_policy=seating_policy_to_schema(event.seating_policy),
            seating_type_name=seating_type_name(event.seating_policy),
            section_info=section_info(event.seating_policy),
            is_future_event=event.is_future_event(),
            created_at=event.created_at,
        )


class EventAvailabilityResponse(BaseModel):
    event_id: int
    event_name: str
    description: str
    event_date: datetime
    event_type: str
    seating_type_name: str
    seating_info: str
    venue_id: int
    venue_name: str
    venue_location: str
    total_capacity: int
    booked_seats: int
    available_seats: int
    is_available: bool

    @classmethod
    def from_dto(cls, row: EventAvailability) -> 'EventAvailabilityResponse':
        return cls(
            event_id=row.event_id,
            event_name=row.event_name,
            description=row.description,
            event_date=row.event_date,
            event_type=row.event_type,
            seating_type_name=row.seating_type,
            seating_info=row.section_info,
            venue_id=row.venue_id,
            venue_name=row.venue_name,
            venue_location=row.venue_location,
            total_capacity=row.total_capacity,
            booked_seats=row.booked_seats,
            available_seats=row.available_seats,
            is_available=row.is_available,
        )

