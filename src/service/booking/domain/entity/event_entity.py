from datetime import datetime, timezone
from typing import Optional

import attrs

from src.service.booking.domain.seating_policy import OpenSeating, SeatingPolicy


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Event {attribute.name} cannot be empty')


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes (SQLite round trips, seed data) are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@attrs.define
class EventEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    venue_id: int
    event_date: datetime = attrs.field(converter=_as_utc)
    description: str = ''
    event_type: str = ''
    seating_policy: SeatingPolicy = attrs.field(factory=OpenSeating)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    def is_future_event(self, *, now: Optional[datetime] = None) -> bool:
        return self.event_date > (now or datetime.now(timezone.utc))
