from datetime import datetime

import attrs


@attrs.define(frozen=True)
class EventAvailability:
    """Catalog row: one upcoming event with its venue and remaining seats"""

    event_id: int
    event_name: str
    description: str
    event_date: datetime
    event_type: str
    seating_type: str
    section_info: str
    venue_id: int
    venue_name: str
    venue_location: str
    total_capacity: int
    booked_seats: int
    available_seats: int

    @property
    def is_available(self) -> bool:
        return self.available_seats > 0
