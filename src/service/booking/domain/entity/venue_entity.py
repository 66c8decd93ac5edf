from datetime import datetime
from typing import Optional

import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Venue {attribute.name} cannot be empty')


def _validate_positive(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError(f'Venue {attribute.name} must be greater than zero')


@attrs.define
class VenueEntity:
    name: str = attrs.field(validator=_validate_non_empty_string)
    location: str = attrs.field(validator=_validate_non_empty_string)
    total_capacity: int = attrs.field(validator=_validate_positive)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
