from datetime import datetime
from typing import Optional

import attrs


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'User {attribute.name} cannot be empty')


@attrs.define
class UserEntity:
    first_name: str = attrs.field(validator=_validate_non_empty_string)
    last_name: str = attrs.field(validator=_validate_non_empty_string)
    email: str = attrs.field(validator=_validate_non_empty_string)
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'
