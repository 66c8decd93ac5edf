from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from src.service.booking.domain.entity.user_entity import UserEntity


class UserCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: EmailStr


class UserUpdateRequest(UserCreateRequest):
    pass


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    full_name: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'UserResponse':
        return cls(
            id=user.id or 0,
            first_name=user.first_name,
            last_name=user.last_name,
            full_name=user.full_name,
            email=user.email,
            created_at=user.created_at,
        )
