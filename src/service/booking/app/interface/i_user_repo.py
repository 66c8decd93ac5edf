from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.booking.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_all(self) -> List[UserEntity]:
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def add(self, *, user: UserEntity) -> int:
        pass

    @abstractmethod
    async def update(self, *, user: UserEntity) -> None:
        pass

    @abstractmethod
    async def delete(self, *, user_id: int) -> None:
        pass
