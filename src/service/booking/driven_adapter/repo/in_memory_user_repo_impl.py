from typing import Iterable, List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_repo import IUserRepo
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.driven_adapter.repo.in_memory_store import InMemoryStore


class InMemoryUserRepoImpl(IUserRepo):
    def __init__(self, *, seed: Iterable[UserEntity] = ()) -> None:
        self._store: InMemoryStore[UserEntity] = InMemoryStore(seed)

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        return self._store.get(user_id)

    @Logger.io
    async def get_all(self) -> List[UserEntity]:
        return self._store.values()

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        matches = self._store.values(lambda user: user.email.lower() == email.lower())
        return matches[0] if matches else None

    @Logger.io
    async def add(self, *, user: UserEntity) -> int:
        return self._store.insert(user)

    @Logger.io
    async def update(self, *, user: UserEntity) -> None:
        self._store.replace(user)

    @Logger.io
    async def delete(self, *, user_id: int) -> None:
        self._store.remove(user_id)
