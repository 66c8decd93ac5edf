from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_repo import IUserRepo
from src.service.booking.domain.entity.user_entity import UserEntity


class UserQueryUseCase:
    def __init__(self, *, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @classmethod
    @inject
    def depends(cls, user_repo: IUserRepo = Depends(Provide[Container.user_repo])) -> Self:
        return cls(user_repo=user_repo)

    @Logger.io
    async def get_user(self, *, user_id: int) -> UserEntity:
        user = await self.user_repo.get_by_id(user_id=user_id)
        if not user:
            raise NotFoundError(f'User with ID {user_id} not found')
        return user

    @Logger.io
    async def list_users(self) -> List[UserEntity]:
        return await self.user_repo.get_all()
