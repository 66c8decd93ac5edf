from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_repo import IUserRepo
from src.service.booking.domain.entity.user_entity import UserEntity


class ManageUserUseCase:
    def __init__(self, *, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @classmethod
    @inject
    def depends(cls, user_repo: IUserRepo = Depends(Provide[Container.user_repo])) -> Self:
        return cls(user_repo=user_repo)

    @Logger.io
    async def create(self, *, first_name: str, last_name: str, email: str) -> UserEntity:
        if await self.user_repo.get_by_email(email=email):
            raise ConflictError(f'User with email {email} already exists')

        user = UserEntity(first_name=first_name, last_name=last_name, email=email)
        user_id = await self.user_repo.add(user=user)
        created = await self.user_repo.get_by_id(user_id=user_id)
        if not created:
            raise NotFoundError(f'User with ID {user_id} not found')
        return created

    @Logger.io
    async def update(
        self, *, user_id: int, first_name: str, last_name: str, email: str
    ) -> UserEntity:
        existing = await self.user_repo.get_by_id(user_id=user_id)
        if not existing:
            raise NotFoundError(f'User with ID {user_id} not found')

        owner = await self.user_repo.get_by_email(email=email)
        if owner and owner.id != user_id:
            raise ConflictError(f'User with email {email} already exists')

        updated = UserEntity(
            id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            created_at=existing.created_at,
        )
        await self.user_repo.update(user=updated)
        return updated

    @Logger.io
    async def delete(self, *, user_id: int) -> None:
        if not await self.user_repo.get_by_id(user_id=user_id):
            raise NotFoundError(f'User with ID {user_id} not found')
        await self.user_repo.delete(user_id=user_id)
