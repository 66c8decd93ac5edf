from datetime import datetime, timezone
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_user_repo import IUserRepo
from src.service.booking.domain.entity.user_entity import UserEntity
from src.service.booking.driven_adapter.model.user_model import UserModel


class UserRepoImpl(IUserRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, user_id: int) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user_id)
            return self._to_entity(user_model) if user_model else None

    @Logger.io
    async def get_all(self) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).order_by(UserModel.id))
            return [self._to_entity(user_model) for user_model in result.scalars()]

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(UserModel).where(func.lower(UserModel.email) == email.lower()).limit(1)
            )
            user_model = result.scalar_one_or_none()
            return self._to_entity(user_model) if user_model else None

    @Logger.io
    async def add(self, *, user: UserEntity) -> int:
        async with self.session_factory() as session:
            user_model = UserModel(
                first_name=user.first_name,
                last_name=user.last_name,
                email=user.email,
                created_at=user.created_at or datetime.now(timezone.utc),
            )
            session.add(user_model)
            await session.commit()
            return user_model.id

    @Logger.io
    async def update(self, *, user: UserEntity) -> None:
        async with self.session_factory() as session:
            user_model = await session.get(UserModel, user.id) if user.id else None
            if not user_model:
                return
            user_model.first_name = user.first_name
            user_model.last_name = user.last_name
            user_model.email = user.email
            await session.commit()

    @Logger.io
    async def delete(self, *, user_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(UserModel).where(UserModel.id == user_id))
            await session.commit()

    @staticmethod
    def _to_entity(user_model: UserModel) -> UserEntity:
        return UserEntity(
            id=user_model.id,
            first_name=user_model.first_name,
            last_name=user_model.last_name,
            email=user_model.email,
            created_at=user_model.created_at,
        )
