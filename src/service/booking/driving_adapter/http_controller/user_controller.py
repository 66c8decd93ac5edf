from typing import List

from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.booking.app.command.manage_user_use_case import ManageUserUseCase
from src.service.booking.app.query.user_query_use_case import UserQueryUseCase
from src.service.booking.driving_adapter.http_controller.schema.user_schema import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)


router = APIRouter()


@router.get('')
@Logger.io
async def list_users(
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[UserResponse]:
    return [UserResponse.from_entity(user) for user in await use_case.list_users()]


@router.get('/{user_id}')
@Logger.io
async def get_user(
    user_id: int,
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> UserResponse:
    return UserResponse.from_entity(await use_case.get_user(user_id=user_id))


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: UserCreateRequest,
    use_case: ManageUserUseCase = Depends(ManageUserUseCase.depends),
) -> UserResponse:
    user = await use_case.create(
        first_name=request.first_name, last_name=request.last_name, email=request.email
    )
    return UserResponse.from_entity(user)


@router.put('/{user_id}')
@Logger.io
async def update_user(
    user_id: int,
    request: UserUpdateRequest,
    use_case: ManageUserUseCase = Depends(ManageUserUseCase.depends),
) -> UserResponse:
    user = await use_case.update(
        user_id=user_id,
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email,
    )
    return UserResponse.from_entity(user)


@router.delete('/{user_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_user(
    user_id: int,
    use_case: ManageUserUseCase = Depends(ManageUserUseCase.depends),
) -> None:
    await use_case.delete(user_id=user_id)
