from fastapi import APIRouter, HTTPException

from ptfms.dao import UserDAO
from ptfms.models.user import User
from ptfms.schemas.user import UserCreate, UserResponse, UserStatusUpdate
from ptfms.utils.exceptions import AppException
from ptfms.utils.response import dump_all, success_response

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
async def get_users(role: str | None = None):
    dao = UserDAO()
    users = await dao.list_by_role(role) if role else await dao.list_all()
    return success_response(data=dump_all(UserResponse, users))


@router.post("", status_code=201)
async def create_user(payload: UserCreate):
    user = User(**payload.model_dump())
    if not await UserDAO().add(user):
        raise AppException("Username or email already in use", status_code=409)
    return success_response(data=UserResponse.model_validate(user).model_dump())


@router.get("/{user_id}")
async def get_user(user_id: int):
    user = await UserDAO().get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return success_response(data=UserResponse.model_validate(user).model_dump())


@router.put("/{user_id}/status")
async def update_user_status(user_id: int, payload: UserStatusUpdate):
    dao = UserDAO()
    user = await dao.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    user.status = payload.status
    if not await dao.update(user):
        raise AppException("Could not update user", status_code=500)
    return success_response(data=UserResponse.model_validate(user).model_dump())
