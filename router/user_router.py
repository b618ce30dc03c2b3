from fastapi import APIRouter, HTTPException, Depends, Query, status
import datetime as dt
from typing import Optional

from dependencies import get_user_repository, get_user_service
from dtos.user_dto import UserDTO
from model.usermodels import Gender, User
from repository.user_repository import UserRepository
from Schema.common_schema import DataResponse, DeleteRequest, ListResponse, MessageResponse, present_fields
from Schema.user_schema import UserCreate, UserResponse, UserUpdate
from service.user_service import UserService
from utils.token import get_current_user

router = APIRouter(prefix="/users", tags=["users"])

EMAIL_TAKEN = "The email has already been taken."


@router.post("", response_model=DataResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    service: UserService = Depends(get_user_service),
):
    if users.email_taken(payload.email):
        raise HTTPException(status_code=422, detail=EMAIL_TAKEN)

    user = service.create(current_user, UserDTO.from_dict(payload.model_dump()))
    return {"message": "User created successfully", "data": user}


@router.get("", response_model=ListResponse[UserResponse])
def list_users(
    first_name: Optional[str] = Query(None),
    last_name: Optional[str] = Query(None),
    gender: Optional[Gender] = Query(None),
    date_of_birth: Optional[dt.date] = Query(None),
    email: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    filters = {
        "first_name": first_name,
        "last_name": last_name,
        "gender": gender,
        "date_of_birth": date_of_birth,
        "email": email,
    }
    return {"data": service.find_all(current_user, filters)}


@router.get("/{user_id}", response_model=DataResponse[UserResponse])
def get_user(
    user_id: int,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    user = service.find_by_id(current_user, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"data": user}


@router.post("/update", response_model=DataResponse[UserResponse])
def update_user(
    payload: UserUpdate,
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    service: UserService = Depends(get_user_service),
):
    if payload.email is not None and users.email_taken(payload.email, ignore_id=payload.id):
        raise HTTPException(status_code=422, detail=EMAIL_TAKEN)

    dto = UserDTO.from_dict(present_fields(payload, exclude=("id",)))
    user = service.update(current_user, payload.id, dto)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User updated successfully", "data": user}


@router.post("/delete", response_model=MessageResponse)
def delete_user(
    payload: DeleteRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    if not service.delete(current_user, payload.id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User deleted successfully"}
