from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from db.database import get_db
from dependencies import get_password_hasher, get_user_repository, get_user_service
from dtos.user_dto import UserDTO
from model.usermodels import User
from repository.user_repository import UserRepository
from Schema.auth_schema import AuthResponse, LoginRequest, RegisterRequest
from Schema.common_schema import MessageResponse
from Schema.user_schema import UserResponse
from service.user_service import UserService
from utils.hashing import PasswordHasher
from utils.token import (
    authenticate_user,
    get_current_user,
    get_token_payload,
    issue_token,
    revoke_all_tokens,
    revoke_token,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    db: Session = Depends(get_db),
    users: UserRepository = Depends(get_user_repository),
    service: UserService = Depends(get_user_service),
):
    if users.email_taken(payload.email):
        raise HTTPException(status_code=422, detail="The email has already been taken.")

    user = service.register(UserDTO.from_dict(payload.model_dump()))
    token = issue_token(db, user)
    return {
        "message": "User registered successfully",
        "user": UserResponse.model_validate(user),
        "token": token,
    }


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    user = authenticate_user(db, payload.email, payload.password, hasher)
    if user is None:
        logger.warning("Failed login attempt")
        raise HTTPException(status_code=422, detail="The provided credentials are incorrect.")

    token = issue_token(db, user)
    return {
        "message": "Login successful",
        "user": UserResponse.model_validate(user),
        "token": token,
    }


@router.post("/logout", response_model=MessageResponse)
def logout(
    payload: dict = Depends(get_token_payload),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    revoke_token(db, payload["jti"])
    logger.info(f"User {current_user.id} logged out")
    return {"message": "Logged out successfully"}


@router.post("/logout-all", response_model=MessageResponse)
def logout_all(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    revoke_all_tokens(db, current_user.id)
    return {"message": "Logged out from all devices successfully"}
