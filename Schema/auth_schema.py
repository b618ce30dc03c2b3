from pydantic import BaseModel, EmailStr

from Schema.user_schema import UserCreate, UserResponse


class RegisterRequest(UserCreate):
    pass


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    message: str
    user: UserResponse
    token: str
    token_type: str = "bearer"
