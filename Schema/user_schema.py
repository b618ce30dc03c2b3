import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from model.usermodels import Gender
from Schema.common_schema import reject_explicit_nulls


def _before_today(value: Optional[dt.date]) -> Optional[dt.date]:
    if value is not None and value >= dt.date.today():
        raise ValueError("The date of birth must be a date before today.")
    return value


# bcrypt input limit, counted in UTF-8 bytes
MAX_PASSWORD_BYTES = 72


def _fits_bcrypt(value: Optional[str]) -> Optional[str]:
    if value is not None and len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"The password must not be greater than {MAX_PASSWORD_BYTES} bytes.")
    return value


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    date_of_birth: dt.date
    gender: Gender
    email: EmailStr
    password: str = Field(..., min_length=8)

    @field_validator('date_of_birth')
    def validate_date_of_birth(cls, v):
        return _before_today(v)

    @field_validator('password')
    def validate_password(cls, v):
        return _fits_bcrypt(v)


class UserUpdate(BaseModel):
    id: int
    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)
    date_of_birth: Optional[dt.date] = None
    gender: Optional[Gender] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=8)

    @field_validator('date_of_birth')
    def validate_date_of_birth(cls, v):
        return _before_today(v)

    @field_validator('password')
    def validate_password(cls, v):
        return _fits_bcrypt(v)

    @model_validator(mode='after')
    def validate_no_nulls(self):
        reject_explicit_nulls(self)
        return self


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: dt.date
    gender: Gender
    email: str
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
