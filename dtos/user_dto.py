import datetime as dt
from typing import Optional
from pydantic import AliasChoices, Field

from dtos.base_dto import BaseDTO
from model.usermodels import Gender


class UserDTO(BaseDTO):
    first_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("first_name", "firstName"))
    last_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("last_name", "lastName"))
    date_of_birth: Optional[dt.date] = Field(default=None, validation_alias=AliasChoices("date_of_birth", "dateOfBirth"))
    gender: Optional[Gender] = None
    email: Optional[str] = None
    # Plaintext until UserService hashes it
    password: Optional[str] = Field(default=None, repr=False)
