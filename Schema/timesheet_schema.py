import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from Schema.common_schema import reject_explicit_nulls
from Schema.project_schema import ProjectResponse
from Schema.user_schema import UserResponse


class TimesheetCreate(BaseModel):
    user_id: int
    project_id: int
    task_name: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    hours: float = Field(..., ge=0, le=24)


class TimesheetUpdate(BaseModel):
    id: int
    user_id: Optional[int] = None
    project_id: Optional[int] = None
    task_name: Optional[str] = Field(None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    hours: Optional[float] = Field(None, ge=0, le=24)

    @model_validator(mode='after')
    def validate_no_nulls(self):
        reject_explicit_nulls(self)
        return self


class TimesheetOut(BaseModel):
    id: int
    user_id: int
    project_id: int
    task_name: str
    date: dt.date
    hours: float
    user: Optional[UserResponse] = None
    project: Optional[ProjectResponse] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config={
        "from_attributes": True
    }
