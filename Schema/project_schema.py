import datetime as dt
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from model.Project_model import ProjectStatus
from Schema.common_schema import reject_explicit_nulls


def _check_dates(start_date: Optional[dt.date], end_date: Optional[dt.date]) -> None:
    if start_date is not None and end_date is not None and end_date < start_date:
        raise ValueError("The end date must be a date after or equal to start date.")


class ProjectCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    department: str = Field(..., min_length=1, max_length=255)
    start_date: dt.date
    end_date: Optional[dt.date] = None
    status: Optional[ProjectStatus] = None

    @model_validator(mode='after')
    def validate_dates(self):
        _check_dates(self.start_date, self.end_date)
        return self


class ProjectUpdate(BaseModel):
    id: int
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    department: Optional[str] = Field(None, min_length=1, max_length=255)
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    status: Optional[ProjectStatus] = None

    @model_validator(mode='after')
    def validate_fields(self):
        reject_explicit_nulls(self, nullable=("end_date",))
        _check_dates(self.start_date, self.end_date)
        return self


class ProjectResponse(BaseModel):
    id: int
    name: str
    department: str
    start_date: dt.date
    end_date: Optional[dt.date] = None
    status: ProjectStatus
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)
