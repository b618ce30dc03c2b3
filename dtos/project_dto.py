import datetime as dt
from typing import Optional
from pydantic import AliasChoices, Field

from dtos.base_dto import BaseDTO
from model.Project_model import ProjectStatus


class ProjectDTO(BaseDTO):
    name: Optional[str] = None
    department: Optional[str] = None
    start_date: Optional[dt.date] = Field(default=None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[dt.date] = Field(default=None, validation_alias=AliasChoices("end_date", "endDate"))
    status: Optional[ProjectStatus] = None
