import datetime as dt
from typing import Optional
from pydantic import AliasChoices, Field

from dtos.base_dto import BaseDTO


class TimesheetDTO(BaseDTO):
    user_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("user_id", "userId"))
    project_id: Optional[int] = Field(default=None, validation_alias=AliasChoices("project_id", "projectId"))
    task_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("task_name", "taskName"))
    date: Optional[dt.date] = None
    hours: Optional[float] = None
