"""
Data Transfer Objects (DTOs) Layer

Partial, immutable snapshots of entity fields passed from the routers to the
services. A field that was never supplied is "absent" and is left untouched by
updates; a field supplied as ``None`` is present and clears the column.
"""

from dtos.user_dto import UserDTO
from dtos.project_dto import ProjectDTO
from dtos.timesheet_dto import TimesheetDTO

__all__ = ["UserDTO", "ProjectDTO", "TimesheetDTO"]
