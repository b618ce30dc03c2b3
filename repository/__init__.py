"""
Repositories: the persistence port used by the services.

Every write commits on its own; there are no multi-statement transactions.
"""

from repository.base_repository import BaseRepository
from repository.user_repository import UserRepository
from repository.project_repository import ProjectRepository
from repository.timesheet_repository import TimesheetRepository

__all__ = ["BaseRepository", "UserRepository", "ProjectRepository", "TimesheetRepository"]
