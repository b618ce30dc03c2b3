"""
Dependency injection providers for FastAPI.

Each request gets services built on its own database session, with the
repositories, policy and password hasher passed in through the constructor.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from db.database import get_db
from policy.project_policy import ProjectPolicy
from policy.timesheet_policy import TimesheetPolicy
from policy.user_policy import UserPolicy
from repository.project_repository import ProjectRepository
from repository.timesheet_repository import TimesheetRepository
from repository.user_repository import UserRepository
from service.project_service import ProjectService
from service.timesheet_service import TimesheetService
from service.user_service import UserService
from utils.hashing import PasswordHasher, password_hasher


def get_password_hasher() -> PasswordHasher:
    return password_hasher


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


def get_project_repository(db: Session = Depends(get_db)) -> ProjectRepository:
    return ProjectRepository(db)


def get_user_service(
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)
        hasher: Password hasher (injected)

    Returns:
        UserService bound to the request's session
    """
    return UserService(UserRepository(db), TimesheetRepository(db), UserPolicy(), hasher)


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    """
    Factory function for creating ProjectService instances.

    Args:
        db: Database session (injected)

    Returns:
        ProjectService bound to the request's session
    """
    return ProjectService(ProjectRepository(db), TimesheetRepository(db), ProjectPolicy())


def get_timesheet_service(db: Session = Depends(get_db)) -> TimesheetService:
    return TimesheetService(TimesheetRepository(db), TimesheetPolicy())
