from typing import Iterable
from sqlalchemy.orm import Session

from model.Project_model import Project
from model.usermodels import User
from repository.base_repository import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Project)

    def assign_users(self, project: Project, users: Iterable[User]) -> Project:
        """
        Add users to the project's members, skipping ones already assigned.

        Args:
            project: Project to extend
            users: Users to attach

        Returns:
            The refreshed project
        """
        current = {member.id for member in project.users}
        for user in users:
            if user.id not in current:
                project.users.append(user)
                current.add(user.id)
        self.db.commit()
        self.db.refresh(project)
        return project
