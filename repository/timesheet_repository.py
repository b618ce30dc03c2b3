"""
Timesheet repository, including the relation accessors used for cascades.
"""

from typing import Optional
from sqlalchemy.orm import Session, joinedload

from model.timesheet_model import Timesheet
from repository.base_repository import BaseRepository


class TimesheetRepository(BaseRepository[Timesheet]):
    """Repository for Timesheet model operations."""

    def __init__(self, db: Session):
        super().__init__(db, Timesheet)

    @staticmethod
    def with_relations():
        """Loader options attaching the owning user and the project."""
        return (joinedload(Timesheet.user), joinedload(Timesheet.project))

    def get_with_relations(self, timesheet_id: int) -> Optional[Timesheet]:
        """
        Get a timesheet with its user and project eagerly loaded.

        Args:
            timesheet_id: Timesheet primary key

        Returns:
            Timesheet instance, or None if not found
        """
        return self.get_by_id(timesheet_id, options=self.with_relations())

    def delete_for_user(self, user_id: int) -> int:
        """Delete every timesheet logged by a user. Returns the number of rows removed."""
        deleted = self.db.query(Timesheet).filter(
            Timesheet.user_id == user_id
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted

    def delete_for_project(self, project_id: int) -> int:
        """Delete every timesheet logged against a project. Returns the number of rows removed."""
        deleted = self.db.query(Timesheet).filter(
            Timesheet.project_id == project_id
        ).delete(synchronize_session=False)
        self.db.commit()
        return deleted
