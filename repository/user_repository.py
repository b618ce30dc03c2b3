from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from model.usermodels import User
from repository.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(func.lower(User.email) == email.strip().lower()).first()

    def email_taken(self, email: str, ignore_id: Optional[int] = None) -> bool:
        """
        Check whether another user already uses this email.

        Args:
            email: Address to look up (compared case-insensitively)
            ignore_id: User allowed to keep the address, e.g. the one being updated

        Returns:
            True if a different user owns the address
        """
        query = self.db.query(User.id).filter(func.lower(User.email) == email.strip().lower())
        if ignore_id is not None:
            query = query.filter(User.id != ignore_id)
        return query.first() is not None
