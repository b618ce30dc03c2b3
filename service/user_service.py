"""
User Service

Authorization-aware CRUD for users. Passwords are hashed here, before they
reach the store, and never logged.
"""

from typing import Any, Dict, List, Mapping, Optional
import logging

from dtos.user_dto import UserDTO
from model.usermodels import User
from policy.user_policy import UserPolicy
from repository.timesheet_repository import TimesheetRepository
from repository.user_repository import UserRepository
from service.base_service import BaseService
from service.filters import build_criteria
from utils.error_handlers import service_operation
from utils.hashing import PasswordHasher

logger = logging.getLogger(__name__)

TEXT_FILTERS = ("first_name", "last_name", "email")
EXACT_FILTERS = ("gender",)
DATE_FILTERS = ("date_of_birth",)


class UserService(BaseService):
    """Service for user-related business logic."""

    def __init__(
        self,
        users: UserRepository,
        timesheets: TimesheetRepository,
        policy: Optional[UserPolicy] = None,
        hasher: Optional[PasswordHasher] = None,
    ):
        super().__init__(users, policy or UserPolicy())
        self.users = users
        self.timesheets = timesheets
        self.hasher = hasher or PasswordHasher()

    def _fields(self, dto: UserDTO) -> Dict[str, Any]:
        data = dto.to_dict()
        if data.get("password") is not None:
            data["password"] = self.hasher.hash(data["password"])
        return data

    @service_operation("create user")
    def create(self, actor: User, dto: UserDTO) -> User:
        self.authorize(self.policy.create(actor), "create")
        user = self.users.create(self._fields(dto))
        logger.info(f"User {user.id} created by user {actor.id}")
        return user

    @service_operation("register user")
    def register(self, dto: UserDTO) -> User:
        """Public sign-up. There is no acting user yet, so no policy applies."""
        user = self.users.create(self._fields(dto))
        logger.info(f"User {user.id} registered")
        return user

    @service_operation("retrieve user")
    def find_by_id(self, actor: User, user_id: int) -> Optional[User]:
        user = self.users.get_by_id(user_id)
        if user is not None:
            self.authorize(self.policy.view(actor, user), "view")
        return user

    @service_operation("retrieve users")
    def find_all(self, actor: User, filters: Optional[Mapping[str, Any]] = None) -> List[User]:
        self.authorize(self.policy.view_any(actor), "viewAny")
        criteria = build_criteria(
            User, filters,
            text_fields=TEXT_FILTERS,
            exact_fields=EXACT_FILTERS,
            date_fields=DATE_FILTERS,
        )
        return self.users.find_where(criteria)

    @service_operation("update user")
    def update(self, actor: User, user_id: int, dto: UserDTO) -> Optional[User]:
        user = self.users.get_by_id(user_id)
        if user is None:
            return None
        self.authorize(self.policy.update(actor, user), "update")

        user = self.users.update(user, self._fields(dto))
        logger.info(f"User {user_id} updated by user {actor.id}")
        return user

    @service_operation("delete user")
    def delete(self, actor: User, user_id: int) -> bool:
        user = self.users.get_by_id(user_id)
        if user is None:
            return False
        self.authorize(self.policy.delete(actor, user), "delete")

        removed = self.timesheets.delete_for_user(user_id)
        self.users.delete(user)
        logger.info(f"User {user_id} deleted by user {actor.id} along with {removed} timesheets")
        return True
