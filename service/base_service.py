from exceptions import AuthorizationError
from policy.interfaces import Policy
from repository.base_repository import BaseRepository


class BaseService:
    """Shared plumbing for the entity services."""

    def __init__(self, repository: BaseRepository, policy: Policy):
        self.repository = repository
        self.policy = policy

    def authorize(self, allowed: bool, action: str) -> None:
        if not allowed:
            raise AuthorizationError(action=action)

    def rollback(self) -> None:
        self.repository.rollback()
