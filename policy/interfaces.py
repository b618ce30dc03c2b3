"""
Structural interface shared by the entity policies.
"""

from typing import Any, Protocol, runtime_checkable

from model.usermodels import User


@runtime_checkable
class Policy(Protocol):
    """Shape every entity policy implements. Policies do not subclass it."""

    def view_any(self, actor: User) -> bool: ...

    def view(self, actor: User, target: Any) -> bool: ...

    def create(self, actor: User) -> bool: ...

    def update(self, actor: User, target: Any) -> bool: ...

    def delete(self, actor: User, target: Any) -> bool: ...
