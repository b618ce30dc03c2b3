from model.usermodels import User


class UserPolicy:
    """Any authenticated user may manage users, but nobody may delete themselves."""

    def view_any(self, actor: User) -> bool:
        return True

    def view(self, actor: User, target: User) -> bool:
        return True

    def create(self, actor: User) -> bool:
        return True

    def update(self, actor: User, target: User) -> bool:
        return True

    def delete(self, actor: User, target: User) -> bool:
        return actor.id != target.id
