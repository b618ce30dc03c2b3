from model.Project_model import Project
from model.usermodels import User


class ProjectPolicy:
    """Projects have no owner: any authenticated user may fully manage any project."""

    def view_any(self, actor: User) -> bool:
        return True

    def view(self, actor: User, target: Project) -> bool:
        return True

    def create(self, actor: User) -> bool:
        return True

    def update(self, actor: User, target: Project) -> bool:
        return True

    def delete(self, actor: User, target: Project) -> bool:
        return True
