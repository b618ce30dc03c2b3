from model.timesheet_model import Timesheet
from model.usermodels import User


class TimesheetPolicy:
    """
    Timesheets belong to the user who logged them.

    Owners may do anything with their own timesheets. Users assigned to the
    timesheet's project may also read it.
    """

    def view_any(self, actor: User) -> bool:
        return True

    def view(self, actor: User, target: Timesheet) -> bool:
        if self._owns(actor, target):
            return True
        project = target.project
        if project is None:
            return False
        return any(member.id == actor.id for member in project.users)

    def create(self, actor: User) -> bool:
        return True

    def update(self, actor: User, target: Timesheet) -> bool:
        return self._owns(actor, target)

    def delete(self, actor: User, target: Timesheet) -> bool:
        return self._owns(actor, target)

    @staticmethod
    def _owns(actor: User, target: Timesheet) -> bool:
        return target.user_id == actor.id
