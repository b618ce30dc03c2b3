from typing import Any, List, Mapping, Optional
import logging

from dtos.timesheet_dto import TimesheetDTO
from model.timesheet_model import Timesheet
from model.usermodels import User
from policy.timesheet_policy import TimesheetPolicy
from repository.timesheet_repository import TimesheetRepository
from service.base_service import BaseService
from service.filters import build_criteria
from utils.error_handlers import service_operation

logger = logging.getLogger(__name__)

TEXT_FILTERS = ("task_name",)
EXACT_FILTERS = ("user_id", "project_id", "hours")
DATE_FILTERS = ("date",)


class TimesheetService(BaseService):
    """
    Service for timesheet-related business logic.

    Timesheets are always returned with their user and project attached.
    """

    def __init__(self, timesheets: TimesheetRepository, policy: Optional[TimesheetPolicy] = None):
        super().__init__(timesheets, policy or TimesheetPolicy())
        self.timesheets = timesheets

    @service_operation("create timesheet")
    def create(self, actor: User, dto: TimesheetDTO) -> Timesheet:
        self.authorize(self.policy.create(actor), "create")
        timesheet = self.timesheets.create(dto.to_dict())
        logger.info(f"Timesheet {timesheet.id} created by user {actor.id}")
        return self.timesheets.get_with_relations(timesheet.id)

    @service_operation("retrieve timesheet")
    def find_by_id(self, actor: User, timesheet_id: int) -> Optional[Timesheet]:
        timesheet = self.timesheets.get_with_relations(timesheet_id)
        if timesheet is not None:
            self.authorize(self.policy.view(actor, timesheet), "view")
        return timesheet

    @service_operation("retrieve timesheets")
    def find_all(self, actor: User, filters: Optional[Mapping[str, Any]] = None) -> List[Timesheet]:
        self.authorize(self.policy.view_any(actor), "viewAny")
        criteria = build_criteria(
            Timesheet, filters,
            text_fields=TEXT_FILTERS,
            exact_fields=EXACT_FILTERS,
            date_fields=DATE_FILTERS,
        )
        return self.timesheets.find_where(criteria, options=self.timesheets.with_relations())

    @service_operation("update timesheet")
    def update(self, actor: User, timesheet_id: int, dto: TimesheetDTO) -> Optional[Timesheet]:
        timesheet = self.timesheets.get_by_id(timesheet_id)
        if timesheet is None:
            return None
        self.authorize(self.policy.update(actor, timesheet), "update")

        self.timesheets.update(timesheet, dto.to_dict())
        logger.info(f"Timesheet {timesheet_id} updated by user {actor.id}")
        return self.timesheets.get_with_relations(timesheet_id)

    @service_operation("delete timesheet")
    def delete(self, actor: User, timesheet_id: int) -> bool:
        timesheet = self.timesheets.get_by_id(timesheet_id)
        if timesheet is None:
            return False
        self.authorize(self.policy.delete(actor, timesheet), "delete")

        self.timesheets.delete(timesheet)
        logger.info(f"Timesheet {timesheet_id} deleted by user {actor.id}")
        return True
