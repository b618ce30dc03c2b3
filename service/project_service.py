from typing import Any, List, Mapping, Optional
import logging

from dtos.project_dto import ProjectDTO
from exceptions import ValidationError
from model.Project_model import Project
from model.usermodels import User
from policy.project_policy import ProjectPolicy
from repository.project_repository import ProjectRepository
from repository.timesheet_repository import TimesheetRepository
from service.base_service import BaseService
from service.filters import build_criteria
from utils.error_handlers import service_operation

logger = logging.getLogger(__name__)

TEXT_FILTERS = ("name", "department")
EXACT_FILTERS = ("status",)
DATE_FILTERS = ("start_date", "end_date")

END_BEFORE_START = "The end date must be a date after or equal to start date."


class ProjectService(BaseService):
    """Service for project-related business logic."""

    def __init__(
        self,
        projects: ProjectRepository,
        timesheets: TimesheetRepository,
        policy: Optional[ProjectPolicy] = None,
    ):
        super().__init__(projects, policy or ProjectPolicy())
        self.projects = projects
        self.timesheets = timesheets

    @staticmethod
    def _check_dates(start_date, end_date) -> None:
        if start_date is not None and end_date is not None and end_date < start_date:
            raise ValidationError(END_BEFORE_START, {"end_date": [END_BEFORE_START]})

    @service_operation("create project")
    def create(self, actor: User, dto: ProjectDTO) -> Project:
        self.authorize(self.policy.create(actor), "create")
        self._check_dates(dto.start_date, dto.end_date)
        project = self.projects.create(dto.to_dict())
        logger.info(f"Project {project.id} created by user {actor.id}")
        return project

    @service_operation("retrieve project")
    def find_by_id(self, actor: User, project_id: int) -> Optional[Project]:
        project = self.projects.get_by_id(project_id)
        if project is not None:
            self.authorize(self.policy.view(actor, project), "view")
        return project

    @service_operation("retrieve projects")
    def find_all(self, actor: User, filters: Optional[Mapping[str, Any]] = None) -> List[Project]:
        self.authorize(self.policy.view_any(actor), "viewAny")
        criteria = build_criteria(
            Project, filters,
            text_fields=TEXT_FILTERS,
            exact_fields=EXACT_FILTERS,
            date_fields=DATE_FILTERS,
        )
        return self.projects.find_where(criteria)

    @service_operation("update project")
    def update(self, actor: User, project_id: int, dto: ProjectDTO) -> Optional[Project]:
        project = self.projects.get_by_id(project_id)
        if project is None:
            return None
        self.authorize(self.policy.update(actor, project), "update")
        self._check_dates(
            dto.start_date if dto.has("start_date") else project.start_date,
            dto.end_date if dto.has("end_date") else project.end_date,
        )

        project = self.projects.update(project, dto.to_dict())
        logger.info(f"Project {project_id} updated by user {actor.id}")
        return project

    @service_operation("delete project")
    def delete(self, actor: User, project_id: int) -> bool:
        project = self.projects.get_by_id(project_id)
        if project is None:
            return False
        self.authorize(self.policy.delete(actor, project), "delete")

        # Not atomic: a crash between the two commits leaves the project without timesheets
        removed = self.timesheets.delete_for_project(project_id)
        self.projects.delete(project)
        logger.info(f"Project {project_id} deleted by user {actor.id} along with {removed} timesheets")
        return True
