from fastapi import APIRouter, Depends, HTTPException, Query, status
import datetime as dt
from typing import Optional

from dependencies import get_project_repository, get_timesheet_service, get_user_repository
from dtos.timesheet_dto import TimesheetDTO
from model.usermodels import User
from repository.project_repository import ProjectRepository
from repository.user_repository import UserRepository
from Schema.common_schema import DataResponse, DeleteRequest, ListResponse, MessageResponse, present_fields
from Schema.timesheet_schema import TimesheetCreate, TimesheetOut, TimesheetUpdate
from service.timesheet_service import TimesheetService
from utils.token import get_current_user

router = APIRouter(prefix="/timesheets", tags=["timesheets"])


def check_references(
    user_id: Optional[int],
    project_id: Optional[int],
    users: UserRepository,
    projects: ProjectRepository,
) -> None:
    """Reject ids that do not point at an existing user or project."""
    if user_id is not None and users.get_by_id(user_id) is None:
        raise HTTPException(status_code=422, detail="The selected user id is invalid.")
    if project_id is not None and projects.get_by_id(project_id) is None:
        raise HTTPException(status_code=422, detail="The selected project id is invalid.")


# Route to insert a new timesheet entry
@router.post("", response_model=DataResponse[TimesheetOut], status_code=status.HTTP_201_CREATED)
def create_timesheet(
    payload: TimesheetCreate,
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    projects: ProjectRepository = Depends(get_project_repository),
    service: TimesheetService = Depends(get_timesheet_service),
):
    check_references(payload.user_id, payload.project_id, users, projects)
    timesheet = service.create(current_user, TimesheetDTO.from_dict(payload.model_dump()))
    return {"message": "Timesheet created successfully", "data": timesheet}


@router.get("", response_model=ListResponse[TimesheetOut])
def list_timesheets(
    user_id: Optional[int] = Query(None),
    project_id: Optional[int] = Query(None),
    task_name: Optional[str] = Query(None),
    date: Optional[dt.date] = Query(None),
    hours: Optional[float] = Query(None),
    current_user: User = Depends(get_current_user),
    service: TimesheetService = Depends(get_timesheet_service),
):
    filters = {
        "user_id": user_id,
        "project_id": project_id,
        "task_name": task_name,
        "date": date,
        "hours": hours,
    }
    return {"data": service.find_all(current_user, filters)}


@router.get("/{timesheet_id}", response_model=DataResponse[TimesheetOut])
def get_timesheet(
    timesheet_id: int,
    current_user: User = Depends(get_current_user),
    service: TimesheetService = Depends(get_timesheet_service),
):
    timesheet = service.find_by_id(current_user, timesheet_id)
    if timesheet is None:
        raise HTTPException(status_code=404, detail="Timesheet not found")
    return {"data": timesheet}


@router.post("/update", response_model=DataResponse[TimesheetOut])
def update_timesheet(
    payload: TimesheetUpdate,
    current_user: User = Depends(get_current_user),
    users: UserRepository = Depends(get_user_repository),
    projects: ProjectRepository = Depends(get_project_repository),
    service: TimesheetService = Depends(get_timesheet_service),
):
    check_references(payload.user_id, payload.project_id, users, projects)
    dto = TimesheetDTO.from_dict(present_fields(payload, exclude=("id",)))
    timesheet = service.update(current_user, payload.id, dto)
    if timesheet is None:
        raise HTTPException(status_code=404, detail="Timesheet not found")
    return {"message": "Timesheet updated successfully", "data": timesheet}


@router.post("/delete", response_model=MessageResponse)
def delete_timesheet(
    payload: DeleteRequest,
    current_user: User = Depends(get_current_user),
    service: TimesheetService = Depends(get_timesheet_service),
):
    if not service.delete(current_user, payload.id):
        raise HTTPException(status_code=404, detail="Timesheet not found")
    return {"message": "Timesheet deleted successfully"}
