from fastapi import APIRouter, HTTPException, Depends, Query, status
import datetime as dt
from typing import Optional

from dependencies import get_project_service
from dtos.project_dto import ProjectDTO
from model.Project_model import ProjectStatus
from model.usermodels import User
from Schema.common_schema import DataResponse, DeleteRequest, ListResponse, MessageResponse, present_fields
from Schema.project_schema import ProjectCreate, ProjectResponse, ProjectUpdate
from service.project_service import ProjectService
from utils.token import get_current_user

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=DataResponse[ProjectResponse], status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    # Omitted or null status falls back to the column default
    project = service.create(current_user, ProjectDTO.from_dict(payload.model_dump(exclude_none=True)))
    return {"message": "Project created successfully", "data": project}


@router.get("", response_model=ListResponse[ProjectResponse])
def list_projects(
    name: Optional[str] = Query(None),
    department: Optional[str] = Query(None),
    status: Optional[ProjectStatus] = Query(None),
    start_date: Optional[dt.date] = Query(None),
    end_date: Optional[dt.date] = Query(None),
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    filters = {
        "name": name,
        "department": department,
        "status": status,
        "start_date": start_date,
        "end_date": end_date,
    }
    return {"data": service.find_all(current_user, filters)}


@router.get("/{project_id}", response_model=DataResponse[ProjectResponse])
def get_project(
    project_id: int,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    project = service.find_by_id(current_user, project_id)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return {"data": project}


@router.post("/update", response_model=DataResponse[ProjectResponse])
def update_project(
    payload: ProjectUpdate,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    dto = ProjectDTO.from_dict(present_fields(payload, exclude=("id",)))
    project = service.update(current_user, payload.id, dto)
    if project is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return {"message": "Project updated successfully", "data": project}


@router.post("/delete", response_model=MessageResponse)
def delete_project(
    payload: DeleteRequest,
    current_user: User = Depends(get_current_user),
    service: ProjectService = Depends(get_project_service),
):
    if not service.delete(current_user, payload.id):
        raise HTTPException(status_code=404, detail="Project not found")
    return {"message": "Project deleted successfully"}
