from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from ..crud.project import ProjectStore
from ..crud.user import UserStore
from ..database.database import get_db
from ..schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from ..services.project import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])

DELETED_MESSAGE = "Project deleted"


def get_project_service(db: Session = Depends(get_db)) -> ProjectService:
    return ProjectService(ProjectStore(db), UserStore(db))


@router.get("/user/{user_id}", response_model=List[ProjectOut])
def list_user_projects(user_id: int, service: ProjectService = Depends(get_project_service)):
    projects = service.list_by_user(user_id)
    return [ProjectOut.model_validate(p) for p in projects]


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    return ProjectOut.model_validate(service.get_by_id(project_id))


@router.post("", response_model=ProjectOut)
def create_project(payload: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    return ProjectOut.model_validate(service.create(payload))


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: int,
    payload: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
):
    # Pas de contrôle de propriétaire (comportement existant)
    return ProjectOut.model_validate(service.update(project_id, payload))


@router.delete("/{project_id}", response_class=PlainTextResponse)
def delete_project(project_id: int, service: ProjectService = Depends(get_project_service)):
    service.delete(project_id)
    return DELETED_MESSAGE
