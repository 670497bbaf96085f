import logging

from ..crud.project import ProjectStore
from ..crud.user import UserStore
from ..exceptions import ProjectNotFound, UserNotFound
from ..models.project import Project
from ..schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectService:
    """
    CRUD des diaporamas.
    Aucune vérification de propriétaire sur update/delete : quiconque
    connaît l'id d'un projet peut le modifier ou le supprimer.
    """

    def __init__(self, projects: ProjectStore, users: UserStore):
        self.projects = projects
        self.users = users

    def list_by_user(self, user_id: int) -> list[Project]:
        user = self.users.find_by_id(user_id)
        if user is None:
            raise UserNotFound()
        return self.projects.find_by_user(user)

    def get_by_id(self, project_id: int) -> Project:
        project = self.projects.find_by_id(project_id)
        if project is None:
            raise ProjectNotFound()
        return project

    def create(self, payload: ProjectCreate) -> Project:
        user = self.users.find_by_id(payload.user_id)
        if user is None:
            raise UserNotFound()

        project = self.projects.save(
            Project(title=payload.title, content=payload.content, user=user)
        )
        logger.info("Project %s created for user %s", project.id, user.id)
        return project

    def update(self, project_id: int, payload: ProjectUpdate) -> Project:
        project = self.get_by_id(project_id)

        fields = payload.present_fields()
        for name, value in fields.items():
            setattr(project, name, value)

        project = self.projects.save(project)
        logger.info("Project %s updated (%s)", project.id, ", ".join(fields) or "no fields")
        return project

    def delete(self, project_id: int) -> None:
        project = self.get_by_id(project_id)
        self.projects.delete(project)
        logger.info("Project %s deleted", project_id)
