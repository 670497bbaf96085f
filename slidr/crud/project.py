from sqlalchemy.orm import Session

from ..models.project import Project
from ..models.user import User


class ProjectStore:
    """Accès aux projets (diaporamas) en base"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, project_id: int) -> Project | None:
        return self.db.get(Project, project_id)

    def find_by_user(self, user: User) -> list[Project]:
        # Aucun ordre garanti
        return self.db.query(Project).filter(Project.user_id == user.id).all()

    def save(self, project: Project) -> Project:
        self.db.add(project)
        self.db.commit()
        self.db.refresh(project)
        return project

    def delete(self, project: Project) -> None:
        self.db.delete(project)
        self.db.commit()
