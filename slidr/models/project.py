from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..database.database import Base


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255))
    content = Column(Text)  # JSON du diaporama, jamais lu côté serveur
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    user = relationship("User", back_populates="projects")

    def __repr__(self) -> str:
        return f"<Project id={self.id} user_id={self.user_id} title={self.title!r}>"
