# models/user.py
from sqlalchemy import Column, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..database.database import Base


class User(Base):
    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_user_email"),)

    id         = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name  = Column(String(100), nullable=False)
    email      = Column(String(256), nullable=False, index=True)
    # Stocké en clair, comparé tel quel au login
    password   = Column(String(256), nullable=False)

    # La base refuse la suppression d'un utilisateur qui possède encore des projets
    projects = relationship("Project", back_populates="user", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
