import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import DuplicateEmail, UserHasProjects
from ..models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Accès aux utilisateurs en base"""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    def save(self, user: User) -> User:
        """
        Insère ou met à jour un utilisateur.
        Un email déjà pris fait échouer l'écriture (DuplicateEmail),
        la ligne existante n'est jamais écrasée.
        """
        try:
            self.db.add(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            existing = self.find_by_email(user.email)
            if existing is not None and existing is not user:
                raise DuplicateEmail()
            raise
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        try:
            self.db.delete(user)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            logger.warning("Refusing to delete user %s: projects still reference it", user.id)
            raise UserHasProjects()
