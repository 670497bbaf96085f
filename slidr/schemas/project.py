from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OwnerOut(BaseModel):
    # Jamais le mot de passe
    id: int
    first_name: str
    last_name: str
    email: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ProjectCreate(BaseModel):
    user_id: int
    title: Optional[str] = None
    content: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProjectUpdate(BaseModel):
    """Mise à jour partielle : seuls les champs présents dans le JSON sont écrasés"""
    title: Optional[str] = None
    content: Optional[str] = None

    def present_fields(self) -> dict:
        return self.model_dump(exclude_unset=True)


class ProjectOut(BaseModel):
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    user: OwnerOut

    model_config = ConfigDict(from_attributes=True)
