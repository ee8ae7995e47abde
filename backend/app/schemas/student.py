"""
Schémas Pydantic pour les élèves.
Seule la coercition de types est appliquée, aucune règle métier.
"""

from typing import Optional
from pydantic import BaseModel


class StudentBase(BaseModel):
    name: str
    last_name: Optional[str] = None
    age: int
    semestre: str


class StudentCreate(StudentBase):
    """Schéma de création d'un élève (POST /students). L'id est attribué par la base."""


class StudentUpdate(StudentBase):
    """
    Schéma de remplacement complet d'un élève (PUT /students/{id}).
    Un éventuel "id" dans le body est ignoré : c'est l'id du chemin qui compte.
    """


class StudentResponse(StudentBase):
    """Schéma de réponse pour un élève."""
    id: int

    model_config = {"from_attributes": True}
