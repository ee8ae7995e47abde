"""
Service d'accès aux élèves.
Chaque opération exécute une seule requête SQL sur la table students,
avec commit immédiat pour les écritures.
"""

import logging
from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.student import Student
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate

logger = logging.getLogger(__name__)


class StudentStorageError(Exception):
    """Échec d'une requête sur la table students (converti en 500 par le router)."""


def list_students(db: Session) -> list[Student]:
    """Retourne tous les élèves, dans l'ordre renvoyé par la base (pas d'ORDER BY)."""
    try:
        return list(db.execute(select(Student)).scalars().all())
    except SQLAlchemyError as exc:
        logger.error("Échec du listage des élèves : %s", exc)
        raise StudentStorageError("Échec de la récupération de la liste des élèves.") from exc


def get_student(db: Session, student_id: int) -> Optional[Student]:
    """Retourne un élève par son id, ou None si inexistant."""
    try:
        return db.get(Student, student_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de la lecture de l'élève %s : %s", student_id, exc)
        raise StudentStorageError("Échec de la récupération de l'élève.") from exc


def create_student(db: Session, data: StudentCreate) -> StudentResponse:
    """Insère un élève et renvoie les données soumises complétées de l'id attribué."""
    stmt = (
        insert(Student)
        .values(**data.model_dump())
        .returning(Student.id)
    )
    try:
        new_id = db.execute(stmt).scalar_one()
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de la création d'un élève : %s", exc)
        raise StudentStorageError("Erreur lors de la création de l'élève.") from exc

    logger.info("Élève %s créé.", new_id)
    return StudentResponse(id=new_id, **data.model_dump())


def update_student(db: Session, student_id: int, data: StudentUpdate) -> StudentResponse:
    """
    Remplace tous les champs de l'élève ciblé.
    Un id inexistant ne modifie aucune ligne mais n'est pas une erreur :
    les données soumises sont renvoyées telles quelles.
    """
    stmt = (
        update(Student)
        .where(Student.id == student_id)
        .values(**data.model_dump())
        .execution_options(synchronize_session=False)
    )
    try:
        db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de la mise à jour de l'élève %s : %s", student_id, exc)
        raise StudentStorageError("Erreur lors de la mise à jour de l'élève.") from exc

    return StudentResponse(id=student_id, **data.model_dump())


def delete_student(db: Session, student_id: int) -> None:
    """
    Supprime l'élève ciblé.
    Aucune ligne supprimée est traité comme un échec, au même titre qu'une erreur SQL.
    """
    stmt = (
        delete(Student)
        .where(Student.id == student_id)
        .execution_options(synchronize_session=False)
    )
    try:
        result = db.execute(stmt)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Échec de la suppression de l'élève %s : %s", student_id, exc)
        raise StudentStorageError("Erreur lors de la suppression de l'élève.") from exc

    if result.rowcount == 0:
        logger.warning("Suppression de l'élève %s : aucune ligne affectée.", student_id)
        raise StudentStorageError("Erreur lors de la suppression de l'élève.")
