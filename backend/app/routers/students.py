"""
Router pour les élèves.
GET    /api/students       — liste
GET    /api/students/{id}  — détail
POST   /api/students       — création
PUT    /api/students/{id}  — remplacement complet
DELETE /api/students/{id}  — suppression
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.student import StudentCreate, StudentResponse, StudentUpdate
from app.services import student_service
from app.services.student_service import StudentStorageError

router = APIRouter(prefix="/api/students", tags=["Élèves"])


@router.get("", response_model=List[StudentResponse], summary="Lister tous les élèves")
def list_students(db: Session = Depends(get_db)):
    """Retourne tous les élèves, sans tri."""
    try:
        return student_service.list_students(db)
    except StudentStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{student_id}", response_model=StudentResponse, summary="Détail d'un élève")
def get_student(student_id: int, db: Session = Depends(get_db)):
    try:
        student = student_service.get_student(db, student_id)
    except StudentStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    if student is None:
        raise HTTPException(status_code=404, detail="Élève introuvable.")
    return student


@router.post("", response_model=StudentResponse, summary="Créer un élève")
def create_student(data: StudentCreate, db: Session = Depends(get_db)):
    """Crée un élève ; l'id est attribué par la base et renvoyé avec les données."""
    try:
        return student_service.create_student(db, data)
    except StudentStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.put("/{student_id}", response_model=StudentResponse, summary="Modifier un élève")
def update_student(student_id: int, data: StudentUpdate, db: Session = Depends(get_db)):
    """Remplace tous les champs de l'élève. L'id du chemin prévaut sur celui du body."""
    try:
        return student_service.update_student(db, student_id, data)
    except StudentStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.delete("/{student_id}", status_code=204, summary="Supprimer un élève")
def delete_student(student_id: int, db: Session = Depends(get_db)):
    """Supprime un élève. Un id inexistant est signalé comme une erreur serveur."""
    try:
        student_service.delete_student(db, student_id)
    except StudentStorageError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return Response(status_code=204)
