"""
Router pour les dossiers étudiants.
Création multipart avec CV (`resume`) et certificats (`certificates`) optionnels,
listage, détail, mise à jour partielle et suppression.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from placementhub.config import settings
from placementhub.database import get_db
from placementhub.dependencies import get_student_attachments, require_login
from placementhub.exceptions import StorageError
from placementhub.schemas.common import MessageResponse
from placementhub.schemas.student import (
    StudentCreate,
    StudentEnvelope,
    StudentListEnvelope,
    StudentUpdate,
)
from placementhub.services import student_service
from placementhub.services.attachment_service import AttachmentStore, save_uploads

router = APIRouter(prefix="/api/v1/students", tags=["Étudiants"])


@router.post("", response_model=StudentEnvelope, status_code=201, summary="Ajouter un étudiant")
async def create_student(
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    department: Optional[str] = Form(None),
    cgpa: Optional[float] = Form(None),
    placement_status: str = Form("Not Placed"),
    resume: Optional[UploadFile] = File(None),
    certificates: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    attachments: AttachmentStore = Depends(get_student_attachments),
    _session=Depends(require_login),
):
    """
    Ajoute un étudiant depuis un formulaire multipart.
    Un fichier absent donne une référence vide ("") et n'est pas une erreur.
    """
    try:
        data = StudentCreate(
            name=name,
            email=email,
            department=department,
            cgpa=cgpa,
            placement_status=placement_status,
        )
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        resume_key, certificates_key = await save_uploads(
            attachments, [resume, certificates], settings.UPLOAD_MAX_SIZE_MB
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    student = student_service.create_student(
        db, data, attachments, resume=resume_key, certificates=certificates_key
    )
    return StudentEnvelope(message="Étudiant ajouté.", student=student)


@router.get("", response_model=StudentListEnvelope, summary="Lister les étudiants")
def list_students(db: Session = Depends(get_db)):
    return StudentListEnvelope(students=student_service.get_students(db))


@router.get("/{student_id}", response_model=StudentEnvelope, summary="Détail d'un étudiant")
def get_student(student_id: uuid.UUID, db: Session = Depends(get_db)):
    student = student_service.get_student(db, student_id)
    if student is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return StudentEnvelope(student=student)


@router.put("/{student_id}", response_model=StudentEnvelope, summary="Modifier un étudiant")
def update_student(
    student_id: uuid.UUID,
    data: StudentUpdate,
    db: Session = Depends(get_db),
    _session=Depends(require_login),
):
    """Met à jour les champs fournis, y compris le statut de placement."""
    student = student_service.update_student(db, student_id, data)
    if student is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return StudentEnvelope(message="Étudiant mis à jour.", student=student)


@router.delete("/{student_id}", response_model=MessageResponse, summary="Supprimer un étudiant")
def delete_student(
    student_id: uuid.UUID,
    db: Session = Depends(get_db),
    attachments: AttachmentStore = Depends(get_student_attachments),
    _session=Depends(require_login),
):
    """Supprime l'étudiant puis ses pièces jointes. Un fichier manquant n'empêche pas la suppression."""
    student = student_service.delete_student(db, student_id, attachments)
    if student is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return MessageResponse(message="Étudiant supprimé.")
