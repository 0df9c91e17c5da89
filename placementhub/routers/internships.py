"""
Router pour les offres de stage.
Le document joint est la partie multipart `file`.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from sqlalchemy.orm import Session

from placementhub.config import settings
from placementhub.database import get_db
from placementhub.dependencies import get_internship_attachments, require_login
from placementhub.exceptions import StorageError
from placementhub.schemas.common import MessageResponse
from placementhub.schemas.internship import (
    InternshipCreate,
    InternshipEnvelope,
    InternshipListEnvelope,
    InternshipUpdate,
)
from placementhub.services import internship_service
from placementhub.services.attachment_service import AttachmentStore, save_upload

router = APIRouter(prefix="/api/v1/internships", tags=["Stages"])


@router.post("", response_model=InternshipEnvelope, status_code=201, summary="Ajouter un stage")
async def create_internship(
    name: Optional[str] = Form(None),
    company: Optional[str] = Form(None),
    position: Optional[str] = Form(None),
    duration: Optional[str] = Form(None),
    stipend: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    attachments: AttachmentStore = Depends(get_internship_attachments),
    _session=Depends(require_login),
):
    data = InternshipCreate(
        name=name, company=company, position=position, duration=duration, stipend=stipend
    )
    try:
        document = await save_upload(attachments, file, settings.UPLOAD_MAX_SIZE_MB)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        raise HTTPException(status_code=500, detail=str(e))

    internship = internship_service.create_internship(db, data, attachments, document=document)
    return InternshipEnvelope(message="Stage ajouté.", internship=internship)


@router.get("", response_model=InternshipListEnvelope, summary="Lister les stages")
def list_internships(db: Session = Depends(get_db)):
    return InternshipListEnvelope(internships=internship_service.get_internships(db))


@router.get("/{internship_id}", response_model=InternshipEnvelope, summary="Détail d'un stage")
def get_internship(internship_id: uuid.UUID, db: Session = Depends(get_db)):
    internship = internship_service.get_internship(db, internship_id)
    if internship is None:
        raise HTTPException(status_code=404, detail="Stage introuvable.")
    return InternshipEnvelope(internship=internship)


@router.put("/{internship_id}", response_model=InternshipEnvelope, summary="Modifier un stage")
def update_internship(
    internship_id: uuid.UUID,
    data: InternshipUpdate,
    db: Session = Depends(get_db),
    _session=Depends(require_login),
):
    internship = internship_service.update_internship(db, internship_id, data)
    if internship is None:
        raise HTTPException(status_code=404, detail="Stage introuvable.")
    return InternshipEnvelope(message="Stage mis à jour.", internship=internship)


@router.delete("/{internship_id}", response_model=MessageResponse, summary="Supprimer un stage")
def delete_internship(
    internship_id: uuid.UUID,
    db: Session = Depends(get_db),
    attachments: AttachmentStore = Depends(get_internship_attachments),
    _session=Depends(require_login),
):
    """
    Supprime le stage puis son document.
    L'échec de suppression du fichier est journalisé et n'annule pas la suppression.
    """
    internship = internship_service.delete_internship(db, internship_id, attachments)
    if internship is None:
        raise HTTPException(status_code=404, detail="Stage introuvable.")
    return MessageResponse(message="Stage supprimé.")
