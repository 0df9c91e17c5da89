"""
Service métier pour les offres de stage.
Le document joint suit le cycle de vie de l'offre : créé avec elle, supprimé après elle.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placementhub.models.internship import Internship
from placementhub.schemas.internship import InternshipCreate, InternshipUpdate
from placementhub.services.attachment_service import AttachmentStore

logger = logging.getLogger(__name__)


def create_internship(
    db: Session,
    data: InternshipCreate,
    attachments: AttachmentStore,
    document: str = "",
) -> Internship:
    """Crée une offre de stage. Si l'insertion échoue, le document déjà enregistré est supprimé."""
    internship = Internship(**data.model_dump(), document=document)
    db.add(internship)
    try:
        db.commit()
    except Exception:
        db.rollback()
        attachments.delete(document)
        raise
    db.refresh(internship)

    logger.info("Stage ajouté : %s - %s", internship.company, internship.position)
    return internship


def get_internships(db: Session) -> list[Internship]:
    return db.execute(
        select(Internship).order_by(Internship.created_at)
    ).scalars().all()


def get_internship(db: Session, internship_id: uuid.UUID) -> Optional[Internship]:
    return db.get(Internship, internship_id)


def update_internship(db: Session, internship_id: uuid.UUID, data: InternshipUpdate) -> Optional[Internship]:
    """Met à jour les champs fournis d'une offre de stage."""
    internship = db.get(Internship, internship_id)
    if internship is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(internship, field, value)

    db.commit()
    db.refresh(internship)
    return internship


def delete_internship(
    db: Session, internship_id: uuid.UUID, attachments: AttachmentStore
) -> Optional[Internship]:
    """
    Supprime une offre de stage, puis son document s'il en a un.

    Étapes :
    1. Supprimer l'enregistrement (commit)
    2. Supprimer le fichier en best effort : un échec est journalisé, jamais propagé
    """
    internship = db.get(Internship, internship_id)
    if internship is None:
        return None

    document = internship.document
    db.delete(internship)
    db.commit()
    logger.info("Stage supprimé : %s (%s)", internship.company, internship_id)

    if document:
        attachments.delete(document)
    return internship
