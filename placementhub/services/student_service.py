"""
Service métier pour les dossiers étudiants.
Création (avec CV et certificats optionnels), lecture, mise à jour partielle, suppression.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placementhub.models.student import Student
from placementhub.schemas.student import StudentCreate, StudentUpdate
from placementhub.services.attachment_service import AttachmentStore

logger = logging.getLogger(__name__)


def create_student(
    db: Session,
    data: StudentCreate,
    attachments: AttachmentStore,
    resume: str = "",
    certificates: str = "",
) -> Student:
    """
    Crée un dossier étudiant. resume et certificates sont les clés des fichiers déjà
    enregistrés ("" si absents). Si l'insertion échoue, ces fichiers sont supprimés.
    """
    student = Student(
        name=data.name,
        email=data.email,
        department=data.department,
        cgpa=data.cgpa,
        placement_status=data.placement_status,
        resume=resume,
        certificates=certificates,
    )
    db.add(student)
    try:
        db.commit()
    except Exception:
        db.rollback()
        for key in (resume, certificates):
            attachments.delete(key)
        raise
    db.refresh(student)

    logger.info("Nouvel étudiant ajouté : %s (%s)", student.name, student.email)
    return student


def get_students(db: Session) -> list[Student]:
    """Retourne tous les étudiants dans l'ordre d'insertion."""
    return db.execute(
        select(Student).order_by(Student.created_at)
    ).scalars().all()


def get_student(db: Session, student_id: uuid.UUID) -> Optional[Student]:
    return db.get(Student, student_id)


def update_student(db: Session, student_id: uuid.UUID, data: StudentUpdate) -> Optional[Student]:
    """Met à jour les champs fournis (dont placement_status). Les champs absents ne changent pas."""
    student = db.get(Student, student_id)
    if student is None:
        return None

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(student, field, value)

    db.commit()
    db.refresh(student)
    return student


def delete_student(db: Session, student_id: uuid.UUID, attachments: AttachmentStore) -> Optional[Student]:
    """
    Supprime un étudiant puis, en best effort, son CV et ses certificats.
    Retourne l'enregistrement supprimé, ou None s'il n'existe pas.
    """
    student = db.get(Student, student_id)
    if student is None:
        return None

    keys = (student.resume, student.certificates)
    db.delete(student)
    db.commit()
    logger.info("Étudiant supprimé : %s (%s)", student.name, student_id)

    for key in keys:
        if key:
            attachments.delete(key)
    return student
