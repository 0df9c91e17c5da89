"""
Schémas Pydantic pour les dossiers étudiants.

Aucune validation de contenu n'est faite sur les champs libres (nom, email, département) :
seuls les types et le statut de placement sont contrôlés.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_validator

from placementhub.models.student import PLACEMENT_STATUSES


def _check_status(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in PLACEMENT_STATUSES:
        raise ValueError(f"Statut invalide. Valeurs acceptées : {set(PLACEMENT_STATUSES)}")
    return v


class StudentCreate(BaseModel):
    """Champs du formulaire multipart POST /students (hors fichiers)."""
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    cgpa: Optional[float] = None
    placement_status: str = "Not Placed"

    @field_validator("placement_status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        return _check_status(v)


class StudentUpdate(BaseModel):
    """Schéma de mise à jour partielle (PUT /students/{id})."""
    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    cgpa: Optional[float] = None
    placement_status: Optional[str] = None

    @field_validator("placement_status")
    @classmethod
    def valid_status(cls, v: Optional[str]) -> Optional[str]:
        # un champ absent garde sa valeur ; un null explicite est refusé (colonne NOT NULL)
        if v is None:
            raise ValueError("Le statut de placement ne peut pas être null.")
        return _check_status(v)


class StudentResponse(BaseModel):
    id: uuid.UUID
    name: Optional[str]
    email: Optional[str]
    department: Optional[str]
    cgpa: Optional[float]
    resume: str
    certificates: str
    placement_status: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StudentEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    student: StudentResponse


class StudentListEnvelope(BaseModel):
    success: bool = True
    students: List[StudentResponse]
