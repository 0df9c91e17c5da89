"""
Schémas Pydantic pour les offres de stage.
"""

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class InternshipCreate(BaseModel):
    """Champs du formulaire multipart POST /internships (le fichier est la partie `file`)."""
    name: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None


class InternshipUpdate(BaseModel):
    """Schéma de mise à jour partielle (PUT /internships/{id}). Le document n'est pas modifiable."""
    name: Optional[str] = None
    company: Optional[str] = None
    position: Optional[str] = None
    duration: Optional[str] = None
    stipend: Optional[str] = None


class InternshipResponse(BaseModel):
    id: uuid.UUID
    name: Optional[str]
    company: Optional[str]
    position: Optional[str]
    duration: Optional[str]
    stipend: Optional[str]
    document: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class InternshipEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    internship: InternshipResponse


class InternshipListEnvelope(BaseModel):
    success: bool = True
    internships: List[InternshipResponse]
