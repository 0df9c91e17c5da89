"""
Schémas Pydantic pour les visites d'entreprises.

Note : on importe datetime en tant que module (dt) pour éviter le conflit de nommage
entre un champ `date` et le type `datetime.date` dans Pydantic v2.
"""

import uuid
import datetime as dt
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class CompanyCreate(BaseModel):
    """Les quatre champs sont obligatoires ; students_placed peut valoir 0."""
    company_name: str
    visit_date: dt.date
    students_placed: int = Field(ge=0)
    package_offered: str

    @field_validator("company_name", "package_offered")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip()


class CompanyUpdate(BaseModel):
    """Mise à jour partielle : un champ absent (y compris visit_date) garde sa valeur."""
    company_name: Optional[str] = None
    visit_date: Optional[dt.date] = None
    students_placed: Optional[int] = Field(default=None, ge=0)
    package_offered: Optional[str] = None

    @field_validator("company_name", "package_offered")
    @classmethod
    def not_empty(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Le champ ne peut pas être vide.")
        return v.strip() if v else v


class CompanyResponse(BaseModel):
    id: uuid.UUID
    company_name: str
    visit_date: dt.date
    students_placed: int
    package_offered: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class CompanyEnvelope(BaseModel):
    success: bool = True
    message: Optional[str] = None
    company: CompanyResponse


class CompanyListEnvelope(BaseModel):
    success: bool = True
    companies: List[CompanyResponse]
