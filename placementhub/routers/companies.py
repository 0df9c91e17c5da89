"""
Router pour les visites d'entreprises (CRUD complet, sans pièce jointe).
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from placementhub.database import get_db
from placementhub.dependencies import require_login
from placementhub.schemas.common import MessageResponse
from placementhub.schemas.company import (
    CompanyCreate,
    CompanyEnvelope,
    CompanyListEnvelope,
    CompanyUpdate,
)
from placementhub.services import company_service

router = APIRouter(prefix="/api/v1/companies", tags=["Entreprises"])


@router.post("", response_model=CompanyEnvelope, status_code=201, summary="Ajouter une entreprise")
def create_company(data: CompanyCreate, db: Session = Depends(get_db), _session=Depends(require_login)):
    """Nom, date de visite, nombre de placés et package sont obligatoires (422 sinon)."""
    company = company_service.create_company(db, data)
    return CompanyEnvelope(message="Entreprise ajoutée.", company=company)


@router.get("", response_model=CompanyListEnvelope, summary="Lister les entreprises")
def list_companies(db: Session = Depends(get_db)):
    """Retourne les entreprises triées par date de visite décroissante."""
    return CompanyListEnvelope(companies=company_service.get_companies(db))


@router.get("/{company_id}", response_model=CompanyEnvelope, summary="Détail d'une entreprise")
def get_company(company_id: uuid.UUID, db: Session = Depends(get_db)):
    company = company_service.get_company(db, company_id)
    if company is None:
        raise HTTPException(status_code=404, detail="Entreprise introuvable.")
    return CompanyEnvelope(company=company)


@router.put("/{company_id}", response_model=CompanyEnvelope, summary="Modifier une entreprise")
def update_company(
    company_id: uuid.UUID,
    data: CompanyUpdate,
    db: Session = Depends(get_db),
    _session=Depends(require_login),
):
    """Seuls les champs fournis sont modifiés ; la date de visite est conservée si absente."""
    company = company_service.update_company(db, company_id, data)
    if company is None:
        raise HTTPException(status_code=404, detail="Entreprise introuvable.")
    return CompanyEnvelope(message="Entreprise mise à jour.", company=company)


@router.delete("/{company_id}", response_model=MessageResponse, summary="Supprimer une entreprise")
def delete_company(company_id: uuid.UUID, db: Session = Depends(get_db), _session=Depends(require_login)):
    company = company_service.delete_company(db, company_id)
    if company is None:
        raise HTTPException(status_code=404, detail="Entreprise introuvable.")
    return MessageResponse(message="Entreprise supprimée.")
