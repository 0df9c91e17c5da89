"""
Service métier pour les visites d'entreprises de recrutement.
"""

import uuid
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placementhub.models.company import Company
from placementhub.schemas.company import CompanyCreate, CompanyUpdate

logger = logging.getLogger(__name__)


def create_company(db: Session, data: CompanyCreate) -> Company:
    company = Company(
        company_name=data.company_name,
        visit_date=data.visit_date,
        students_placed=data.students_placed,
        package_offered=data.package_offered,
    )
    db.add(company)
    db.commit()
    db.refresh(company)

    logger.info("Entreprise ajoutée : %s (visite le %s)", company.company_name, company.visit_date)
    return company


def get_companies(db: Session) -> list[Company]:
    """Retourne toutes les entreprises, de la visite la plus récente à la plus ancienne."""
    return db.execute(
        select(Company).order_by(Company.visit_date.desc())
    ).scalars().all()


def get_company(db: Session, company_id: uuid.UUID) -> Optional[Company]:
    return db.get(Company, company_id)


def update_company(db: Session, company_id: uuid.UUID, data: CompanyUpdate) -> Optional[Company]:
    """
    Met à jour les champs fournis.
    Une visit_date absente de la requête conserve la date précédente.
    """
    company = db.get(Company, company_id)
    if company is None:
        return None

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(company, field, value)

    db.commit()
    db.refresh(company)
    return company


def delete_company(db: Session, company_id: uuid.UUID) -> Optional[Company]:
    company = db.get(Company, company_id)
    if company is None:
        return None

    db.delete(company)
    db.commit()
    logger.info("Entreprise supprimée : %s (%s)", company.company_name, company.id)
    return company
