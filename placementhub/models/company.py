"""
Modèle SQLAlchemy pour les visites d'entreprises de recrutement.
"""

import uuid
from sqlalchemy import Column, Date, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import UUID

from placementhub.database import Base


class Company(Base):
    __tablename__ = "companies"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    company_name = Column(String(200), nullable=False)
    visit_date = Column(Date, nullable=False)
    students_placed = Column(Integer, nullable=False, default=0)
    package_offered = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
