"""
Modèle SQLAlchemy pour les offres de stage.
"""

import uuid
from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID

from placementhub.database import Base


class Internship(Base):
    __tablename__ = "internships"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=True)
    company = Column(String(200), nullable=True)
    position = Column(String(200), nullable=True)
    duration = Column(String(100), nullable=True)
    stipend = Column(String(100), nullable=True)
    document = Column(String(500), nullable=False, default="")  # clé de la pièce jointe ou ""
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
