"""
Modèle SQLAlchemy pour la table students (dossiers de placement).
Les colonnes resume et certificates contiennent la clé de stockage de la pièce jointe,
ou une chaîne vide si aucun fichier n'a été fourni.
"""

import uuid
from sqlalchemy import Column, DateTime, Float, String, func
from sqlalchemy.dialects.postgresql import UUID

from placementhub.database import Base

PLACEMENT_STATUSES = ("Placed", "Not Placed")


class Student(Base):
    __tablename__ = "students"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=True)
    email = Column(String(255), nullable=True)
    department = Column(String(100), nullable=True)
    cgpa = Column(Float, nullable=True)
    resume = Column(String(500), nullable=False, default="")
    certificates = Column(String(500), nullable=False, default="")
    placement_status = Column(String(20), nullable=False, default="Not Placed")
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
