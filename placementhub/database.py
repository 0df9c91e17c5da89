"""
Configuration de la connexion à la base de données PostgreSQL.
Utilise SQLAlchemy avec un moteur synchrone.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker

from placementhub.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dépendance FastAPI — fournit une session BDD et la ferme après usage."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Crée les tables manquantes (utilisé au démarrage si DB_AUTO_CREATE est actif)."""
    import placementhub.models  # noqa: F401 (enregistre les modèles) dans Base.metadata

    Base.metadata.create_all(bind=engine)
    logger.info("Tables vérifiées / créées sur %s", engine.url.render_as_string(hide_password=True))
