"""
Service d'authentification : inscription et vérification des identifiants.

Les mots de passe sont hachés avec bcrypt (sel aléatoire, coût BCRYPT_ROUNDS).
Le mot de passe en clair n'est jamais stocké ni journalisé.
"""

import logging
from typing import Optional

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from placementhub.config import settings
from placementhub.exceptions import ConflictError, InvalidCredentialsError, NotFoundError
from placementhub.models.user import User
from placementhub.schemas.auth import SignupRequest

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hache un mot de passe avec bcrypt et retourne le hash encodé en texte."""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Compare un mot de passe à son hash (comparaison à temps constant)."""
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


# Hash de référence calculé au chargement du module : quand l'email est inconnu,
# les deux chemins d'échec effectuent la même comparaison bcrypt dès la première requête.
_DUMMY_HASH = hash_password("placementhub")


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Recherche exacte (sensible à la casse) d'un utilisateur par email."""
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def register(db: Session, data: SignupRequest) -> User:
    """
    Crée un compte utilisateur.
    Lève une ConflictError si l'email est déjà utilisé.
    """
    if get_user_by_email(db, data.email) is not None:
        raise ConflictError(f"Un utilisateur avec l'email '{data.email}' existe déjà.")

    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        role=data.role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Inscription concurrente avec le même email
        db.rollback()
        raise ConflictError(f"Un utilisateur avec l'email '{data.email}' existe déjà.")
    db.refresh(user)

    logger.info("Nouvel utilisateur inscrit : %s (%s)", user.email, user.role)
    return user


def verify(db: Session, email: str, password: str) -> User:
    """
    Vérifie les identifiants et retourne l'utilisateur.

    Lève NotFoundError si l'email est inconnu, InvalidCredentialsError si le mot de passe
    ne correspond pas. Une comparaison bcrypt est effectuée dans les deux cas.
    """
    user = get_user_by_email(db, email)
    if user is None:
        verify_password(password, _DUMMY_HASH)
        raise NotFoundError("Utilisateur introuvable.")

    if not verify_password(password, user.password_hash):
        raise InvalidCredentialsError("Identifiants invalides.")
    return user
