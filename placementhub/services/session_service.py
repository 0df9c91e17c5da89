"""
Gestion des sessions serveur.

Une session est créée à la connexion et référencée par un jeton opaque (cookie HttpOnly).
Le stockage est injecté dans SessionManager : InMemorySessionStore convient à une seule
instance de l'API ; un stockage externe (clé-valeur) peut le remplacer s'il expose
les mêmes méthodes get / set / delete / purge.
"""

import logging
import secrets
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from pydantic import BaseModel

from placementhub.exceptions import UnauthorizedError
from placementhub.schemas.auth import SessionUser

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionData(BaseModel):
    session_id: str
    user_id: uuid.UUID
    name: Optional[str]
    email: str
    role: str
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or _utcnow())

    def to_user(self) -> SessionUser:
        return SessionUser(id=self.user_id, name=self.name, email=self.email, role=self.role)


class InMemorySessionStore:
    """Table des sessions en mémoire, protégée par un verrou."""

    def __init__(self):
        self._sessions: Dict[str, SessionData] = {}
        self._lock = threading.Lock()

    def get(self, session_id: str) -> Optional[SessionData]:
        with self._lock:
            return self._sessions.get(session_id)

    def set(self, session: SessionData) -> None:
        with self._lock:
            self._sessions[session.session_id] = session

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def purge(self, now: datetime) -> int:
        """Supprime les sessions expirées et retourne leur nombre."""
        with self._lock:
            expired = [sid for sid, s in self._sessions.items() if s.is_expired(now)]
            for sid in expired:
                del self._sessions[sid]
        return len(expired)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


class SessionManager:
    def __init__(self, store=None, lifetime: timedelta = timedelta(hours=2)):
        self.store = store if store is not None else InMemorySessionStore()
        self.lifetime = lifetime

    def login(self, user) -> str:
        """Crée une session pour l'utilisateur authentifié et retourne son jeton."""
        token = secrets.token_urlsafe(32)
        self.store.set(SessionData(
            session_id=token,
            user_id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            expires_at=_utcnow() + self.lifetime,
        ))
        logger.info("Session ouverte pour %s", user.email)
        return token

    def current(self, token: Optional[str]) -> Optional[SessionData]:
        """Retourne la session associée au jeton, ou None si absente ou expirée."""
        if not token:
            return None
        session = self.store.get(token)
        if session is None:
            return None
        if session.is_expired():
            self.store.delete(token)
            return None
        return session

    def require_session(self, token: Optional[str]) -> SessionData:
        session = self.current(token)
        if session is None:
            raise UnauthorizedError("Connexion requise.")
        return session

    def logout(self, token: Optional[str]) -> None:
        """Détruit la session. Sans effet si elle n'existe pas."""
        if token:
            self.store.delete(token)

    def purge_expired(self) -> int:
        count = self.store.purge(_utcnow())
        if count:
            logger.info("%d session(s) expirée(s) supprimée(s)", count)
        return count
