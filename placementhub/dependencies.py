"""
Dépendances FastAPI partagées : gestionnaire de sessions, garde de connexion,
répertoires de pièces jointes.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request

from placementhub.config import settings
from placementhub.exceptions import UnauthorizedError
from placementhub.services.attachment_service import AttachmentStore
from placementhub.services.session_service import SessionData, SessionManager


def get_session_manager(request: Request) -> SessionManager:
    """Retourne le SessionManager attaché à l'application (voir main.py)."""
    return request.app.state.session_manager


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def require_login(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> SessionData:
    """Garde appliquée à toutes les opérations de modification : 401 sans session valide."""
    try:
        return sessions.require_session(token)
    except UnauthorizedError as e:
        raise HTTPException(status_code=401, detail=str(e))


def get_student_attachments() -> AttachmentStore:
    return AttachmentStore(settings.UPLOAD_DIR / "students")


def get_internship_attachments() -> AttachmentStore:
    return AttachmentStore(settings.UPLOAD_DIR / "internships")
