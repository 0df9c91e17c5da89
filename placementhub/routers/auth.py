"""
Router d'authentification : inscription, connexion, session courante, déconnexion.
Le jeton de session circule dans un cookie HttpOnly.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from placementhub.config import settings
from placementhub.database import get_db
from placementhub.dependencies import get_session_manager, get_session_token, require_login
from placementhub.exceptions import ConflictError, InvalidCredentialsError, NotFoundError
from placementhub.schemas.auth import AuthResponse, CheckLoginResponse, LoginRequest, SessionUser, SignupRequest
from placementhub.schemas.common import MessageResponse
from placementhub.services import auth_service
from placementhub.services.session_service import SessionData, SessionManager

router = APIRouter(prefix="/api/v1/auth", tags=["Authentification"])


@router.post("/signup", response_model=MessageResponse, status_code=201, summary="Créer un compte")
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    """Inscrit un nouvel utilisateur. 409 si l'email est déjà utilisé."""
    try:
        auth_service.register(db, data)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return MessageResponse(message="Inscription réussie.")


@router.post("/login", response_model=AuthResponse, summary="Se connecter")
def login(
    data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db),
    sessions: SessionManager = Depends(get_session_manager),
):
    """
    Vérifie les identifiants et ouvre une session serveur.
    Email inconnu et mot de passe erroné renvoient la même réponse 401.
    """
    try:
        user = auth_service.verify(db, data.email, data.password)
    except (NotFoundError, InvalidCredentialsError):
        raise HTTPException(status_code=401, detail="Identifiants invalides.")

    token = sessions.login(user)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_LIFETIME_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return AuthResponse(
        message="Connexion réussie.",
        user=SessionUser(id=user.id, name=user.name, email=user.email, role=user.role),
    )


@router.get("/profile", response_model=AuthResponse, summary="Session courante")
def profile(session: SessionData = Depends(require_login)):
    """Retourne l'utilisateur de la session courante. 401 si non connecté."""
    return AuthResponse(user=session.to_user())


@router.get("/check-login", response_model=CheckLoginResponse, summary="Statut de connexion")
def check_login(
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
):
    return CheckLoginResponse(logged_in=sessions.current(token) is not None)


@router.post("/logout", response_model=MessageResponse, summary="Se déconnecter")
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
):
    """Détruit la session. Toujours 200, même sans session active."""
    sessions.logout(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Déconnexion réussie.")
