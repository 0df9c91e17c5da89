"""
Schémas Pydantic pour l'inscription, la connexion et la session courante.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, field_validator

# bcrypt ignore (ou refuse) tout ce qui dépasse 72 octets
MAX_PASSWORD_BYTES = 72


class SignupRequest(BaseModel):
    """Schéma d'inscription (POST /auth/signup)."""
    name: Optional[str] = None
    email: str
    password: str
    role: str = "student"

    @field_validator("email")
    @classmethod
    def email_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("L'email ne peut pas être vide.")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_valid(cls, v: str) -> str:
        if not v:
            raise ValueError("Le mot de passe ne peut pas être vide.")
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Le mot de passe ne peut pas dépasser {MAX_PASSWORD_BYTES} octets.")
        return v


class LoginRequest(BaseModel):
    """Schéma de connexion (POST /auth/login)."""
    email: str
    password: str

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Le mot de passe ne peut pas dépasser {MAX_PASSWORD_BYTES} octets.")
        return v


class SessionUser(BaseModel):
    """Données utilisateur conservées dans la session serveur."""
    id: uuid.UUID
    name: Optional[str]
    email: str
    role: str


class AuthResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: Optional[SessionUser] = None


class CheckLoginResponse(BaseModel):
    logged_in: bool
