"""
Enveloppe de réponse commune : {success, message?, <payload>}.
"""

from typing import Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Réponse sans charge utile (suppression, déconnexion, erreurs)."""
    success: bool = True
    message: Optional[str] = None
