"""
Exceptions métier levées par les services.
Les routers les traduisent en HTTPException (voir placementhub/routers/).
"""


class PlacementError(Exception):
    """Classe de base des erreurs métier de PlacementHub."""


class ConflictError(PlacementError):
    """Clé unique déjà présente (ex. email d'utilisateur)."""


class NotFoundError(PlacementError):
    """Enregistrement, utilisateur ou session introuvable."""


class UnauthorizedError(PlacementError):
    """Session absente, inconnue ou expirée."""


class InvalidCredentialsError(PlacementError):
    """Échec de la vérification du mot de passe."""


class StorageError(PlacementError):
    """Échec d'écriture d'une pièce jointe sur le disque."""
