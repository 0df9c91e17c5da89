"""
Stockage des pièces jointes (CV, certificats, documents de stage) sur le disque.

Chaque fichier reçoit une clé unique « <epoch ms>-<8 hex>-<nom d'origine nettoyé> » :
deux envois simultanés du même nom de fichier ne s'écrasent jamais.
Le stockage n'est pas transactionnel avec la base : une suppression de fichier
est toujours « best effort » et un fichier orphelin reste possible.
"""

import logging
import re
import secrets
import time
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from placementhub.exceptions import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _sanitize_filename(filename: str) -> str:
    """Garde uniquement le nom de base, sans caractères problématiques."""
    name = Path(filename.replace("\\", "/")).name
    name = _UNSAFE_CHARS.sub("_", name).strip("._")
    return name or "file"


class AttachmentStore:
    """Répertoire de contenu pour une catégorie de pièces jointes."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def make_key(self, original_filename: str) -> str:
        return f"{int(time.time() * 1000)}-{secrets.token_hex(4)}-{_sanitize_filename(original_filename)}"

    def path(self, key: str) -> Path:
        # Path(key).name interdit toute sortie du répertoire (« ../ »)
        return self.directory / Path(key).name

    def exists(self, key: str) -> bool:
        return bool(key) and self.path(key).is_file()

    def store(self, content: bytes, original_filename: str) -> str:
        """
        Écrit le fichier et retourne sa clé de stockage.
        Le répertoire est créé au premier usage. Lève StorageError si l'écriture échoue.
        """
        key = self.make_key(original_filename)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(self.path(key), "xb") as f:
                f.write(content)
        except OSError as e:
            raise StorageError(f"Impossible d'enregistrer le fichier '{original_filename}' : {e}") from e

        logger.info("Pièce jointe enregistrée : %s (%d octets)", key, len(content))
        return key

    def delete(self, key: str) -> bool:
        """
        Supprime le fichier associé à la clé.
        Un fichier absent ou une erreur disque est journalisé en avertissement, jamais levé.
        Retourne True si un fichier a effectivement été supprimé.
        """
        if not key:
            return False
        try:
            self.path(key).unlink()
        except FileNotFoundError:
            logger.warning("Pièce jointe déjà absente du disque : %s", key)
            return False
        except OSError as e:
            logger.warning("Échec de suppression de la pièce jointe %s : %s", key, e)
            return False

        logger.info("Pièce jointe supprimée : %s", key)
        return True


async def save_upload(store: AttachmentStore, upload: Optional[UploadFile], max_size_mb: int) -> str:
    """
    Enregistre un fichier reçu en multipart et retourne sa clé.
    Retourne "" si aucun fichier n'a été envoyé.
    Lève ValueError si le fichier dépasse la taille maximale.
    """
    if upload is None or not upload.filename:
        return ""

    content = await upload.read()
    if len(content) > max_size_mb * 1024 * 1024:
        raise ValueError(
            f"Fichier '{upload.filename}' trop volumineux. Taille maximale : {max_size_mb} Mo."
        )
    return store.store(content, upload.filename)


async def save_uploads(store: AttachmentStore, uploads: list, max_size_mb: int) -> list[str]:
    """
    Enregistre plusieurs fichiers ; en cas d'échec, ceux déjà écrits sont supprimés
    avant de relancer l'erreur.
    """
    keys = []
    try:
        for upload in uploads:
            keys.append(await save_upload(store, upload, max_size_mb))
    except (ValueError, StorageError):
        for key in keys:
            store.delete(key)
        raise
    return keys
