"""
Planificateur APScheduler : purge périodique des sessions expirées.

Les sessions expirées sont déjà refusées à la lecture ; ce job libère la mémoire
des sessions jamais relues (navigateur fermé sans déconnexion).
"""

import logging

from apscheduler.schedulers.background import BackgroundScheduler

from placementhub.config import settings
from placementhub.services.session_service import SessionManager

logger = logging.getLogger(__name__)

scheduler = BackgroundScheduler()


def _purge_sessions_scheduled(sessions: SessionManager) -> None:
    """Tâche planifiée : supprime les sessions expirées du stockage."""
    try:
        sessions.purge_expired()
    except Exception as exc:
        logger.error("Erreur lors de la purge des sessions : %s", exc)


def start_scheduler(sessions: SessionManager) -> None:
    """Démarre le planificateur en arrière-plan (appelé au démarrage de l'API)."""
    scheduler.add_job(
        _purge_sessions_scheduled,
        trigger="interval",
        minutes=settings.SESSION_PURGE_INTERVAL_MINUTES,
        args=[sessions],
        id="session_purge",
        replace_existing=True,
    )
    scheduler.start()
    logger.info(
        "Scheduler démarré : purge des sessions toutes les %d minutes.",
        settings.SESSION_PURGE_INTERVAL_MINUTES,
    )


def stop_scheduler() -> None:
    """Arrête le planificateur proprement (appelé à l'arrêt de l'API)."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler arrêté.")
