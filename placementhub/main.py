"""
Point d'entrée principal de l'API PlacementHub.
Démarrage : uvicorn placementhub.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

import placementhub.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from placementhub.config import settings
from placementhub.database import init_db
from placementhub.routers import auth, companies, internships, stats, students
from placementhub.scheduler import start_scheduler, stop_scheduler
from placementhub.services.session_service import InMemorySessionStore, SessionManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie : crée les répertoires d'upload, démarre et arrête le scheduler."""
    for sub in ("students", "internships"):
        (settings.UPLOAD_DIR / sub).mkdir(parents=True, exist_ok=True)
    if settings.DB_AUTO_CREATE:
        init_db()
    start_scheduler(app.state.session_manager)
    yield
    stop_scheduler()


app = FastAPI(
    title="PlacementHub API",
    description="API de gestion des placements : étudiants, stages, entreprises et statistiques",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Table des sessions en mémoire : une seule instance de l'API.
app.state.session_manager = SessionManager(
    InMemorySessionStore(),
    lifetime=timedelta(minutes=settings.SESSION_LIFETIME_MINUTES),
)

# CORS : autorise les ports localhost en développement, avec cookies (session).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept"],
)


app.include_router(auth.router)
app.include_router(students.router)
app.include_router(internships.router)
app.include_router(companies.router)
app.include_router(stats.router)

# Fichiers envoyés, servis par leur clé : /uploads/students/<clé>, /uploads/internships/<clé>
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Rend toutes les erreurs HTTP dans l'enveloppe {success: false, message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Rend les erreurs de validation (422) dans la même enveloppe, champ par champ."""
    message = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'] if p != 'body')} : {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(status_code=422, content={"success": False, "message": message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées (BDD injoignable, etc.) pour garantir
    une réponse 500 structurée qui passe bien par CORSMiddleware.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "PlacementHub API", "version": "0.1.0"}
