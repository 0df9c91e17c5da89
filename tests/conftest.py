"""
Configuration partagée pour tous les tests.
Override la dépendance get_db pour éviter toute connexion réelle à PostgreSQL
et redirige les pièces jointes vers un répertoire temporaire.
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from placementhub.config import settings
from placementhub.database import get_db
from placementhub.dependencies import require_login
from placementhub.main import app
from placementhub.services.session_service import SessionData, SessionManager


def _fake_refresh(obj):
    """Simule db.refresh : renseigne l'id et les timestamps générés par la BDD."""
    if getattr(obj, "id", None) is None:
        obj.id = uuid.uuid4()
    now = datetime.now()
    if getattr(obj, "created_at", None) is None:
        obj.created_at = now
    if getattr(obj, "updated_at", None) is None:
        obj.updated_at = now


def make_session_data(**kwargs) -> SessionData:
    return SessionData(
        session_id=kwargs.get("session_id", "token-test"),
        user_id=kwargs.get("user_id", uuid.uuid4()),
        name=kwargs.get("name", "Admin"),
        email=kwargs.get("email", "admin@college.edu"),
        role=kwargs.get("role", "admin"),
        expires_at=kwargs.get("expires_at", datetime.now(timezone.utc) + timedelta(hours=1)),
    )


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Coût bcrypt minimal pour accélérer les tests."""
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """Redirige les pièces jointes et le montage statique /uploads vers tmp_path."""
    monkeypatch.setattr(settings, "UPLOAD_DIR", tmp_path)
    static = next(r for r in app.routes if getattr(r, "name", None) == "uploads").app
    monkeypatch.setattr(static, "directory", tmp_path)
    monkeypatch.setattr(static, "all_directories", [tmp_path])
    monkeypatch.setattr(static, "config_checked", False)
    return tmp_path


@pytest.fixture
def mock_db():
    db = MagicMock()
    db.refresh.side_effect = _fake_refresh
    return db


@pytest.fixture
def client(mock_db, upload_dir):
    """Client HTTP de test avec la BDD mockée et une table de sessions neuve."""
    app.state.session_manager = SessionManager()
    app.dependency_overrides[get_db] = lambda: mock_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def logged_client(client):
    """Client dont la garde require_login retourne une session valide."""
    app.dependency_overrides[require_login] = lambda: make_session_data()
    return client
