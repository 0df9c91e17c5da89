"""
Tests d'intégration API pour les offres de stage.
"""

import uuid
from datetime import datetime
from unittest.mock import MagicMock

from placementhub.models.internship import Internship
from placementhub.services.attachment_service import AttachmentStore


def make_internship(**kwargs) -> Internship:
    i = MagicMock(spec=Internship)
    i.id = kwargs.get("id", uuid.uuid4())
    i.name = kwargs.get("name", "Ravi Kumar")
    i.company = kwargs.get("company", "Infosys")
    i.position = kwargs.get("position", "Backend intern")
    i.duration = kwargs.get("duration", "6 mois")
    i.stipend = kwargs.get("stipend", "15000")
    i.document = kwargs.get("document", "")
    i.created_at = datetime.now()
    i.updated_at = datetime.now()
    return i


# ============================================================
# POST /api/v1/internships
# ============================================================

def test_create_internship_avec_document(logged_client, upload_dir):
    response = logged_client.post(
        "/api/v1/internships",
        data={"name": "Ravi", "company": "Infosys", "position": "Backend intern"},
        files={"file": ("offre.pdf", b"%PDF offre", "application/pdf")},
    )

    assert response.status_code == 201
    internship = response.json()["internship"]
    assert internship["company"] == "Infosys"
    assert AttachmentStore(upload_dir / "internships").path(internship["document"]).read_bytes() == b"%PDF offre"


def test_create_internship_sans_document(logged_client):
    response = logged_client.post("/api/v1/internships", data={"company": "Infosys"})
    assert response.status_code == 201
    assert response.json()["internship"]["document"] == ""


def test_create_internship_sans_session(client, upload_dir):
    response = client.post(
        "/api/v1/internships",
        data={"company": "Infosys"},
        files={"file": ("offre.pdf", b"%PDF offre", "application/pdf")},
    )
    assert response.status_code == 401
    assert list((upload_dir / "internships").iterdir()) == []


# ============================================================
# GET
# ============================================================

def test_list_internships(client, mock_db):
    mock_db.execute.return_value.scalars.return_value.all.return_value = [make_internship()]
    response = client.get("/api/v1/internships")
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert len(response.json()["internships"]) == 1


def test_get_internship_introuvable(client, mock_db):
    mock_db.get.return_value = None
    response = client.get(f"/api/v1/internships/{uuid.uuid4()}")
    assert response.status_code == 404


# ============================================================
# PUT /api/v1/internships/{id}
# ============================================================

def test_update_internship(logged_client, mock_db):
    i = make_internship(stipend="15000")
    mock_db.get.return_value = i
    response = logged_client.put(f"/api/v1/internships/{i.id}", json={"stipend": "20000"})

    assert response.status_code == 200
    assert response.json()["internship"]["stipend"] == "20000"
    assert response.json()["internship"]["company"] == "Infosys"


def test_update_internship_introuvable(logged_client, mock_db):
    mock_db.get.return_value = None
    response = logged_client.put(f"/api/v1/internships/{uuid.uuid4()}", json={"stipend": "1"})
    assert response.status_code == 404
    assert response.json()["message"] == "Stage introuvable."


# ============================================================
# DELETE /api/v1/internships/{id}
# ============================================================

def test_delete_internship_supprime_le_document(logged_client, mock_db, upload_dir):
    store = AttachmentStore(upload_dir / "internships")
    document = store.store(b"offre", "offre.pdf")
    i = make_internship(document=document)
    mock_db.get.return_value = i

    response = logged_client.delete(f"/api/v1/internships/{i.id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Stage supprimé."}
    mock_db.delete.assert_called_once_with(i)
    assert not store.exists(document)


def test_delete_internship_document_absent_reussit(logged_client, mock_db):
    i = make_internship(document="1-aa-disparu.pdf")
    mock_db.get.return_value = i
    response = logged_client.delete(f"/api/v1/internships/{i.id}")
    assert response.status_code == 200


def test_delete_internship_introuvable(logged_client, mock_db):
    mock_db.get.return_value = None
    assert logged_client.delete(f"/api/v1/internships/{uuid.uuid4()}").status_code == 404


def test_delete_internship_sans_session(client, mock_db):
    assert client.delete(f"/api/v1/internships/{uuid.uuid4()}").status_code == 401
    mock_db.delete.assert_not_called()


def test_document_servi_puis_supprime(logged_client, mock_db, upload_dir):
    store = AttachmentStore(upload_dir / "internships")
    document = store.store(b"%PDF offre", "offre.pdf")
    assert logged_client.get(f"/uploads/internships/{document}").content == b"%PDF offre"

    mock_db.get.return_value = make_internship(document=document)
    logged_client.delete(f"/api/v1/internships/{uuid.uuid4()}")
    assert logged_client.get(f"/uploads/internships/{document}").status_code == 404
