"""
Tests d'intégration API pour les statistiques du tableau de bord.
"""

from types import SimpleNamespace


def student(department, cgpa, placement_status="Not Placed"):
    return SimpleNamespace(department=department, cgpa=cgpa, placement_status=placement_status)


def test_dashboard_sans_etudiant(client, mock_db):
    mock_db.execute.return_value.scalars.return_value.all.return_value = []
    response = client.get("/api/v1/stats/dashboard")
    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "total": 0,
        "avg_cgpa": "0.00",
        "eligible": 0,
        "not_eligible": 0,
        "placed": 0,
    }


def test_dashboard(client, mock_db):
    mock_db.execute.return_value.scalars.return_value.all.return_value = [
        student("CSE", 9.0, "Placed"),
        student("ECE", 6.0),
    ]
    data = client.get("/api/v1/stats/dashboard").json()
    assert data["total"] == 2
    assert data["avg_cgpa"] == "7.50"
    assert data["eligible"] == 1
    assert data["not_eligible"] == 1
    assert data["placed"] == 1


def test_cgpa_par_departement(client, mock_db):
    mock_db.execute.return_value.scalars.return_value.all.return_value = [
        student("CS", 8.0),
        student("CS", 9.0),
        student("EE", "x"),
    ]
    response = client.get("/api/v1/stats/cgpa-by-department")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [{"department": "CS", "avg_cgpa": "8.50"}]}


def test_health(client):
    assert client.get("/api/health").json()["status"] == "ok"
