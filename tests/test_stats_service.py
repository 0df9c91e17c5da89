"""
Tests unitaires pour les statistiques du tableau de bord.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

from placementhub.services.stats_service import (
    cgpa_by_department,
    dashboard_stats,
    get_cgpa_by_department,
    get_dashboard_stats,
)


def student(department="CSE", cgpa=8.0, placement_status="Not Placed"):
    return SimpleNamespace(department=department, cgpa=cgpa, placement_status=placement_status)


# --- dashboard_stats ---

def test_dashboard_sans_etudiant():
    """Aucun étudiant : moyenne "0.00", jamais NaN."""
    stats = dashboard_stats([])
    assert stats.total == 0
    assert stats.avg_cgpa == "0.00"
    assert stats.eligible == 0
    assert stats.not_eligible == 0
    assert stats.placed == 0


def test_dashboard_compteurs():
    students = [
        student(cgpa=9.0, placement_status="Placed"),
        student(cgpa=7.5),
        student(cgpa=7.49),
        student(cgpa=None, placement_status="Placed"),
    ]
    stats = dashboard_stats(students)

    assert stats.total == 4
    assert stats.avg_cgpa == "6.00"  # (9 + 7.5 + 7.49 + 0) / 4 = 5.9975
    assert stats.eligible == 2  # seuil inclusif
    assert stats.not_eligible == 2
    assert stats.placed == 2


def test_dashboard_arrondi_deux_decimales():
    assert dashboard_stats([student(cgpa=8.0), student(cgpa=8.25), student(cgpa=9.0)]).avg_cgpa == "8.42"


# --- cgpa_by_department ---

def test_cgpa_par_departement_ignore_non_numerique():
    students = [student("CS", 8.0), student("CS", 9.0), student("EE", "x")]
    result = cgpa_by_department(students)
    assert [d.model_dump() for d in result.data] == [{"department": "CS", "avg_cgpa": "8.50"}]


def test_cgpa_par_departement_ignore_departement_vide():
    students = [student("", 9.0), student(None, 9.0), student("ME", None), student("ME", 6.0)]
    result = cgpa_by_department(students)
    assert [(d.department, d.avg_cgpa) for d in result.data] == [("ME", "6.00")]


def test_cgpa_par_departement_tri_alphabetique():
    students = [student("IT", 7.0), student("CSE", 8.0), student("ECE", "7.5")]
    result = cgpa_by_department(students)
    assert [d.department for d in result.data] == ["CSE", "ECE", "IT"]
    assert result.data[1].avg_cgpa == "7.50"


def test_cgpa_par_departement_vide():
    assert cgpa_by_department([]).data == []


# --- Accès BDD ---

def test_get_dashboard_stats_lit_la_table():
    db = MagicMock()
    db.execute.return_value.scalars.return_value.all.return_value = [student(cgpa=8.0, placement_status="Placed")]
    stats = get_dashboard_stats(db)
    assert stats.total == 1
    assert stats.placed == 1


def test_get_cgpa_by_department_lit_la_table():
    db = MagicMock()
    db.execute.return_value.scalars.return_value.all.return_value = [student("CSE", 8.0)]
    assert get_cgpa_by_department(db).data[0].department == "CSE"
