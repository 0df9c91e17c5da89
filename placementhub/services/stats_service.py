"""
Statistiques du tableau de bord, calculées à la demande sur tous les étudiants.
Aucun cache : chaque appel relit la table students.
"""

import math
from collections import defaultdict
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from placementhub.models.student import Student
from placementhub.schemas.stats import CgpaByDepartmentResponse, DashboardStats, DepartmentCgpa

ELIGIBILITY_CGPA = 7.5


def _as_number(value) -> Optional[float]:
    """Convertit un CGPA en float, ou None s'il est absent ou non numérique."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def _format_avg(total: float, count: int) -> str:
    if count == 0:
        return "0.00"
    return f"{total / count:.2f}"


def dashboard_stats(students: Iterable) -> DashboardStats:
    """
    Calcule total, moyenne de CGPA (un CGPA absent compte pour 0), nombre d'éligibles
    (CGPA ≥ 7.5), de non-éligibles et d'étudiants placés.
    Sans étudiant, la moyenne vaut "0.00".
    """
    students = list(students)
    total = len(students)
    cgpas = [_as_number(s.cgpa) for s in students]

    eligible = sum(1 for c in cgpas if c is not None and c >= ELIGIBILITY_CGPA)
    placed = sum(1 for s in students if s.placement_status == "Placed")

    return DashboardStats(
        total=total,
        avg_cgpa=_format_avg(sum(c or 0 for c in cgpas), total),
        eligible=eligible,
        not_eligible=total - eligible,
        placed=placed,
    )


def cgpa_by_department(students: Iterable) -> CgpaByDepartmentResponse:
    """
    Moyenne de CGPA par département, triée par nom de département.
    Les étudiants sans département ou sans CGPA numérique sont ignorés.
    """
    totals = defaultdict(lambda: [0.0, 0])
    for s in students:
        cgpa = _as_number(s.cgpa)
        if not s.department or cgpa is None:
            continue
        totals[s.department][0] += cgpa
        totals[s.department][1] += 1

    return CgpaByDepartmentResponse(data=[
        DepartmentCgpa(department=dept, avg_cgpa=_format_avg(total, count))
        for dept, (total, count) in sorted(totals.items())
    ])


def _load_students(db: Session) -> list[Student]:
    return db.execute(select(Student)).scalars().all()


def get_dashboard_stats(db: Session) -> DashboardStats:
    return dashboard_stats(_load_students(db))


def get_cgpa_by_department(db: Session) -> CgpaByDepartmentResponse:
    return cgpa_by_department(_load_students(db))
