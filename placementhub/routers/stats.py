"""
Router des statistiques du tableau de bord.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from placementhub.database import get_db
from placementhub.schemas.stats import CgpaByDepartmentResponse, DashboardStats
from placementhub.services import stats_service

router = APIRouter(prefix="/api/v1/stats", tags=["Statistiques"])


@router.get("/dashboard", response_model=DashboardStats, summary="Statistiques globales")
def dashboard_stats(db: Session = Depends(get_db)):
    """Total d'étudiants, CGPA moyen, éligibles (CGPA ≥ 7.5), non éligibles et placés."""
    return stats_service.get_dashboard_stats(db)


@router.get("/cgpa-by-department", response_model=CgpaByDepartmentResponse,
            summary="CGPA moyen par département")
def cgpa_by_department(db: Session = Depends(get_db)):
    return stats_service.get_cgpa_by_department(db)
