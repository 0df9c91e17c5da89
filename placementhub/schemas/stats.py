"""
Schémas Pydantic pour les statistiques du tableau de bord.
Les moyennes sont des chaînes à deux décimales (ex. "8.50").
"""

from typing import List

from pydantic import BaseModel


class DashboardStats(BaseModel):
    success: bool = True
    total: int
    avg_cgpa: str
    eligible: int
    not_eligible: int
    placed: int


class DepartmentCgpa(BaseModel):
    department: str
    avg_cgpa: str


class CgpaByDepartmentResponse(BaseModel):
    success: bool = True
    data: List[DepartmentCgpa]
