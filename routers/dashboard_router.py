"""
Router para endpoints do Dashboard.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db import get_db
from schemas.dashboard_schema import DashboardStats
from services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])
logger = logging.getLogger(__name__)


@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    """
    Retorna os números consolidados: projetos ativos, clientes,
    receitas, despesas, lucro, margem e contas pendentes.
    """
    service = DashboardService()
    return service.get_stats(db)
