# commission_manager/modules/reports/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from commission_manager.config.database import get_db
from commission_manager.config.settings import settings
from .repository import ReportsRepository
from .service import ReportsService
from .schemas import (
    DashboardResponse, MonthlyReportResponse, VendorCommission, VendorPerformance
)

router = APIRouter(prefix="/reports", tags=["Reports"])

def get_reports_service(db: Session = Depends(get_db)) -> ReportsService:
    return ReportsService(
        repository=ReportsRepository(db),
        report_timezone=settings.report_timezone,
        top_vendors_limit=settings.dashboard_top_vendors
    )

@router.get("/ranking", response_model=List[VendorPerformance])
def get_ranking(
    limit: int = Query(settings.ranking_default_limit, description="Límite de resultados"),
    date_start: Optional[str] = Query(None, description="Fecha inicial (YYYY-MM-DD)"),
    date_end: Optional[str] = Query(None, description="Fecha final (YYYY-MM-DD)"),
    service: ReportsService = Depends(get_reports_service)
):
    """
    Ranking de vendedores por valor total vendido
    """
    return service.ranking(limit=limit, date_start=date_start, date_end=date_end)

@router.get("/monthly", response_model=MonthlyReportResponse)
def get_monthly_report(
    month: int = Query(..., description="Mes (1-12)"),
    year: int = Query(..., description="Año (ej: 2025)"),
    service: ReportsService = Depends(get_reports_service)
):
    """
    Reporte mensual de ventas con desglose por vendedor
    """
    return service.monthly_report(month, year)

@router.get("/commissions", response_model=List[VendorCommission])
def get_commissions(
    vendor_id: Optional[str] = None,
    date_start: Optional[str] = None,
    date_end: Optional[str] = None,
    service: ReportsService = Depends(get_reports_service)
):
    """
    Total de comisiones por vendedor
    """
    return service.commissions(vendor_id=vendor_id, date_start=date_start, date_end=date_end)

@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(service: ReportsService = Depends(get_reports_service)):
    """
    Dashboard con estadísticas de hoy y del mes en curso
    """
    return service.dashboard()
