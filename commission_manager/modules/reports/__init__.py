# commission_manager/modules/reports/__init__.py
"""
Módulo de Reportes - Report Aggregator

Resume las ventas finalizadas en:

- Ranking de vendedores por valor vendido
- Reporte mensual con desglose por vendedor
- Comisiones acumuladas por vendedor
- Dashboard del día y del mes en curso

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Consultas agregadas
- schemas.py: Modelos Pydantic de respuesta
"""

from .router import router as reports_router
from .service import ReportsService
from .repository import ReportsRepository

__all__ = [
    "reports_router",
    "ReportsService",
    "ReportsRepository"
]
