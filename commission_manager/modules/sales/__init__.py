# commission_manager/modules/sales/__init__.py
"""
Módulo de Ventas - Sale Recorder

Registra ventas validando vendedor y producto, y calcula en el momento del
registro el valor total y la comisión:

- Registro de ventas con copia de precio y porcentaje de comisión
- Consulta y listado con filtros
- Actualización con recálculo de valores
- Cancelación (soft delete vía status)

Arquitectura:
- router.py: Endpoints FastAPI
- service.py: Lógica de negocio
- repository.py: Acceso a datos
- schemas.py: Modelos Pydantic de request/response
"""

from .router import router as sales_router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "sales_router",
    "SalesService",
    "SalesRepository"
]
