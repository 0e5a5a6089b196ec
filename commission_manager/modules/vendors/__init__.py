"""
Módulo de Vendedores - Vendor Provider

Exposición de solo lectura de los vendedores: la Sale Recorder los consulta
para validar el estado activo y copiar el porcentaje de comisión.
"""

from .router import router as vendors_router
from .repository import VendorRepository

__all__ = [
    "vendors_router",
    "VendorRepository"
]
