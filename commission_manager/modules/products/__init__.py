"""
Módulo de Productos - Catalog Provider

Exposición de solo lectura del catálogo: la Sale Recorder lo consulta para
validar el estado activo y copiar el precio unitario.
"""

from .router import router as products_router
from .repository import ProductRepository

__all__ = [
    "products_router",
    "ProductRepository"
]
