# commission_manager/api/v1/router.py
from fastapi import APIRouter

from commission_manager.config.settings import settings
from commission_manager.modules.sales import sales_router
from commission_manager.modules.reports import reports_router
from commission_manager.modules.vendors import vendors_router
from commission_manager.modules.products import products_router

# Crear router principal de la API v1
api_router = APIRouter(prefix="/api/v1")

# Incluir routers de módulos
api_router.include_router(sales_router)
api_router.include_router(reports_router)
api_router.include_router(vendors_router)
api_router.include_router(products_router)

@api_router.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.version,
        "modules": {
            "sales": "/api/v1/sales",
            "reports": "/api/v1/reports",
            "vendors": "/api/v1/vendors",
            "products": "/api/v1/products"
        }
    }
