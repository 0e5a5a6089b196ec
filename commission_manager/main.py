import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from commission_manager import __version__
from commission_manager.config.settings import settings
from commission_manager.config.database import init_db
from commission_manager.core.middleware import setup_middleware, setup_exception_handlers
from commission_manager.api.v1.router import api_router

logger = logging.getLogger(__name__)

def configure_logging():
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    configure_logging()
    init_db()
    logger.info(f"{settings.app_name} starting - version {__version__}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"Report timezone: {settings.report_timezone}")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=__version__,
    description="Sistema de Control de Ventas y Comisiones",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
def root():
    return {
        "message": "Commission Manager API - Sistema de Ventas y Comisiones",
        "version": __version__,
        "status": "running",
        "docs": "/docs",
        "api": "/api/v1"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "commission_manager.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
