from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

from commission_manager import __version__

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # App Info
    app_name: str = "Commission Manager API"
    version: str = __version__
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./commission_manager.db"

    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = Field(default="INFO", description="Nivel del logger raíz")

    # Reports
    report_timezone: str = Field(
        default="UTC",
        description="Zona horaria usada para definir 'hoy' y 'este mes' en el dashboard"
    )
    ranking_default_limit: int = Field(default=10, ge=1)
    dashboard_top_vendors: int = Field(default=5, ge=1)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

settings = Settings()
