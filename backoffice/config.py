"""
Configuración del Backoffice API
"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # Entorno
    ENV: str = "development"  # development | production

    # API
    API_TITLE: str = "Backoffice API"
    API_VERSION: str = "1.0.0"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080

    # Base de datos
    DATABASE_URL: str = "sqlite:///./backoffice.db"

    # JWT (sin valores por defecto: deben venir del entorno)
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int

    # Log de peticiones (una línea por request)
    ENV_VAR_LOGPATH: Optional[str] = None

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:3000",
    ]

    # Paths
    BASE_DIR: Path = Path(__file__).parent  # backoffice/
    LOGS_DIR: Path = BASE_DIR / "logs"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG | INFO | WARNING | ERROR
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Instancia global de configuración
settings = Settings()

# Crear directorios si no existen
settings.LOGS_DIR.mkdir(exist_ok=True, parents=True)
