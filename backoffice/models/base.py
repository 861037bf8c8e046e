"""
Base declarativa para todos los modelos
"""

from datetime import datetime, timezone
import enum
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Estado(str, enum.Enum):
    """Ciclo de vida compartido por usuarios, categorías y productos"""
    ACTIVO = "ACTIVO"
    DESACTIVADO = "DESACTIVADO"


class NivelAcceso(str, enum.Enum):
    """Roles embebidos en el token"""
    ADMIN = "ADMIN"
    USER = "USER"


def ahora() -> datetime:
    """Fecha/hora actual en UTC (naive, tal como se persiste)"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
