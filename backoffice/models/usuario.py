"""
Modelo Usuario - Gestión de usuarios del sistema
"""

from sqlalchemy import Column, Integer, String, DateTime
from .base import Base, Estado, ahora


class Usuario(Base):
    """
    Usuario del backoffice.

    Gestiona autenticación y nivel de acceso. La clave se guarda siempre
    como hash.
    """
    __tablename__ = 'usuarios'

    # Identificación
    id = Column(Integer, primary_key=True)
    nombre_completo = Column(String(200), nullable=False)
    username = Column(String(50), unique=True, nullable=False)
    clave = Column(String(255), nullable=False)

    # Permisos y estado
    nivel_acceso = Column(String(20), nullable=False)  # ADMIN | USER
    estado = Column(String(20), nullable=False, default=Estado.ACTIVO.value)

    # Fechas
    fecha_creacion = Column(DateTime, default=ahora)
    fecha_ultimo_ingreso = Column(DateTime)

    def __repr__(self):
        return f"<Usuario(id={self.id}, username='{self.username}', nivel_acceso='{self.nivel_acceso}')>"
