"""
Modelo Categoria - Agrupación de productos
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from .base import Base, Estado, ahora


class Categoria(Base):
    """Categoría de productos"""
    __tablename__ = 'categorias'

    id = Column(Integer, primary_key=True)
    nombre = Column(String(200), unique=True, nullable=False)
    estado = Column(String(20), nullable=False, default=Estado.ACTIVO.value)

    # Fechas
    fecha_creacion = Column(DateTime, default=ahora)
    fecha_actualizacion = Column(DateTime, default=ahora)

    # Relaciones
    productos = relationship("Producto", back_populates="categoria")

    def __repr__(self):
        return f"<Categoria(id={self.id}, nombre='{self.nombre}', estado='{self.estado}')>"
