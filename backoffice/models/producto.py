"""
Modelo Producto - Artículos del catálogo
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text, Index
from sqlalchemy.orm import relationship
from .base import Base, Estado, ahora


class Producto(Base):
    """
    Producto del catálogo.

    Siempre pertenece a una categoría. La categoría debe estar ACTIVO al
    crear o actualizar el producto; si luego se desactiva, el producto
    no se ve afectado.
    """
    __tablename__ = 'productos'
    __table_args__ = (
        Index('idx_producto_categoria', 'categoria_id'),
    )

    # Identificación
    id = Column(Integer, primary_key=True)
    nombre = Column(String(200), unique=True, nullable=False)
    categoria_id = Column(Integer, ForeignKey('categorias.id'), nullable=False)

    # Importes
    costo = Column(Float, nullable=False)
    precio = Column(Float, nullable=False)

    tags = Column(Text, nullable=False, default="")
    estado = Column(String(20), nullable=False, default=Estado.ACTIVO.value)

    # Fechas
    fecha_creacion = Column(DateTime, default=ahora)
    fecha_actualizacion = Column(DateTime, default=ahora)

    # Relaciones
    categoria = relationship("Categoria", back_populates="productos")

    def __repr__(self):
        return f"<Producto(id={self.id}, nombre='{self.nombre}', precio={self.precio})>"
