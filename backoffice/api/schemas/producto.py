"""
Pydantic schemas for Producto
"""

from pydantic import BaseModel
from datetime import datetime


class ProductoRequest(BaseModel):
    """Schema for creating or updating a producto"""
    nombre: str
    categoria: int  # ID de la categoría
    costo: float
    precio: float
    tags: str = ""


class ProductoResponse(BaseModel):
    """Schema for producto response"""
    id: int
    nombre: str
    categoria: str  # Nombre de la categoría
    costo: float
    precio: float
    tags: str
    estado: str
    fecha_creacion: datetime
    fecha_actualizacion: datetime
