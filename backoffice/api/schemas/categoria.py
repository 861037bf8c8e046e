"""
Pydantic schemas for Categoria
"""

from pydantic import BaseModel
from datetime import datetime


class CategoriaRequest(BaseModel):
    """Schema for creating or updating a categoria"""
    nombre: str


class CategoriaResponse(BaseModel):
    """Schema for categoria response"""
    id: int
    nombre: str
    estado: str
    fecha_creacion: datetime
    fecha_actualizacion: datetime

    class Config:
        from_attributes = True
