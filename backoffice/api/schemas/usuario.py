"""
Pydantic schemas for Usuario
"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from backoffice.models import NivelAcceso


class UsuarioBase(BaseModel):
    """Base schema for Usuario"""
    nombre_completo: str
    username: str
    nivel_acceso: NivelAcceso


class UsuarioCreate(UsuarioBase):
    """Schema for creating a user"""
    clave: str = Field(min_length=1)


class UsuarioUpdate(UsuarioBase):
    """Schema for updating a user (clave vacía = conservar la actual)"""
    clave: Optional[str] = None


class UsuarioResponse(BaseModel):
    """Schema for user response (nunca incluye la clave)"""
    id: int
    nombre_completo: str
    username: str
    nivel_acceso: str
    estado: str
    fecha_creacion: datetime
    fecha_ultimo_ingreso: Optional[datetime] = None

    class Config:
        from_attributes = True
