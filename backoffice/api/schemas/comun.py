"""
Pydantic schemas compartidos
"""

from pydantic import BaseModel


class MensajeResponse(BaseModel):
    """Respuesta de operaciones sin cuerpo propio (desactivaciones)"""
    message: str


class ErrorResponse(BaseModel):
    """Cuerpo de cualquier respuesta de error"""
    error: str
