"""
Services package - Lógica de negocio
"""

from .token_service import TokenService, Identidad
from .usuario_service import UsuarioService
from .categoria_service import CategoriaService
from .producto_service import ProductoService
from .auth_service import AuthService

__all__ = [
    'TokenService',
    'Identidad',
    'UsuarioService',
    'CategoriaService',
    'ProductoService',
    'AuthService',
]
