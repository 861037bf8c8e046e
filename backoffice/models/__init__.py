"""
Modelos SQLAlchemy para el Backoffice
======================================

- Usuario: credenciales y nivel de acceso
- Categoria: agrupación de productos
- Producto: artículos del catálogo (pertenecen a una categoría)

Ningún registro se borra físicamente: la baja es un cambio de estado.
"""

from .base import Base, Estado, NivelAcceso, ahora
from .usuario import Usuario
from .categoria import Categoria
from .producto import Producto

__all__ = [
    'Base',
    'Estado',
    'NivelAcceso',
    'ahora',
    'Usuario',
    'Categoria',
    'Producto',
]
