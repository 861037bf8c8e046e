"""
API Dependencies - Sesiones de base de datos, servicios e identidad
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from backoffice.config import settings
from backoffice.database.connection import get_db
from backoffice.services import (
    AuthService,
    CategoriaService,
    Identidad,
    ProductoService,
    TokenService,
    UsuarioService,
)


@lru_cache()
def get_token_service() -> TokenService:
    """
    TokenService único del proceso (no tiene estado mutable).

    Returns:
        TokenService configurado con JWT_SECRET y JWT_EXPIRATION_MINUTES
    """
    return TokenService(
        secret=settings.JWT_SECRET,
        expiration_minutes=settings.JWT_EXPIRATION_MINUTES,
        algorithm=settings.JWT_ALGORITHM,
    )


def get_identidad(request: Request) -> Optional[Identidad]:
    """Identidad dejada por el middleware de autenticación (None = anónimo)"""
    return getattr(request.state, "identidad", None)


def get_usuario_service(db: Session = Depends(get_db)) -> UsuarioService:
    return UsuarioService(db)


def get_categoria_service(db: Session = Depends(get_db)) -> CategoriaService:
    return CategoriaService(db)


def get_producto_service(db: Session = Depends(get_db)) -> ProductoService:
    return ProductoService(db)


def get_auth_service(
    usuarios: UsuarioService = Depends(get_usuario_service),
    tokens: TokenService = Depends(get_token_service)
) -> AuthService:
    return AuthService(usuarios, tokens)
