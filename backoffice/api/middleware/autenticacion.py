"""
Filtro de autenticación JWT.

Busca un token Bearer en la cabecera Authorization y, si es válido, deja la
identidad en request.state.identidad. Nunca rechaza la petición: de eso se
encarga el middleware de autorización.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from backoffice.exceptions import TokenInvalido
from backoffice.services.token_service import Identidad, TokenService

logger = logging.getLogger(__name__)

PREFIJO_BEARER = "Bearer "


def extraer_token(authorization: Optional[str]) -> Optional[str]:
    """Token de una cabecera 'Bearer <token>', o None si no tiene ese formato"""
    if not authorization or not authorization.startswith(PREFIJO_BEARER):
        return None
    token = authorization[len(PREFIJO_BEARER):].strip()
    return token or None


class AutenticacionMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, tokens: TokenService):
        super().__init__(app)
        self.tokens = tokens

    async def dispatch(self, request: Request, call_next):
        request.state.identidad = self.identificar(request.headers.get("Authorization"))
        return await call_next(request)

    def identificar(self, authorization: Optional[str]) -> Optional[Identidad]:
        token = extraer_token(authorization)
        if token is None:
            return None

        try:
            return self.tokens.verificar(token)
        except TokenInvalido as e:
            # Token inválido => petición anónima
            logger.debug(f"Token rechazado: {e}")
            return None
