"""
Aplicación de la política de autorización.

Los códigos están invertidos respecto a la convención REST y los clientes
dependen de ello: sin autenticación => 403, privilegios insuficientes => 401.
"""

import logging

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from backoffice.api.politica import Decision, PoliticaAutorizacion

logger = logging.getLogger(__name__)

ERROR_NO_AUTENTICADO = "Acceso Denegado - Se requiere autenticación"
ERROR_ROL_INSUFICIENTE = "No tiene autorización - sus privilegios son insuficientes"

RECHAZOS = {
    Decision.NO_AUTENTICADO: (403, ERROR_NO_AUTENTICADO),
    Decision.ROL_INSUFICIENTE: (401, ERROR_ROL_INSUFICIENTE),
}


class AutorizacionMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, politica: PoliticaAutorizacion = None):
        super().__init__(app)
        self.politica = politica or PoliticaAutorizacion()

    async def dispatch(self, request: Request, call_next):
        identidad = getattr(request.state, "identidad", None)
        decision = self.politica.evaluar(request.url.path, identidad)

        if decision is Decision.PERMITIDO:
            return await call_next(request)

        status_code, mensaje = RECHAZOS[decision]
        logger.info(f"{decision.value}: {request.method} {request.url.path}")
        return JSONResponse(status_code=status_code, content={"error": mensaje})
