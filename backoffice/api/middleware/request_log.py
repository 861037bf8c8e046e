"""
Log de peticiones en archivo.

Cada petición añade una línea "fecha | ip | método | ruta" al archivo
indicado en ENV_VAR_LOGPATH. Si la variable no está definida la aplicación
falla; si la escritura falla la petición continúa igual.
"""

import logging
from datetime import datetime
from typing import Optional

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from backoffice.exceptions import ConfiguracionInvalida, ERROR_LOGPATH_INVALIDO

logger = logging.getLogger(__name__)


def validar_ruta_log(log_path: Optional[str]) -> str:
    """
    Raises:
        ConfiguracionInvalida: Si la ruta no está definida
    """
    if not log_path:
        raise ConfiguracionInvalida(ERROR_LOGPATH_INVALIDO)
    return log_path


def formatear_linea(request: Request, momento: datetime) -> str:
    remoto = request.client.host if request.client else "-"
    return f"{momento.isoformat()} | {remoto} | {request.method} | {request.url.path}\n"


def escribir_linea(log_path: str, linea: str) -> None:
    """Añade la línea al log. Un fallo de escritura no se propaga."""
    try:
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(linea)
    except OSError as e:
        # No bloquear la petición si el log falla
        logger.debug(f"No se pudo escribir el log de peticiones: {e}")


class RequestLogMiddleware(BaseHTTPMiddleware):

    def __init__(self, app, log_path: Optional[str]):
        super().__init__(app)
        self.log_path = log_path

    async def dispatch(self, request: Request, call_next):
        log_path = validar_ruta_log(self.log_path)
        linea = formatear_linea(request, datetime.now())

        await run_in_threadpool(escribir_linea, log_path, linea)
        return await call_next(request)
