"""
Middlewares HTTP: log de peticiones, autenticación y autorización
"""

from .request_log import RequestLogMiddleware
from .autenticacion import AutenticacionMiddleware
from .autorizacion import AutorizacionMiddleware

__all__ = ['RequestLogMiddleware', 'AutenticacionMiddleware', 'AutorizacionMiddleware']
