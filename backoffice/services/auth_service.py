"""
Auth Service - Inicio de sesión

Verifica credenciales, registra el ingreso y emite el token.
"""

from typing import Callable
import logging

from sqlalchemy.exc import SQLAlchemyError

from backoffice.api.schemas.auth import AuthResponse
from backoffice.exceptions import (
    CredencialesInvalidas,
    DatosDuplicados,
    UsuarioInvalido,
    ERROR_CREDENCIALES_INVALIDAS,
    ERROR_USUARIO_INVALIDO,
)
from backoffice.models import Estado
from backoffice.services.token_service import TokenService
from backoffice.services.usuario_service import UsuarioService
from backoffice.utils.security import verify_password

logger = logging.getLogger(__name__)


class AuthService:
    """Flujo de login: usuario → credenciales → token"""

    def __init__(
        self,
        usuarios: UsuarioService,
        tokens: TokenService,
        verificador: Callable[[str, str], bool] = verify_password
    ):
        self.usuarios = usuarios
        self.tokens = tokens
        self.verificador = verificador

    def login(self, username: str, password: str) -> AuthResponse:
        """
        Autentica al usuario y emite un token.

        Clave incorrecta y usuario desactivado producen el mismo error,
        así no se revela el estado de la cuenta.

        Raises:
            UsuarioInvalido: Si el username no existe
            CredencialesInvalidas: Si la clave no coincide o el usuario no está ACTIVO
        """
        usuario = self.usuarios.buscar_por_username(username)
        if usuario is None:
            logger.warning(f"Login fallido, usuario inexistente: {username}")
            raise UsuarioInvalido(ERROR_USUARIO_INVALIDO)

        clave_ok = self.verificador(password, usuario.clave)
        if not clave_ok or usuario.estado != Estado.ACTIVO.value:
            logger.warning(f"Login fallido, credenciales inválidas: {username}")
            raise CredencialesInvalidas(ERROR_CREDENCIALES_INVALIDAS)

        username, rol = usuario.username, usuario.nivel_acceso

        try:
            self.usuarios.registrar_ingreso(usuario)
        except (SQLAlchemyError, DatosDuplicados) as e:
            # El login no depende de poder guardar la fecha de ingreso
            self.usuarios.db.rollback()
            logger.error(f"No se pudo registrar el ingreso de {username}: {e}")

        token = self.tokens.emitir(username, rol)
        logger.info(f"✓ Login: {username} ({rol})")
        return AuthResponse(token=token, username=username, role=rol)
