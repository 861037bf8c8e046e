"""
Usuario Service - Lógica de negocio para usuarios
"""

from sqlalchemy.orm import Session
from typing import Callable, List
import logging

from backoffice.api.schemas.usuario import UsuarioCreate, UsuarioUpdate, UsuarioResponse
from backoffice.database.manager import DatabaseManager
from backoffice.exceptions import NoEncontrado, ERROR_USUARIO_NO_ENCONTRADO
from backoffice.models import Usuario, Estado, ahora
from backoffice.utils.security import hash_password

logger = logging.getLogger(__name__)


class UsuarioService:
    """
    Servicio para gestionar usuarios.

    La función de hash se inyecta; la clave en texto plano nunca se
    persiste ni se devuelve.
    """

    def __init__(self, db: Session, hasher: Callable[[str], str] = hash_password):
        self.db = db
        self.manager = DatabaseManager(db)
        self.hasher = hasher

    def listar_activos(self) -> List[UsuarioResponse]:
        """Lista los usuarios con estado ACTIVO"""
        return [self._a_respuesta(u) for u in self.manager.listar_usuarios_activos()]

    def crear(self, request: UsuarioCreate) -> UsuarioResponse:
        """
        Crea un usuario ACTIVO con la clave cifrada.

        Args:
            request: Datos del usuario (clave en texto plano)

        Returns:
            Usuario creado
        """
        usuario = Usuario(
            nombre_completo=request.nombre_completo,
            username=request.username,
            clave=self.hasher(request.clave),
            nivel_acceso=request.nivel_acceso.value,
            estado=Estado.ACTIVO.value,
            fecha_creacion=ahora(),
        )
        usuario = self.manager.guardar(usuario)

        logger.info(f"✓ Usuario creado: {usuario.id} - {usuario.username}")
        return self._a_respuesta(usuario)

    def actualizar(self, usuario_id: int, request: UsuarioUpdate) -> UsuarioResponse:
        """
        Actualiza un usuario y lo reactiva.

        La clave solo se cambia si viene informada.

        Raises:
            NoEncontrado: Si el usuario no existe
        """
        usuario = self.manager.obtener_usuario(usuario_id)
        if usuario is None:
            raise NoEncontrado(f"{ERROR_USUARIO_NO_ENCONTRADO}{usuario_id}")

        usuario.nombre_completo = request.nombre_completo
        usuario.username = request.username
        usuario.nivel_acceso = request.nivel_acceso.value
        usuario.estado = Estado.ACTIVO.value

        if request.clave:
            usuario.clave = self.hasher(request.clave)

        usuario = self.manager.guardar(usuario)
        logger.info(f"✓ Usuario actualizado: {usuario_id}")
        return self._a_respuesta(usuario)

    def desactivar(self, usuario_id: int) -> None:
        """Baja lógica. Si el usuario no existe no hace nada."""
        usuario = self.manager.obtener_usuario(usuario_id)
        if usuario is None:
            logger.debug(f"Desactivación ignorada, usuario inexistente: {usuario_id}")
            return

        usuario.estado = Estado.DESACTIVADO.value
        self.manager.guardar(usuario)
        logger.info(f"✓ Usuario desactivado: {usuario_id}")

    def buscar_por_username(self, username: str):
        """Entidad Usuario (con hash) para el flujo de login"""
        return self.manager.obtener_usuario_por_username(username)

    def registrar_ingreso(self, usuario: Usuario) -> None:
        """Actualiza solo la fecha de último ingreso"""
        usuario.fecha_ultimo_ingreso = ahora()
        self.manager.guardar(usuario)

    @staticmethod
    def _a_respuesta(usuario: Usuario) -> UsuarioResponse:
        return UsuarioResponse.model_validate(usuario)
