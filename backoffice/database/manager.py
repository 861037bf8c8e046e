"""
Database Manager - CRUD operations para el Backoffice
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import func
from typing import List, Optional
import logging

from backoffice.exceptions import DatosDuplicados, ERROR_DATOS_DUPLICADOS
from backoffice.models import Usuario, Categoria, Producto, Estado

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Gestor de base de datos del Backoffice.

    Único punto donde se hacen consultas y commits. Los servicios deciden
    qué se escribe; el manager solo persiste.
    """

    def __init__(self, session: Session):
        self.session = session

    # =====================================================
    # ESCRITURA
    # =====================================================

    def guardar(self, entidad):
        """
        Persiste una entidad nueva o modificada.

        Args:
            entidad: Usuario, Categoria o Producto

        Returns:
            La entidad refrescada desde la base de datos

        Raises:
            DatosDuplicados: Si se viola una restricción de unicidad
        """
        self.session.add(entidad)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Violación de integridad al guardar {entidad!r}: {e.orig}")
            raise DatosDuplicados(ERROR_DATOS_DUPLICADOS) from e

        self.session.refresh(entidad)
        return entidad

    def _listar_activos(self, modelo) -> list:
        return (
            self.session.query(modelo)
            .filter(func.upper(modelo.estado) == Estado.ACTIVO.value)
            .order_by(modelo.id)
            .all()
        )

    # =====================================================
    # USUARIOS
    # =====================================================

    def obtener_usuario(self, usuario_id: int) -> Optional[Usuario]:
        """Obtiene un usuario por ID"""
        return self.session.get(Usuario, usuario_id)

    def obtener_usuario_por_username(self, username: str) -> Optional[Usuario]:
        """Obtiene un usuario por username"""
        return self.session.query(Usuario).filter_by(username=username).first()

    def listar_usuarios_activos(self) -> List[Usuario]:
        """Lista usuarios con estado ACTIVO"""
        return self._listar_activos(Usuario)

    # =====================================================
    # CATEGORÍAS
    # =====================================================

    def obtener_categoria(self, categoria_id: int) -> Optional[Categoria]:
        """Obtiene una categoría por ID"""
        return self.session.get(Categoria, categoria_id)

    def listar_categorias_activas(self) -> List[Categoria]:
        """Lista categorías con estado ACTIVO"""
        return self._listar_activos(Categoria)

    # =====================================================
    # PRODUCTOS
    # =====================================================

    def obtener_producto(self, producto_id: int) -> Optional[Producto]:
        """Obtiene un producto por ID"""
        return self.session.get(Producto, producto_id)

    def listar_productos_activos(self) -> List[Producto]:
        """Lista productos con estado ACTIVO"""
        return self._listar_activos(Producto)
