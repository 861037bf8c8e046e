"""
Categoria Service - Lógica de negocio para categorías
"""

from sqlalchemy.orm import Session
from typing import List
import logging

from backoffice.api.schemas.categoria import CategoriaRequest, CategoriaResponse
from backoffice.database.manager import DatabaseManager
from backoffice.exceptions import CategoriaNoEncontrada, ERROR_CATEGORIA_NO_ENCONTRADA
from backoffice.models import Categoria, Estado, ahora

logger = logging.getLogger(__name__)


class CategoriaService:
    """Servicio para gestionar categorías"""

    def __init__(self, db: Session):
        self.db = db
        self.manager = DatabaseManager(db)

    def listar_activos(self) -> List[CategoriaResponse]:
        """Lista las categorías con estado ACTIVO"""
        return [self._a_respuesta(c) for c in self.manager.listar_categorias_activas()]

    def crear(self, request: CategoriaRequest) -> CategoriaResponse:
        """Crea una categoría ACTIVO"""
        momento = ahora()
        categoria = Categoria(
            nombre=request.nombre,
            estado=Estado.ACTIVO.value,
            fecha_creacion=momento,
            fecha_actualizacion=momento,
        )
        categoria = self.manager.guardar(categoria)

        logger.info(f"✓ Categoría creada: {categoria.id} - {categoria.nombre}")
        return self._a_respuesta(categoria)

    def actualizar(self, categoria_id: int, request: CategoriaRequest) -> CategoriaResponse:
        """
        Actualiza el nombre de una categoría y la reactiva.

        Raises:
            CategoriaNoEncontrada: Si la categoría no existe
        """
        categoria = self.manager.obtener_categoria(categoria_id)
        if categoria is None:
            raise CategoriaNoEncontrada(f"{ERROR_CATEGORIA_NO_ENCONTRADA}{categoria_id}")

        categoria.nombre = request.nombre
        categoria.estado = Estado.ACTIVO.value
        categoria.fecha_actualizacion = ahora()

        categoria = self.manager.guardar(categoria)
        logger.info(f"✓ Categoría actualizada: {categoria_id}")
        return self._a_respuesta(categoria)

    def desactivar(self, categoria_id: int) -> None:
        """
        Baja lógica de una categoría.

        Los productos existentes de la categoría no se modifican. Si la
        categoría no existe no hace nada.
        """
        categoria = self.manager.obtener_categoria(categoria_id)
        if categoria is None:
            return

        categoria.estado = Estado.DESACTIVADO.value
        categoria.fecha_actualizacion = ahora()
        self.manager.guardar(categoria)
        logger.info(f"✓ Categoría desactivada: {categoria_id}")

    @staticmethod
    def _a_respuesta(categoria: Categoria) -> CategoriaResponse:
        return CategoriaResponse.model_validate(categoria)
