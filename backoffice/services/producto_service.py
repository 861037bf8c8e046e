"""
Producto Service - Lógica de negocio para productos
"""

from sqlalchemy.orm import Session
from typing import List
import logging

from backoffice.api.schemas.producto import ProductoRequest, ProductoResponse
from backoffice.database.manager import DatabaseManager
from backoffice.exceptions import (
    CategoriaInactiva,
    CategoriaNoEncontrada,
    NoEncontrado,
    ERROR_CATEGORIA_INACTIVA,
    ERROR_CATEGORIA_NO_ENCONTRADA,
    ERROR_PRODUCTO_NO_ENCONTRADO,
)
from backoffice.models import Categoria, Producto, Estado, ahora

logger = logging.getLogger(__name__)


class ProductoService:
    """
    Servicio para gestionar productos.

    Toda escritura valida que la categoría referenciada exista y esté
    ACTIVO en ese momento.
    """

    def __init__(self, db: Session):
        self.db = db
        self.manager = DatabaseManager(db)

    def listar_activos(self) -> List[ProductoResponse]:
        """Lista los productos con estado ACTIVO"""
        return [self._a_respuesta(p) for p in self.manager.listar_productos_activos()]

    def crear(self, request: ProductoRequest) -> ProductoResponse:
        """
        Crea un producto ACTIVO.

        Raises:
            CategoriaNoEncontrada: Si la categoría no existe
            CategoriaInactiva: Si la categoría está desactivada
        """
        categoria = self._categoria_valida(request.categoria)

        momento = ahora()
        producto = Producto(
            nombre=request.nombre,
            categoria=categoria,
            costo=request.costo,
            precio=request.precio,
            tags=request.tags,
            estado=Estado.ACTIVO.value,
            fecha_creacion=momento,
            fecha_actualizacion=momento,
        )
        producto = self.manager.guardar(producto)

        logger.info(f"✓ Producto creado: {producto.id} - {producto.nombre}")
        return self._a_respuesta(producto)

    def actualizar(self, producto_id: int, request: ProductoRequest) -> ProductoResponse:
        """
        Actualiza un producto y lo reactiva.

        Raises:
            NoEncontrado: Si el producto no existe
            CategoriaNoEncontrada: Si la categoría no existe
            CategoriaInactiva: Si la categoría está desactivada
        """
        producto = self.manager.obtener_producto(producto_id)
        if producto is None:
            raise NoEncontrado(f"{ERROR_PRODUCTO_NO_ENCONTRADO}{producto_id}")

        categoria = self._categoria_valida(request.categoria)

        producto.nombre = request.nombre
        producto.categoria = categoria
        producto.costo = request.costo
        producto.precio = request.precio
        producto.tags = request.tags
        producto.estado = Estado.ACTIVO.value
        producto.fecha_actualizacion = ahora()

        producto = self.manager.guardar(producto)
        logger.info(f"✓ Producto actualizado: {producto_id}")
        return self._a_respuesta(producto)

    def desactivar(self, producto_id: int) -> None:
        """Baja lógica. Si el producto no existe no hace nada."""
        producto = self.manager.obtener_producto(producto_id)
        if producto is None:
            return

        producto.estado = Estado.DESACTIVADO.value
        producto.fecha_actualizacion = ahora()
        self.manager.guardar(producto)
        logger.info(f"✓ Producto desactivado: {producto_id}")

    def _categoria_valida(self, categoria_id: int) -> Categoria:
        categoria = self.manager.obtener_categoria(categoria_id)
        if categoria is None:
            raise CategoriaNoEncontrada(f"{ERROR_CATEGORIA_NO_ENCONTRADA}{categoria_id}")

        if (categoria.estado or "").upper() != Estado.ACTIVO.value:
            raise CategoriaInactiva(ERROR_CATEGORIA_INACTIVA)

        return categoria

    @staticmethod
    def _a_respuesta(producto: Producto) -> ProductoResponse:
        return ProductoResponse(
            id=producto.id,
            nombre=producto.nombre,
            categoria=producto.categoria.nombre,
            costo=producto.costo,
            precio=producto.precio,
            tags=producto.tags,
            estado=producto.estado,
            fecha_creacion=producto.fecha_creacion,
            fecha_actualizacion=producto.fecha_actualizacion,
        )
