"""
Producto Routes
"""

from fastapi import APIRouter, Depends
from typing import List

from backoffice.api.dependencies import get_producto_service
from backoffice.api.schemas.comun import MensajeResponse
from backoffice.api.schemas.producto import ProductoRequest, ProductoResponse
from backoffice.services import ProductoService

router = APIRouter()


@router.get("", response_model=List[ProductoResponse])
def listar_productos(service: ProductoService = Depends(get_producto_service)):
    """List active products, with the category name."""
    return service.listar_activos()


@router.post("", response_model=ProductoResponse)
def crear_producto(
    producto_data: ProductoRequest,
    service: ProductoService = Depends(get_producto_service)
):
    """
    Create a new product.

    Args:
        producto_data: Product data; `categoria` is the category ID

    Returns:
        Created product; `categoria` is the category name
    """
    return service.crear(producto_data)


@router.put("/{producto_id}", response_model=ProductoResponse)
def actualizar_producto(
    producto_id: int,
    producto_data: ProductoRequest,
    service: ProductoService = Depends(get_producto_service)
):
    """Update a product. Always reactivates it; the category must be active."""
    return service.actualizar(producto_id, producto_data)


@router.put("/{producto_id}/deactivate", response_model=MensajeResponse)
def desactivar_producto(
    producto_id: int,
    service: ProductoService = Depends(get_producto_service)
):
    """Soft-delete a product."""
    service.desactivar(producto_id)
    return MensajeResponse(message="Producto desactivado")
