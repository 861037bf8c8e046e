"""
Categoria Routes
"""

from fastapi import APIRouter, Depends
from typing import List

from backoffice.api.dependencies import get_categoria_service
from backoffice.api.schemas.categoria import CategoriaRequest, CategoriaResponse
from backoffice.api.schemas.comun import MensajeResponse
from backoffice.services import CategoriaService

router = APIRouter()


@router.get("", response_model=List[CategoriaResponse])
def listar_categorias(service: CategoriaService = Depends(get_categoria_service)):
    """List active categories."""
    return service.listar_activos()


@router.post("", response_model=CategoriaResponse)
def crear_categoria(
    categoria_data: CategoriaRequest,
    service: CategoriaService = Depends(get_categoria_service)
):
    """Create a new category."""
    return service.crear(categoria_data)


@router.put("/{categoria_id}", response_model=CategoriaResponse)
def actualizar_categoria(
    categoria_id: int,
    categoria_data: CategoriaRequest,
    service: CategoriaService = Depends(get_categoria_service)
):
    """Rename a category. Always reactivates it."""
    return service.actualizar(categoria_id, categoria_data)


@router.put("/{categoria_id}/deactivate", response_model=MensajeResponse)
def desactivar_categoria(
    categoria_id: int,
    service: CategoriaService = Depends(get_categoria_service)
):
    """Soft-delete a category. Its products are left untouched."""
    service.desactivar(categoria_id)
    return MensajeResponse(message="Categoría desactivada")
