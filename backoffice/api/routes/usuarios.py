"""
Usuario Routes (solo ADMIN)
"""

from fastapi import APIRouter, Depends
from typing import List

from backoffice.api.dependencies import get_usuario_service
from backoffice.api.schemas.comun import MensajeResponse
from backoffice.api.schemas.usuario import UsuarioCreate, UsuarioUpdate, UsuarioResponse
from backoffice.services import UsuarioService

router = APIRouter()


@router.get("", response_model=List[UsuarioResponse])
def listar_usuarios(service: UsuarioService = Depends(get_usuario_service)):
    """List active users."""
    return service.listar_activos()


@router.post("", response_model=UsuarioResponse)
def crear_usuario(
    usuario_data: UsuarioCreate,
    service: UsuarioService = Depends(get_usuario_service)
):
    """
    Create a new user.

    The password is stored hashed and never returned.
    """
    return service.crear(usuario_data)


@router.put("/{usuario_id}", response_model=UsuarioResponse)
def actualizar_usuario(
    usuario_id: int,
    usuario_data: UsuarioUpdate,
    service: UsuarioService = Depends(get_usuario_service)
):
    """
    Update a user. Always reactivates it.

    The password only changes when a non-empty one is sent.
    """
    return service.actualizar(usuario_id, usuario_data)


@router.put("/{usuario_id}/deactivate", response_model=MensajeResponse)
def desactivar_usuario(
    usuario_id: int,
    service: UsuarioService = Depends(get_usuario_service)
):
    """Soft-delete a user. Unknown IDs are ignored."""
    service.desactivar(usuario_id)
    return MensajeResponse(message="Usuario desactivado")
