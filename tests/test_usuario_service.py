"""Tests for UsuarioService."""

from datetime import datetime

import pytest

from backoffice.api.schemas.usuario import UsuarioCreate, UsuarioUpdate
from backoffice.exceptions import DatosDuplicados, NoEncontrado
from backoffice.models import Estado, NivelAcceso, Usuario
from backoffice.services import UsuarioService
from backoffice.utils.security import verify_password


def _nuevo(username="ana", clave="Secreta123", nivel=NivelAcceso.USER):
    return UsuarioCreate(
        nombre_completo="Ana Pérez",
        username=username,
        clave=clave,
        nivel_acceso=nivel,
    )


@pytest.fixture
def service(db):
    return UsuarioService(db)


def test_crear_cifra_la_clave_y_no_la_devuelve(service, db):
    respuesta = service.crear(_nuevo())

    assert respuesta.estado == Estado.ACTIVO.value
    assert respuesta.nivel_acceso == "USER"
    assert respuesta.fecha_ultimo_ingreso is None
    assert "clave" not in respuesta.model_dump()

    guardado = db.get(Usuario, respuesta.id)
    assert guardado.clave != "Secreta123"
    assert verify_password("Secreta123", guardado.clave)


def test_crear_usa_el_hasher_inyectado(db):
    service = UsuarioService(db, hasher=lambda clave: f"hash:{clave}")
    respuesta = service.crear(_nuevo())
    assert db.get(Usuario, respuesta.id).clave == "hash:Secreta123"


def test_crear_username_duplicado(service):
    service.crear(_nuevo())
    with pytest.raises(DatosDuplicados):
        service.crear(_nuevo())


def test_listar_activos_filtra_por_estado(service, db):
    db.add_all([
        Usuario(nombre_completo="A", username="a", clave="x", nivel_acceso="USER", estado="ACTIVO"),
        Usuario(nombre_completo="B", username="b", clave="x", nivel_acceso="USER", estado="activo"),
        Usuario(nombre_completo="C", username="c", clave="x", nivel_acceso="USER", estado="DESACTIVADO"),
        Usuario(nombre_completo="D", username="d", clave="x", nivel_acceso="ADMIN", estado="BLOQUEADO"),
    ])
    db.commit()

    assert [u.username for u in service.listar_activos()] == ["a", "b"]


def test_actualizar_sin_clave_conserva_el_hash(service, db):
    creado = service.crear(_nuevo())
    hash_original = db.get(Usuario, creado.id).clave

    service.actualizar(creado.id, UsuarioUpdate(
        nombre_completo="Ana María Pérez",
        username="ana",
        nivel_acceso=NivelAcceso.ADMIN,
        clave="",
    ))

    guardado = db.get(Usuario, creado.id)
    assert guardado.clave == hash_original
    assert verify_password("Secreta123", guardado.clave)
    assert guardado.nombre_completo == "Ana María Pérez"
    assert guardado.nivel_acceso == "ADMIN"


def test_actualizar_con_clave_nueva(service, db):
    creado = service.crear(_nuevo())
    service.actualizar(creado.id, UsuarioUpdate(
        nombre_completo="Ana Pérez", username="ana", nivel_acceso=NivelAcceso.USER, clave="Nueva456",
    ))

    guardado = db.get(Usuario, creado.id)
    assert verify_password("Nueva456", guardado.clave)
    assert not verify_password("Secreta123", guardado.clave)


def test_actualizar_reactiva(service, db):
    creado = service.crear(_nuevo())
    service.desactivar(creado.id)

    respuesta = service.actualizar(creado.id, UsuarioUpdate(
        nombre_completo="Ana Pérez", username="ana", nivel_acceso=NivelAcceso.USER,
    ))
    assert respuesta.estado == Estado.ACTIVO.value


def test_actualizar_inexistente(service):
    with pytest.raises(NoEncontrado, match="Usuario no encontrado para actualizar, ID = 404"):
        service.actualizar(404, UsuarioUpdate(
            nombre_completo="X", username="x", nivel_acceso=NivelAcceso.USER,
        ))


def test_desactivar_es_idempotente(service, db):
    creado = service.crear(_nuevo())

    service.desactivar(creado.id)
    service.desactivar(creado.id)

    assert db.get(Usuario, creado.id).estado == Estado.DESACTIVADO.value
    assert service.listar_activos() == []


def test_desactivar_inexistente_no_hace_nada(service, db):
    creado = service.crear(_nuevo())
    assert service.desactivar(999) is None
    assert db.get(Usuario, creado.id).estado == Estado.ACTIVO.value


def test_registrar_ingreso_solo_toca_la_fecha(service, db):
    creado = service.crear(_nuevo())
    usuario = service.buscar_por_username("ana")
    hash_original = usuario.clave

    service.registrar_ingreso(usuario)

    guardado = db.get(Usuario, creado.id)
    assert isinstance(guardado.fecha_ultimo_ingreso, datetime)
    assert guardado.clave == hash_original
