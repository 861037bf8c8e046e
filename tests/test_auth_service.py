"""Tests for the login flow."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from backoffice.api.schemas.usuario import UsuarioCreate
from backoffice.exceptions import CredencialesInvalidas, LoginError, UsuarioInvalido
from backoffice.models import NivelAcceso, Usuario
from backoffice.services import AuthService, TokenService, UsuarioService


@pytest.fixture
def tokens():
    return TokenService(secret="clave-de-prueba", expiration_minutes=30)


@pytest.fixture
def usuarios(db):
    return UsuarioService(db)


@pytest.fixture
def auth(usuarios, tokens):
    return AuthService(usuarios, tokens)


@pytest.fixture
def ana(usuarios):
    return usuarios.crear(UsuarioCreate(
        nombre_completo="Ana Pérez",
        username="ana",
        clave="Secreta123",
        nivel_acceso=NivelAcceso.ADMIN,
    ))


def test_login_correcto_emite_token_con_sujeto_y_rol(auth, tokens, ana):
    respuesta = auth.login("ana", "Secreta123")

    assert respuesta.username == "ana"
    assert respuesta.role == "ADMIN"
    identidad = tokens.verificar(respuesta.token)
    assert identidad.username == "ana"
    assert identidad.rol == "ADMIN"


def test_login_registra_ultimo_ingreso(auth, db, ana):
    assert db.get(Usuario, ana.id).fecha_ultimo_ingreso is None
    auth.login("ana", "Secreta123")
    assert db.get(Usuario, ana.id).fecha_ultimo_ingreso is not None


def test_login_usuario_inexistente(auth):
    with pytest.raises(UsuarioInvalido, match="Usuario inválido"):
        auth.login("nadie", "x")


def test_clave_incorrecta_y_usuario_desactivado_no_se_distinguen(auth, usuarios, ana):
    with pytest.raises(CredencialesInvalidas) as clave_mala:
        auth.login("ana", "otra-clave")

    usuarios.desactivar(ana.id)
    with pytest.raises(CredencialesInvalidas) as desactivado:
        auth.login("ana", "Secreta123")

    assert str(clave_mala.value) == str(desactivado.value) == "Credenciales inválidas"
    assert isinstance(clave_mala.value, LoginError)


def test_login_usa_el_verificador_inyectado(usuarios, tokens, ana):
    llamadas = []

    def verificador(clave, hash_guardado):
        llamadas.append(clave)
        return True

    respuesta = AuthService(usuarios, tokens, verificador=verificador).login("ana", "cualquiera")

    assert llamadas == ["cualquiera"]
    assert respuesta.username == "ana"


def test_fallo_al_registrar_ingreso_no_impide_el_login(auth, tokens, ana):
    with patch.object(UsuarioService, "registrar_ingreso", side_effect=SQLAlchemyError("sin conexión")):
        respuesta = auth.login("ana", "Secreta123")

    assert tokens.verificar(respuesta.token).username == "ana"
