"""Tests for the route → role authorization table."""

import pytest

from backoffice.api.middleware.autenticacion import extraer_token
from backoffice.api.politica import Decision, PoliticaAutorizacion
from backoffice.services.token_service import Identidad

ADMIN = Identidad("admin", "ADMIN")
USER = Identidad("operador", "USER")
OTRO = Identidad("auditor", "AUDITOR")


@pytest.fixture
def politica():
    return PoliticaAutorizacion()


@pytest.mark.parametrize("path", ["/auth/login", "/docs", "/docs/oauth2-redirect", "/redoc", "/openapi.json"])
@pytest.mark.parametrize("identidad", [None, USER])
def test_rutas_publicas(politica, path, identidad):
    assert politica.evaluar(path, identidad) is Decision.PERMITIDO


@pytest.mark.parametrize("path", ["/users", "/users/3", "/users/3/deactivate"])
def test_usuarios_solo_admin(politica, path):
    assert politica.evaluar(path, ADMIN) is Decision.PERMITIDO
    assert politica.evaluar(path, USER) is Decision.ROL_INSUFICIENTE
    assert politica.evaluar(path, None) is Decision.NO_AUTENTICADO


@pytest.mark.parametrize("path", ["/categories", "/categories/1", "/products", "/products/9/deactivate"])
def test_catalogo_admin_o_user(politica, path):
    assert politica.evaluar(path, ADMIN) is Decision.PERMITIDO
    assert politica.evaluar(path, USER) is Decision.PERMITIDO
    assert politica.evaluar(path, OTRO) is Decision.ROL_INSUFICIENTE
    assert politica.evaluar(path, None) is Decision.NO_AUTENTICADO


@pytest.mark.parametrize("path", ["/", "/health", "/usersx", "/authz"])
def test_resto_requiere_cualquier_identidad(politica, path):
    assert politica.evaluar(path, OTRO) is Decision.PERMITIDO
    assert politica.evaluar(path, None) is Decision.NO_AUTENTICADO


@pytest.mark.parametrize("cabecera, esperado", [
    ("Bearer abc.def.ghi", "abc.def.ghi"),
    ("Bearer ", None),
    ("bearer abc", None),
    ("Token abc", None),
    ("", None),
    (None, None),
])
def test_extraer_token(cabecera, esperado):
    assert extraer_token(cabecera) == esperado
