"""
Fixtures compartidas.

La configuración se lee al importar backoffice.config, así que el entorno
se prepara antes de cualquier import del paquete.
"""

import os
import tempfile
from pathlib import Path

os.environ.setdefault("JWT_SECRET", "test-secret-no-usar-en-produccion")
os.environ.setdefault("JWT_EXPIRATION_MINUTES", "60")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")
os.environ.setdefault(
    "ENV_VAR_LOGPATH", str(Path(tempfile.gettempdir()) / "backoffice-test-requests.log")
)

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from backoffice.api.dependencies import get_token_service
from backoffice.api.schemas.usuario import UsuarioCreate
from backoffice.database.connection import get_db
from backoffice.main import app
from backoffice.models import Base, NivelAcceso
from backoffice.services import UsuarioService


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def tokens():
    return get_token_service()


@pytest.fixture
def admin_headers(tokens):
    return {"Authorization": f"Bearer {tokens.emitir('admin', 'ADMIN')}"}


@pytest.fixture
def user_headers(tokens):
    return {"Authorization": f"Bearer {tokens.emitir('operador', 'USER')}"}


@pytest.fixture
def crear_usuario(session_factory):
    """Crea un usuario ACTIVO directamente con el servicio"""
    def _crear(username="ana", clave="Secreta123", nivel=NivelAcceso.USER, nombre="Ana Pérez"):
        with session_factory() as session:
            return UsuarioService(session).crear(UsuarioCreate(
                nombre_completo=nombre,
                username=username,
                clave=clave,
                nivel_acceso=nivel,
            ))
    return _crear
