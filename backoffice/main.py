"""
Backoffice - FastAPI Main Application
"""

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from backoffice.config import settings
from backoffice.exceptions import BackofficeError, PREFIJO_ERROR

# Configurar logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT,
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.LOGS_DIR / "backoffice.log")
    ]
)

logger = logging.getLogger(__name__)

from backoffice.api.dependencies import get_identidad, get_token_service
from backoffice.api.middleware import (
    AutenticacionMiddleware,
    AutorizacionMiddleware,
    RequestLogMiddleware,
)
from backoffice.api.middleware.request_log import validar_ruta_log
from backoffice.api.schemas.comun import ErrorResponse
from backoffice.services import Identidad

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description="Backoffice de usuarios, categorías y productos con autenticación JWT",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Middlewares: el último añadido es el más externo.
# Orden de ejecución: CORS → log de peticiones → autenticación → autorización
app.add_middleware(AutorizacionMiddleware)
app.add_middleware(AutenticacionMiddleware, tokens=get_token_service())
app.add_middleware(RequestLogMiddleware, log_path=settings.ENV_VAR_LOGPATH)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =====================================================
# EVENTOS DE STARTUP/SHUTDOWN
# =====================================================

@app.on_event("startup")
async def startup_event():
    """Inicialización al arrancar"""
    logger.info("=" * 60)
    logger.info(f"🚀 {settings.API_TITLE} v{settings.API_VERSION}")
    logger.info(f"   Entorno: {settings.ENV}")
    logger.info(f"   Puerto: {settings.API_PORT}")
    logger.info(f"   Database: {settings.DATABASE_URL.split('@')[1] if '@' in settings.DATABASE_URL else settings.DATABASE_URL}")
    logger.info("=" * 60)

    # Sin ruta de log de peticiones no se arranca
    validar_ruta_log(settings.ENV_VAR_LOGPATH)

    # Verificar conexión a base de datos
    from backoffice.database.connection import engine, create_tables
    from sqlalchemy import text
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("✓ Conexión a base de datos OK")
    except Exception as e:
        logger.error(f"❌ Error conectando a base de datos: {e}")
        raise

    create_tables()


@app.on_event("shutdown")
async def shutdown_event():
    """Limpieza al cerrar"""
    logger.info("👋 Cerrando Backoffice...")


# =====================================================
# RUTAS BÁSICAS
# =====================================================

@app.get("/")
async def root(identidad: Optional[Identidad] = Depends(get_identidad)):
    """Endpoint raíz (requiere autenticación)"""
    return {
        "app": settings.API_TITLE,
        "version": settings.API_VERSION,
        "username": identidad.username if identidad else None,
        "role": identidad.rol if identidad else None,
        "docs": "/docs",
    }


# =====================================================
# INCLUIR ROUTERS
# =====================================================

from backoffice.api.routes import (
    auth_router,
    usuarios_router,
    categorias_router,
    productos_router
)

ERRORES = {400: {"model": ErrorResponse}}

app.include_router(auth_router, prefix="/auth", tags=["Autenticación"], responses=ERRORES)
app.include_router(usuarios_router, prefix="/users", tags=["Usuarios"], responses=ERRORES)
app.include_router(categorias_router, prefix="/categories", tags=["Categorías"], responses=ERRORES)
app.include_router(productos_router, prefix="/products", tags=["Productos"], responses=ERRORES)


# =====================================================
# MANEJO DE ERRORES
# =====================================================

def _respuesta_error(mensaje: str) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": PREFIJO_ERROR + mensaje})


@app.exception_handler(BackofficeError)
async def backoffice_exception_handler(request: Request, exc: BackofficeError):
    """Errores de dominio lanzados por los servicios"""
    logger.warning(f"{type(exc).__name__} en {request.method} {request.url.path}: {exc}")
    return _respuesta_error(str(exc))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Cuerpo o parámetros inválidos"""
    detalle = "; ".join(
        f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )
    return _respuesta_error(detalle)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Manejador global de excepciones"""
    logger.error(f"Error no manejado: {exc}", exc_info=True)
    return _respuesta_error(str(exc))


# =====================================================
# MAIN (para ejecutar directamente)
# =====================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "backoffice.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENV == "development",
        log_level=settings.LOG_LEVEL.lower()
    )
