"""Create a backoffice user directly in the database.

Usage:
  python scripts/create_user.py --username admin --password '...' --nombre 'Administrador' --role ADMIN

Intended to bootstrap the first ADMIN, since /users requires one.
"""

import argparse
import logging

from backoffice.api.schemas.usuario import UsuarioCreate
from backoffice.config import settings
from backoffice.database.connection import SessionLocal, create_tables
from backoffice.exceptions import BackofficeError
from backoffice.models import NivelAcceso
from backoffice.services import UsuarioService

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format=settings.LOG_FORMAT,
    handlers=[
        logging.StreamHandler(),
        logging.FileHandler(settings.LOGS_DIR / "create_user.log")
    ]
)

logger = logging.getLogger("create_user")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--username", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--nombre", required=True, help="Nombre completo")
    ap.add_argument("--role", choices=[n.value for n in NivelAcceso], default=NivelAcceso.USER.value)
    args = ap.parse_args()

    create_tables()

    db = SessionLocal()
    try:
        usuario = UsuarioService(db).crear(UsuarioCreate(
            nombre_completo=args.nombre,
            username=args.username,
            clave=args.password,
            nivel_acceso=NivelAcceso(args.role),
        ))
    except BackofficeError as e:
        logger.error(f"No se pudo crear el usuario {args.username}: {e}")
        raise SystemExit(1)
    finally:
        db.close()

    logger.info(f"Usuario creado: {usuario.username} ({usuario.nivel_acceso})")


if __name__ == "__main__":
    main()
