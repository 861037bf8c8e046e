"""
Token Service - Emisión y verificación de tokens JWT
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import JWTError, jwt

from backoffice.exceptions import TokenInvalido

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identidad:
    """Identidad autenticada asociada a una petición"""
    username: str
    rol: str


class TokenService:
    """
    Crea y verifica tokens firmados (HMAC) con sujeto y rol.

    No guarda estado: un token es válido mientras su firma sea correcta y
    no haya expirado.
    """

    def __init__(self, secret: str, expiration_minutes: int, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("El secreto JWT no puede estar vacío")
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(minutes=expiration_minutes)

    def emitir(self, username: str, rol: str, ahora: Optional[datetime] = None) -> str:
        """
        Emite un token para el usuario.

        Args:
            username: Sujeto del token
            rol: Nivel de acceso (claim "role")
            ahora: Instante de emisión (por defecto, ahora en UTC)

        Returns:
            Token JWT compacto
        """
        emitido = ahora or datetime.now(timezone.utc)
        payload = {
            "sub": username,
            "role": rol,
            "iat": emitido,
            "exp": emitido + self.expiration,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verificar(self, token: str) -> Identidad:
        """
        Verifica firma y expiración de un token.

        Returns:
            Identidad con sujeto y rol

        Raises:
            TokenInvalido: Token mal formado, firma incorrecta o expirado
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise TokenInvalido(str(e)) from e

        username = payload.get("sub")
        rol = payload.get("role")
        if not username or not rol:
            raise TokenInvalido("El token no contiene sujeto o rol")

        return Identidad(username=username, rol=rol)
