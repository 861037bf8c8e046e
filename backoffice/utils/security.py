"""
Hash de claves
"""

from passlib.context import CryptContext

_pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    """Genera el hash de una clave en texto plano"""
    if not password:
        raise ValueError("La clave no puede estar vacía")
    return _pwd.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Comprueba una clave contra su hash. Nunca lanza."""
    if not password or not password_hash:
        return False
    try:
        return _pwd.verify(password, password_hash)
    except (ValueError, TypeError):
        return False
