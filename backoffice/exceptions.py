"""
Excepciones de dominio del Backoffice.

Los servicios las lanzan y un único manejador registrado en la aplicación
las convierte en la respuesta HTTP.
"""

# Mensajes
PREFIJO_ERROR = "Ocurrió un error inesperado: "
ERROR_USUARIO_INVALIDO = "Usuario inválido"
ERROR_CREDENCIALES_INVALIDAS = "Credenciales inválidas"
ERROR_USUARIO_NO_ENCONTRADO = "Usuario no encontrado para actualizar, ID = "
ERROR_CATEGORIA_NO_ENCONTRADA = "Categoría no encontrada con ID: "
ERROR_PRODUCTO_NO_ENCONTRADO = "Producto no encontrado con ID: "
ERROR_CATEGORIA_INACTIVA = "Operación no permitida: La categoría está desactivada."
ERROR_LOGPATH_INVALIDO = "La variable de entorno ENV_VAR_LOGPATH no está definida"
ERROR_DATOS_DUPLICADOS = "Ya existe un registro con el mismo valor único"


class BackofficeError(Exception):
    """Base de todos los errores de dominio"""


class ConfiguracionInvalida(BackofficeError):
    """Falta configuración obligatoria"""


class TokenInvalido(BackofficeError):
    """Token mal formado, con firma incorrecta o expirado"""


class LoginError(BackofficeError):
    """Fallo en el inicio de sesión"""


class UsuarioInvalido(LoginError):
    """El username no existe"""


class CredencialesInvalidas(LoginError):
    """Clave incorrecta o usuario desactivado"""


class NoEncontrado(BackofficeError):
    """El registro solicitado no existe"""


class CategoriaNoEncontrada(NoEncontrado):
    """La categoría referenciada no existe"""


class ProductoError(BackofficeError):
    """Regla de negocio de productos violada"""


class CategoriaInactiva(ProductoError):
    """La categoría referenciada está desactivada"""


class DatosDuplicados(BackofficeError):
    """Violación de unicidad en la base de datos"""
