"""
Política de autorización - Tabla estática ruta → roles
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple

from backoffice.models import NivelAcceso
from backoffice.services.token_service import Identidad


class Decision(str, Enum):
    """Resultado de evaluar una petición contra la política"""
    PERMITIDO = "PERMITIDO"
    NO_AUTENTICADO = "NO_AUTENTICADO"
    ROL_INSUFICIENTE = "ROL_INSUFICIENTE"


@dataclass(frozen=True)
class Regla:
    """
    Regla de acceso para un conjunto de prefijos.

    roles=None significa ruta pública; un conjunto vacío significa
    "cualquier usuario autenticado".
    """
    prefijos: Tuple[str, ...]
    roles: Optional[FrozenSet[str]]

    def aplica(self, path: str) -> bool:
        return any(path == p or path.startswith(p + "/") for p in self.prefijos)


PUBLICO = None
AUTENTICADO = frozenset()

# El orden importa: gana la primera regla que aplica
REGLAS = (
    Regla(("/auth", "/docs", "/redoc", "/openapi.json"), PUBLICO),
    Regla(("/users",), frozenset({NivelAcceso.ADMIN.value})),
    Regla(("/categories", "/products"), frozenset({NivelAcceso.ADMIN.value, NivelAcceso.USER.value})),
)
REGLA_POR_DEFECTO = Regla((), AUTENTICADO)


class PoliticaAutorizacion:
    """Decide si una identidad (o su ausencia) puede acceder a una ruta"""

    def __init__(self, reglas=REGLAS, por_defecto: Regla = REGLA_POR_DEFECTO):
        self.reglas = reglas
        self.por_defecto = por_defecto

    def regla_para(self, path: str) -> Regla:
        for regla in self.reglas:
            if regla.aplica(path):
                return regla
        return self.por_defecto

    def evaluar(self, path: str, identidad: Optional[Identidad]) -> Decision:
        regla = self.regla_para(path)

        if regla.roles is PUBLICO:
            return Decision.PERMITIDO
        if identidad is None:
            return Decision.NO_AUTENTICADO
        if regla.roles and identidad.rol not in regla.roles:
            return Decision.ROL_INSUFICIENTE
        return Decision.PERMITIDO
