"""
API Routes Package
"""

from .auth import router as auth_router
from .usuarios import router as usuarios_router
from .categorias import router as categorias_router
from .productos import router as productos_router
