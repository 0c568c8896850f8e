from .normas import router as normas_router
from .tipos import router as tipos_router
from .modalidades import router as modalidades_router
from .sisema import router as sisema_router
from .paginas import router as paginas_router

__all__ = ["normas_router", "tipos_router", "modalidades_router", "sisema_router", "paginas_router"]
