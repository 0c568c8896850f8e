from .base import BaseRepository
from .normas_repository import NormasRepository
from .tipos_repository import TiposRepository
from .modalidades_repository import ModalidadesRepository
from .normas_tipos_repository import NormasTiposRepository

__all__ = [
    "BaseRepository",
    "NormasRepository",
    "TiposRepository",
    "ModalidadesRepository",
    "NormasTiposRepository",
]
