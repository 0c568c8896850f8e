from .base import BaseSchema
from .normas import NormaPayload, NormaTipoPayload
from .tipos import TipoPayload
from .modalidades import ModalidadePayload

__all__ = ["BaseSchema", "NormaPayload", "NormaTipoPayload", "TipoPayload", "ModalidadePayload"]
