"""SQLAlchemy models for the application."""

from compensacao.db import Base

# Import all models here to ensure they are registered with SQLAlchemy
from .norma import Norma
from .tipo_compensacao import TipoCompensacao
from .modalidade import Modalidade
from .norma_tipo_compensacao import NormaTipoCompensacao

__all__ = ["Base", "Norma", "TipoCompensacao", "Modalidade", "NormaTipoCompensacao"]
