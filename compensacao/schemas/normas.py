from typing import Optional

from compensacao.schemas.base import BaseSchema


class NormaPayload(BaseSchema):
    """Campos editáveis de uma norma (criação e substituição completa)."""
    nome: Optional[str] = None
    link: Optional[str] = None
    preambulo: Optional[str] = None


class NormaTipoPayload(BaseSchema):
    """Associação entre uma norma e um tipo de compensação."""
    tipo_id: Optional[int] = None
    norma_id: Optional[int] = None
