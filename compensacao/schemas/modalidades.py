from typing import Optional

from compensacao.schemas.base import BaseSchema


class ModalidadePayload(BaseSchema):
    """Campos editáveis de uma modalidade; nenhum é obrigatório."""
    tipo_id: Optional[int] = None
    nome: Optional[str] = None
    proporcao: Optional[str] = None
    forma: Optional[str] = None
    especificidades: Optional[str] = None
    vantagens: Optional[str] = None
    desvantagens: Optional[str] = None
    observacao: Optional[str] = None
    documentos: Optional[str] = None
