from typing import Optional

from compensacao.schemas.base import BaseSchema


class TipoPayload(BaseSchema):
    nome: Optional[str] = None
