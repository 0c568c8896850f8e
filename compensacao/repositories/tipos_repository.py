from compensacao.models import TipoCompensacao
from compensacao.repositories.base import BaseRepository


class TiposRepository(BaseRepository[TipoCompensacao]):
    model = TipoCompensacao
    campos = ("nome",)
