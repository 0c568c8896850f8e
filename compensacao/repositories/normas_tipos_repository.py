from compensacao.models import NormaTipoCompensacao
from compensacao.repositories.base import BaseRepository


class NormasTiposRepository(BaseRepository[NormaTipoCompensacao]):
    """Associações norma ↔ tipo. Não verifica duplicidade."""
    model = NormaTipoCompensacao
    campos = ("tipo_id", "norma_id")
