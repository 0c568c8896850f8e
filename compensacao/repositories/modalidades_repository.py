from compensacao.models import Modalidade
from compensacao.repositories.base import BaseRepository


class ModalidadesRepository(BaseRepository[Modalidade]):
    """Repositório de modalidades; a FK ``tipo_id`` é validada pelo próprio banco."""
    model = Modalidade
    campos = (
        "tipo_id",
        "nome",
        "proporcao",
        "forma",
        "especificidades",
        "vantagens",
        "desvantagens",
        "observacao",
        "documentos",
    )
