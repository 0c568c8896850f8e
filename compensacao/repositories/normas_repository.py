from typing import Any, List, Optional

from sqlalchemy import func, or_, select

from compensacao.models import Norma, NormaTipoCompensacao
from compensacao.repositories.base import BaseRepository


class NormasRepository(BaseRepository[Norma]):
    """
    Repositório para operações com normas.

    Além do CRUD genérico, implementa a busca textual e a listagem por tipo
    de compensação (via tabela de associação).
    """
    model = Norma
    campos = ("nome", "link", "preambulo")

    def search(self, q: Optional[str] = None) -> List[Norma]:
        """
        Busca normas por termo, sem diferenciar maiúsculas/minúsculas.

        Args:
            q: Termo procurado como substring em nome, link ou preâmbulo.
               Vazio ou None retorna todas as normas.

        Returns:
            Normas ordenadas por nome (ordem da collation do banco)
        """
        stmt = select(self.model)
        if q:
            # % e _ digitados pelo usuário são literais, não curingas
            termo = q.lower()
            stmt = stmt.where(
                or_(
                    func.lower(self.model.nome).contains(termo, autoescape=True),
                    func.lower(self.model.link).contains(termo, autoescape=True),
                    func.lower(self.model.preambulo).contains(termo, autoescape=True),
                )
            )
        stmt = stmt.order_by(self.model.nome)
        return self._executar(lambda: self.db.scalars(stmt).all())

    def list_by_tipo(self, tipo_id: Any) -> List[Norma]:
        """Normas associadas a um tipo de compensação (uma linha por associação)."""
        stmt = (
            select(self.model)
            .join(NormaTipoCompensacao, NormaTipoCompensacao.norma_id == self.model.id)
            .where(NormaTipoCompensacao.tipo_id == tipo_id)
        )
        return self._executar(lambda: self.db.scalars(stmt).all())
