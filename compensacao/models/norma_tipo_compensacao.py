"""SQLAlchemy model for the 'normas_tipos_compensacao' table."""

from sqlalchemy import Column, ForeignKey, Index, Integer

from compensacao.db import Base


class NormaTipoCompensacao(Base):
    """
    Associação N:N entre normas e tipos de compensação.

    Sem restrição de unicidade: o mesmo par pode ser gravado mais de uma vez.
    """
    __tablename__ = "normas_tipos_compensacao"
    __table_args__ = (
        Index("idx_ntc_tipo", "tipo_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo_id = Column(Integer, ForeignKey("tipos_compensacao.id"), nullable=True)
    norma_id = Column(Integer, ForeignKey("normas.id"), nullable=True)

    def __repr__(self):
        return f"<NormaTipoCompensacao(tipo_id={self.tipo_id}, norma_id={self.norma_id})>"
