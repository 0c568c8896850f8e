"""SQLAlchemy model for the 'tipos_compensacao' table."""

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from compensacao.db import Base


class TipoCompensacao(Base):
    """
    Representa um tipo (categoria) de compensação ambiental, ex.: SNUC, Minerária.
    """
    __tablename__ = "tipos_compensacao"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(Text, nullable=True)

    # Relacionamentos
    modalidades = relationship("Modalidade", back_populates="tipo", passive_deletes=True)

    def __repr__(self):
        return f"<TipoCompensacao(id={self.id}, nome='{self.nome}')>"
