"""SQLAlchemy model for the 'modalidades' table."""

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from compensacao.db import Base


class Modalidade(Base):
    """
    Representa uma modalidade (forma de cumprimento) de um tipo de compensação.

    Todos os campos descritivos são texto livre; só ``tipo_id`` é chave estrangeira.
    """
    __tablename__ = "modalidades"

    id = Column(Integer, primary_key=True, autoincrement=True)
    tipo_id = Column(Integer, ForeignKey("tipos_compensacao.id"), nullable=True)
    nome = Column(Text, nullable=True)
    proporcao = Column(Text, nullable=True)
    forma = Column(Text, nullable=True)
    especificidades = Column(Text, nullable=True)
    vantagens = Column(Text, nullable=True)
    desvantagens = Column(Text, nullable=True)
    observacao = Column(Text, nullable=True)
    documentos = Column(Text, nullable=True)

    # Relacionamentos
    tipo = relationship("TipoCompensacao", back_populates="modalidades")

    def __repr__(self):
        return f"<Modalidade(id={self.id}, tipo_id={self.tipo_id}, nome='{self.nome}')>"
