"""SQLAlchemy model for the 'normas' table."""

from sqlalchemy import Column, Integer, Text

from compensacao.db import Base


class Norma(Base):
    """
    Representa uma norma (lei, decreto, resolução) sobre compensação ambiental.
    """
    __tablename__ = "normas"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(Text, nullable=True)
    link = Column(Text, nullable=True)
    preambulo = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Norma(id={self.id}, nome='{self.nome}')>"
