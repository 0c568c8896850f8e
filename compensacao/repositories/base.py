from typing import TypeVar, Generic, Type, List, Any, Dict, Tuple, Union
import logging

from sqlalchemy.orm import Session
from sqlalchemy import select, update, delete
from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel

from compensacao.exceptions import StoreError

logger = logging.getLogger("uvicorn")

# Tipo genérico para modelos SQLAlchemy
ModelType = TypeVar("ModelType")


def mensagem_do_driver(exc: SQLAlchemyError) -> str:
    """Mensagem original do driver, sem o SQL e os parâmetros anexados pelo SQLAlchemy."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class BaseRepository(Generic[ModelType]):
    """
    Repositório base com operações CRUD genéricas.

    Cada repositório concreto declara apenas o modelo e a lista ``campos`` de
    colunas editáveis; criação e atualização usam exatamente essa lista, de
    modo que campos ausentes no payload são gravados como nulos.

    Qualquer erro do banco é desfeito (rollback) e relançado como ``StoreError``.
    """

    model: Type[ModelType]
    campos: Tuple[str, ...] = ()

    def __init__(self, db: Session):
        """
        Inicializa o repositório base.

        Args:
            db: Sessão do banco de dados
        """
        self.db = db

    def _valores(self, obj_in: Union[BaseModel, Dict[str, Any], None]) -> Dict[str, Any]:
        obj_data = obj_in.model_dump() if hasattr(obj_in, "model_dump") else dict(obj_in or {})
        return {campo: obj_data.get(campo) for campo in self.campos}

    def _executar(self, operacao):
        try:
            return operacao()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("Erro no banco (%s): %s", self.model.__tablename__, mensagem_do_driver(e))
            raise StoreError(mensagem_do_driver(e)) from e

    def as_dict(self, obj: ModelType) -> Dict[str, Any]:
        """Linha completa como dicionário (id + campos editáveis)."""
        return {"id": obj.id, **{campo: getattr(obj, campo) for campo in self.campos}}

    def list(self) -> List[ModelType]:
        """Leitura completa da tabela, sem paginação."""
        return self._executar(lambda: self.db.scalars(select(self.model)).all())

    def create(self, obj_in: Union[BaseModel, Dict[str, Any]]) -> int:
        """
        Cria um novo registro.

        Returns:
            ID gerado pelo banco
        """
        def _create():
            db_obj = self.model(**self._valores(obj_in))
            self.db.add(db_obj)
            self.db.commit()
            self.db.refresh(db_obj)
            return db_obj.id

        return self._executar(_create)

    def update(self, id: Any, obj_in: Union[BaseModel, Dict[str, Any]]) -> int:
        """
        Substitui todos os campos editáveis do registro.

        Returns:
            Número de linhas afetadas (0 se o id não existe)
        """
        def _update():
            result = self.db.execute(
                update(self.model).where(self.model.id == id).values(**self._valores(obj_in))
            )
            self.db.commit()
            return result.rowcount

        return self._executar(_update)

    def delete(self, id: Any) -> int:
        """
        Remove um registro.

        Returns:
            Número de linhas removidas (0 se o id não existe)
        """
        def _delete():
            result = self.db.execute(delete(self.model).where(self.model.id == id))
            self.db.commit()
            return result.rowcount

        return self._executar(_delete)

    def count(self) -> int:
        return self._executar(lambda: self.db.query(self.model).count())
