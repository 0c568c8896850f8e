from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from compensacao.db import get_db
from compensacao.exceptions import RegistroNaoEncontrado
from compensacao.repositories import NormasRepository, TiposRepository
from compensacao.schemas import TipoPayload

router = APIRouter(
    prefix="/api/v2/tipos",
    tags=["tipos"],
)


@router.get("")
async def list_tipos(db: Session = Depends(get_db)) -> Dict[str, Any]:
    repo = TiposRepository(db)
    return {"data": [repo.as_dict(t) for t in repo.list()]}


@router.get("/{tipo_id}/normas")
async def list_normas_do_tipo(tipo_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    """Normas associadas ao tipo; lista vazia não é erro."""
    repo = NormasRepository(db)
    return {"data": [repo.as_dict(n) for n in repo.list_by_tipo(tipo_id)]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tipo(payload: TipoPayload, db: Session = Depends(get_db)) -> Dict[str, Any]:
    tipo_id = TiposRepository(db).create(payload)
    return {"message": "Tipo de compensação criado com sucesso", "id": tipo_id}


@router.put("/{tipo_id}")
async def update_tipo(tipo_id: int, payload: TipoPayload, db: Session = Depends(get_db)) -> Dict[str, Any]:
    if not TiposRepository(db).update(tipo_id, payload):
        raise RegistroNaoEncontrado("Tipo não encontrado")
    return {"message": "Tipo atualizado com sucesso"}


@router.delete("/{tipo_id}")
async def delete_tipo(tipo_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    if not TiposRepository(db).delete(tipo_id):
        raise RegistroNaoEncontrado("Tipo não encontrado")
    return {"message": "Tipo deletado com sucesso"}
