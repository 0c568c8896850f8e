from typing import Any, Dict
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from compensacao.db import get_db
from compensacao.exceptions import RegistroNaoEncontrado
from compensacao.repositories import ModalidadesRepository
from compensacao.schemas import ModalidadePayload

router = APIRouter(
    prefix="/api/v2/modalidades",
    tags=["modalidades"],
)


@router.get("")
async def list_modalidades(db: Session = Depends(get_db)) -> Dict[str, Any]:
    repo = ModalidadesRepository(db)
    return {"data": [repo.as_dict(m) for m in repo.list()]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_modalidade(payload: ModalidadePayload, db: Session = Depends(get_db)) -> Dict[str, Any]:
    # tipo_id inexistente falha na FK do banco e vira 400
    modalidade_id = ModalidadesRepository(db).create(payload)
    return {"message": "Modalidade criada com sucesso", "id": modalidade_id}


@router.put("/{modalidade_id}")
async def update_modalidade(
    modalidade_id: int,
    payload: ModalidadePayload,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    if not ModalidadesRepository(db).update(modalidade_id, payload):
        raise RegistroNaoEncontrado("Modalidade não encontrada")
    return {"message": "Modalidade atualizada com sucesso"}


@router.delete("/{modalidade_id}")
async def delete_modalidade(modalidade_id: int, db: Session = Depends(get_db)) -> Dict[str, Any]:
    if not ModalidadesRepository(db).delete(modalidade_id):
        raise RegistroNaoEncontrado("Modalidade não encontrada")
    return {"message": "Modalidade deletada com sucesso"}
