from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from compensacao.db import get_db
from compensacao.exceptions import RegistroNaoEncontrado
from compensacao.repositories import NormasRepository, NormasTiposRepository
from compensacao.schemas import NormaPayload, NormaTipoPayload

router = APIRouter(
    prefix="/api/v2",
    tags=["normas"],
)


@router.get("/normas")
async def list_normas(
    q: Optional[str] = None,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Lista normas ordenadas por nome; ``q`` filtra por nome, link ou preâmbulo."""
    repo = NormasRepository(db)
    return {"data": [repo.as_dict(n) for n in repo.search(q)]}


@router.post("/normas", status_code=status.HTTP_201_CREATED)
async def create_norma(
    payload: NormaPayload,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    norma_id = NormasRepository(db).create(payload)
    return {"message": "Norma criada com sucesso", "id": norma_id}


@router.put("/normas/{norma_id}")
async def update_norma(
    norma_id: int,
    payload: NormaPayload,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    if not NormasRepository(db).update(norma_id, payload):
        raise RegistroNaoEncontrado("Norma não encontrada")
    return {"message": "Norma atualizada com sucesso"}


@router.delete("/normas/{norma_id}")
async def delete_norma(
    norma_id: int,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    if not NormasRepository(db).delete(norma_id):
        raise RegistroNaoEncontrado("Norma não encontrada")
    return {"message": "Norma deletada com sucesso"}


@router.post("/normas-tipos-compensacao", status_code=status.HTTP_201_CREATED)
async def create_norma_tipo(
    payload: NormaTipoPayload,
    db: Session = Depends(get_db),
) -> Dict[str, Any]:
    """Associa uma norma a um tipo de compensação (sem checagem de duplicidade)."""
    NormasTiposRepository(db).create(payload)
    return {"message": "Associação criada com sucesso"}
