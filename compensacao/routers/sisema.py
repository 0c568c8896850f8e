from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from compensacao.dependencies import get_sisema_service
from compensacao.services.sisema_service import CAMADAS, CamadaWfs, SisemaWfsService

router = APIRouter(
    prefix="/api/v2/sisema",
    tags=["sisema"],
)


async def _proxy(
    camada: CamadaWfs,
    service: SisemaWfsService,
    bbox: Optional[str],
    cql_filter: Optional[str],
) -> Response:
    upstream = await service.get_feature(camada, bbox=bbox, cql_filter=cql_filter)
    return Response(
        content=upstream.content,
        media_type=upstream.headers.get("content-type", "application/json"),
    )


@router.get("/unidades-conservacao")
async def unidades_conservacao(
    bbox: Optional[str] = None,
    cql_filter: Optional[str] = None,
    service: SisemaWfsService = Depends(get_sisema_service),
) -> Response:
    """Unidades de Conservação estaduais (polígonos), GeoJSON repassado do GeoServer."""
    return await _proxy(CAMADAS["unidades-conservacao"], service, bbox, cql_filter)


@router.get("/imoveis-compensacao")
async def imoveis_compensacao(
    bbox: Optional[str] = None,
    cql_filter: Optional[str] = None,
    service: SisemaWfsService = Depends(get_sisema_service),
) -> Response:
    """Imóveis disponíveis para compensação ambiental (pontos)."""
    return await _proxy(CAMADAS["imoveis-compensacao"], service, bbox, cql_filter)
