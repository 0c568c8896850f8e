from pathlib import Path
from typing import Optional
import json

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from compensacao.config import Settings
from compensacao.dependencies import get_api_client, get_settings_dep
from compensacao.services import CompensacaoApiClient, PainelController
from compensacao.services.painel import SISCAL_ROTULO
from compensacao.utils.template_helpers import quebras_de_linha
from compensacao.version import read_version

router = APIRouter(tags=["paginas"])

# Templates
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))
# Expor versão e helpers globalmente para os templates
templates.env.globals["app_version"] = read_version()
templates.env.filters["quebras_de_linha"] = quebras_de_linha


@router.get("/", response_class=HTMLResponse)
async def painel(
    request: Request,
    tipo: Optional[str] = None,
    modalidade: Optional[str] = None,
    api: CompensacaoApiClient = Depends(get_api_client),
    settings: Settings = Depends(get_settings_dep),
) -> HTMLResponse:
    """Painel de consulta: tipo → modalidades → detalhes, com normas relacionadas."""
    controller = PainelController(api, siscal_url=settings.siscal_url)
    await controller.carregar()
    if tipo:
        await controller.selecionar_tipo(tipo)
        if modalidade:
            controller.selecionar_modalidade(modalidade)
    return templates.TemplateResponse(
        request,
        "index.html",
        {"painel": controller, "siscal_rotulo": SISCAL_ROTULO},
    )


@router.get("/env.js", include_in_schema=False)
async def env_js(settings: Settings = Depends(get_settings_dep)) -> Response:
    """Publica no navegador (window.env) os valores de ambiente antes dos scripts da página."""
    env = {
        "ENVIRONMENT": settings.environment,
        "API_URL": settings.api_url,
    }
    return Response(content=f"window.env = {json.dumps(env)};", media_type="application/javascript")

