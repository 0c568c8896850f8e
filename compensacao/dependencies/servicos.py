import httpx
from fastapi import Request

from compensacao.config import Settings
from compensacao.services import CompensacaoApiClient, SisemaWfsService

API_PREFIX = "/api/v2"


def get_settings_dep(request: Request) -> Settings:
    """Settings capturadas por ``create_app`` na inicialização."""
    return request.app.state.settings


def get_sisema_service(request: Request) -> SisemaWfsService:
    return SisemaWfsService(request.app.state.settings)


def get_api_client(request: Request) -> CompensacaoApiClient:
    """
    Cliente da API para o painel.

    Usa a URL configurada para o ambiente (API_URL_DEV/API_URL_PROD) ou, se não
    houver, chama a própria aplicação em processo via ASGI.
    """
    settings: Settings = request.app.state.settings
    if settings.api_url:
        return CompensacaoApiClient(settings.api_url)
    return CompensacaoApiClient(
        f"http://painel.local{API_PREFIX}",
        transport=httpx.ASGITransport(app=request.app),
    )
