"""
Consulta às camadas WFS da IDE SISEMA (GeoServer do governo de Minas Gerais).

Só duas camadas são expostas, cada uma com seu typename fixo. O chamador pode
refinar a consulta com ``bbox`` e ``cql_filter``; esses valores seguem sem
alteração para o GeoServer, mas apenas como parâmetros nomeados montados pelo
httpx, nunca concatenados na URL. Não há cache nem novas tentativas.
"""
from dataclasses import dataclass
from typing import Dict, Optional
import logging

import httpx

from compensacao.config import Settings, get_settings
from compensacao.exceptions import UpstreamError

logger = logging.getLogger("uvicorn")


@dataclass(frozen=True)
class CamadaWfs:
    typename: str
    descricao: str
    mensagem_erro: str


CAMADAS: Dict[str, CamadaWfs] = {
    "unidades-conservacao": CamadaWfs(
        typename="ide_2010_mg_unidades_conservacao_estaduais_pol",
        descricao="UCs",
        mensagem_erro="Falha ao obter dados de UCs do SISEMA.",
    ),
    "imoveis-compensacao": CamadaWfs(
        typename="ide_2104_mg_imoveis_disponiveis_compensacao_ambiental_pto",
        descricao="Imóveis",
        mensagem_erro="Falha ao obter dados de Imóveis do SISEMA.",
    ),
}

# Parâmetros do chamador repassados ao GeoServer; qualquer outro é ignorado
FILTROS_PERMITIDOS = ("bbox", "cql_filter")


class SisemaWfsService:
    """Proxy para requisições GetFeature (WFS 2.0.0, saída GeoJSON)."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = settings or get_settings()
        self.base_url = settings.wfs_base_url
        self.timeout = httpx.Timeout(settings.wfs_timeout)
        self._transport = transport

    def build_params(self, camada: CamadaWfs, **filtros: Optional[str]) -> Dict[str, str]:
        params = {
            "service": "WFS",
            "version": "2.0.0",
            "request": "GetFeature",
            "typename": camada.typename,
            "outputFormat": "application/json",
        }
        for nome in FILTROS_PERMITIDOS:
            valor = filtros.get(nome)
            if valor:
                params[nome] = valor
        return params

    async def get_feature(
        self,
        camada: CamadaWfs,
        bbox: Optional[str] = None,
        cql_filter: Optional[str] = None,
    ) -> httpx.Response:
        """
        Executa o GetFeature e devolve a resposta do GeoServer sem alterações.

        Raises:
            UpstreamError: erro de rede, timeout ou status diferente de 2xx
        """
        params = self.build_params(camada, bbox=bbox, cql_filter=cql_filter)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                request = client.build_request("GET", self.base_url, params=params)
                logger.info("Consultando WFS (%s): %s", camada.descricao, request.url)
                response = await client.send(request)
                response.raise_for_status()
                return response
        except httpx.HTTPError as e:
            logger.error("Erro ao consultar %s do SISEMA: %s", camada.descricao, str(e))
            raise UpstreamError(camada.mensagem_erro) from e

    async def check_ready(self) -> bool:
        """Verifica se o GeoServer responde (usado pelo /health)."""
        try:
            async with httpx.AsyncClient(timeout=3, transport=self._transport) as client:
                resp = await client.get(
                    self.base_url,
                    params={"service": "WFS", "version": "2.0.0", "request": "GetCapabilities"},
                )
                return resp.status_code == 200
        except Exception:
            return False
