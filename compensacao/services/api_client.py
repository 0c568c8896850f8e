from typing import Any, Dict, List, Optional

import httpx


class CompensacaoApiClient:
    """
    Cliente HTTP da API ``/api/v2`` usado pelo painel.

    ``base_url`` já inclui o prefixo da API (ex.: ``http://localhost:8000/api/v2``).
    Quando nenhuma URL externa é configurada, o painel usa um ``httpx.ASGITransport``
    apontando para a própria aplicação.
    """

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._transport = transport
        self.timeout = timeout

    async def fetch(self, endpoint: str) -> List[Dict[str, Any]]:
        """
        GET ``{base_url}/{endpoint}`` e devolve o campo ``data`` do envelope.

        Raises:
            httpx.HTTPError: falha de rede ou status diferente de 2xx
            ValueError: corpo que não é JSON
            KeyError: envelope sem ``data``
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(f"{self.base_url}/{endpoint}")
            response.raise_for_status()
            return response.json()["data"]
