"""
Controlador do painel de consulta (página inicial).

Mantém, por carregamento de página, uma cópia somente leitura de tipos,
modalidades e normas obtida da API, e a partir dela aplica as seleções do
usuário: filtra modalidades em memória pelo tipo, busca as normas do tipo e
monta o painel de detalhes da modalidade escolhida.

A filtragem em memória pressupõe um volume pequeno de registros.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Tuple
import asyncio
import logging

import httpx

logger = logging.getLogger("uvicorn")

ERRO_CARREGAMENTO = "Erro ao carregar dados. Verifique o console."
NENHUMA_MODALIDADE = "Nenhuma modalidade encontrada para este tipo."
SISCAL_ROTULO = "Cálculo de Compensação"

# Botão do SISCAL só aparece para esta combinação de tipo e modalidade
SISCAL_TIPO = "SNUC"
SISCAL_MODALIDADE = "PAGAMENTO"

# (rótulo exibido, campo da modalidade), na ordem do painel
CAMPOS_DETALHE: Tuple[Tuple[str, str], ...] = (
    ("Proporção", "proporcao"),
    ("Forma", "forma"),
    ("Especificidades da Área", "especificidades"),
    ("Vantagens", "vantagens"),
    ("Desvantagens", "desvantagens"),
    ("Documentos Necessários", "documentos"),
    ("Observações", "observacao"),
)


class FonteDados(Protocol):
    async def fetch(self, endpoint: str) -> List[Dict[str, Any]]: ...


class EstadoPainel(str, Enum):
    CARREGANDO = "carregando"
    OCIOSO = "ocioso"
    TIPO_SELECIONADO = "tipo_selecionado"
    MODALIDADE_SELECIONADA = "modalidade_selecionada"


@dataclass
class Detalhe:
    titulo: Optional[str]
    secoes: List[Tuple[str, str]] = field(default_factory=list)


def _mesmo_id(a: Any, b: Any) -> bool:
    # ids chegam como int da API e como str da query string
    if a is None or b is None:
        return False
    return str(a) == str(b)


def _normalizar(valor: Optional[str]) -> str:
    return (valor or "").strip().upper()


def exibe_siscal(tipo: Dict[str, Any], modalidade: Dict[str, Any]) -> bool:
    return (
        _normalizar(tipo.get("nome")) == SISCAL_TIPO
        and _normalizar(modalidade.get("nome")) == SISCAL_MODALIDADE
    )


class PainelController:
    """Máquina de estados do painel: carregando → ocioso → tipo → modalidade."""

    def __init__(self, fonte: FonteDados, siscal_url: str) -> None:
        self.fonte = fonte
        self.siscal_url = siscal_url

        self.tipos: List[Dict[str, Any]] = []
        self.modalidades: List[Dict[str, Any]] = []
        self.normas: List[Dict[str, Any]] = []

        self.estado = EstadoPainel.CARREGANDO
        self.mensagem: Optional[str] = None
        self.tipo_selecionado: Optional[Dict[str, Any]] = None
        self.modalidades_filtradas: List[Dict[str, Any]] = []
        self.normas_relacionadas: List[Dict[str, Any]] = []
        self.modalidade_ativa: Optional[Any] = None
        self.detalhe: Optional[Detalhe] = None
        self.mostrar_siscal = False

        # Incrementado a cada troca de tipo; respostas de gerações antigas são descartadas
        self._geracao = 0

    @property
    def mostrar_normas(self) -> bool:
        return bool(self.normas_relacionadas)

    async def _buscar(self, endpoint: str) -> Optional[List[Dict[str, Any]]]:
        try:
            return await self.fonte.fetch(endpoint)
        except (httpx.HTTPError, ValueError, KeyError) as e:
            logger.error("Falha ao buscar %s: %s", endpoint, e)
            return None

    async def carregar(self) -> None:
        """Busca as três coleções em paralelo; falhas resultam em coleções vazias."""
        self.estado = EstadoPainel.CARREGANDO
        resultados = await asyncio.gather(
            self._buscar("tipos"),
            self._buscar("modalidades"),
            self._buscar("normas"),
        )
        if any(r is None for r in resultados):
            self.mensagem = ERRO_CARREGAMENTO
        self.tipos, self.modalidades, self.normas = (r or [] for r in resultados)
        self.estado = EstadoPainel.OCIOSO

    def _limpar_selecao(self) -> None:
        self.mensagem = None
        self.modalidades_filtradas = []
        self.modalidade_ativa = None
        self.detalhe = None
        self.mostrar_siscal = False

    async def selecionar_tipo(self, tipo_id: Any) -> None:
        self._geracao += 1
        geracao = self._geracao
        self._limpar_selecao()

        if tipo_id in (None, ""):
            self.tipo_selecionado = None
            self.normas_relacionadas = []
            self.estado = EstadoPainel.OCIOSO
            return

        self.estado = EstadoPainel.TIPO_SELECIONADO
        self.tipo_selecionado = next((t for t in self.tipos if _mesmo_id(t.get("id"), tipo_id)), None)
        self.modalidades_filtradas = [m for m in self.modalidades if _mesmo_id(m.get("tipo_id"), tipo_id)]
        if not self.modalidades_filtradas:
            self.mensagem = NENHUMA_MODALIDADE

        if self.tipo_selecionado is None:
            self.normas_relacionadas = []
            return

        relacionadas = await self._buscar(f"tipos/{self.tipo_selecionado['id']}/normas")
        if geracao != self._geracao:
            logger.debug("Descartando normas do tipo %s (seleção já mudou)", tipo_id)
            return
        if relacionadas is None:
            self.mensagem = ERRO_CARREGAMENTO
        self.normas_relacionadas = relacionadas or []

    def selecionar_modalidade(self, modalidade_id: Any) -> None:
        """Exibe os detalhes de uma modalidade da lista filtrada (ignora ids fora dela)."""
        modalidade = next(
            (m for m in self.modalidades_filtradas if _mesmo_id(m.get("id"), modalidade_id)), None
        )
        if modalidade is None:
            return
        tipo = next((t for t in self.tipos if _mesmo_id(t.get("id"), modalidade.get("tipo_id"))), None)
        if tipo is None:
            return

        secoes = []
        for rotulo, campo in CAMPOS_DETALHE:
            valor = modalidade.get(campo)
            if valor and valor.strip():
                secoes.append((rotulo, valor))

        self.modalidade_ativa = modalidade.get("id")
        self.detalhe = Detalhe(titulo=modalidade.get("nome"), secoes=secoes)
        self.mostrar_siscal = exibe_siscal(tipo, modalidade)
        self.estado = EstadoPainel.MODALIDADE_SELECIONADA
