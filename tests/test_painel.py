import asyncio

import httpx
import pytest

from compensacao.services.painel import (
    ERRO_CARREGAMENTO,
    NENHUMA_MODALIDADE,
    EstadoPainel,
    PainelController,
)

SISCAL = "https://siscal.netlify.app/"

TIPOS = [{"id": 1, "nome": "SNUC"}, {"id": 2, "nome": "Minerária"}, {"id": 3, "nome": "Florestal"}]
MODALIDADES = [
    {"id": 10, "tipo_id": 1, "nome": " Pagamento ", "proporcao": "0,5%", "forma": "", "especificidades": None,
     "vantagens": "Simples\nRápida", "desvantagens": "   ", "observacao": "Obs", "documentos": "Guia"},
    {"id": 11, "tipo_id": 1, "nome": "Implantação", "proporcao": None, "forma": "Obras", "especificidades": None,
     "vantagens": None, "desvantagens": None, "observacao": None, "documentos": None},
    {"id": 20, "tipo_id": 2, "nome": "PAGAMENTO", "proporcao": "1%", "forma": None, "especificidades": None,
     "vantagens": None, "desvantagens": None, "observacao": None, "documentos": None},
]
NORMAS = [{"id": 100, "nome": "Lei 9.985", "link": "https://planalto.gov.br/l9985", "preambulo": "SNUC"}]


class FonteFalsa:
    """Fonte de dados em memória com falhas e atrasos configuráveis por endpoint."""

    def __init__(self, falhas=(), atrasos=None, normas_por_tipo=None):
        self.falhas = set(falhas)
        self.atrasos = atrasos or {}
        self.normas_por_tipo = normas_por_tipo if normas_por_tipo is not None else {"1": NORMAS}
        self.chamadas = []

    async def fetch(self, endpoint):
        self.chamadas.append(endpoint)
        await asyncio.sleep(self.atrasos.get(endpoint, 0))
        if endpoint in self.falhas:
            raise httpx.ConnectError("conexão recusada")
        if endpoint == "tipos":
            return TIPOS
        if endpoint == "modalidades":
            return MODALIDADES
        if endpoint == "normas":
            return NORMAS
        tipo_id = endpoint.split("/")[1]
        return self.normas_por_tipo.get(tipo_id, [])


async def _painel_carregado(fonte=None):
    painel = PainelController(fonte or FonteFalsa(), siscal_url=SISCAL)
    await painel.carregar()
    return painel


@pytest.mark.asyncio
async def test_carregar_busca_as_tres_colecoes():
    fonte = FonteFalsa()
    painel = await _painel_carregado(fonte)
    assert sorted(fonte.chamadas) == ["modalidades", "normas", "tipos"]
    assert painel.tipos == TIPOS
    assert painel.estado == EstadoPainel.OCIOSO
    assert painel.mensagem is None
    assert painel.modalidades_filtradas == []
    assert painel.detalhe is None
    assert not painel.mostrar_normas


@pytest.mark.asyncio
async def test_falha_no_carregamento_deixa_painel_degradado():
    painel = await _painel_carregado(FonteFalsa(falhas={"modalidades"}))
    assert painel.estado == EstadoPainel.OCIOSO
    assert painel.mensagem == ERRO_CARREGAMENTO
    assert painel.modalidades == []
    assert painel.tipos == TIPOS


@pytest.mark.asyncio
async def test_selecionar_tipo_filtra_modalidades_e_busca_normas():
    painel = await _painel_carregado()
    await painel.selecionar_tipo("1")
    assert painel.estado == EstadoPainel.TIPO_SELECIONADO
    assert [m["id"] for m in painel.modalidades_filtradas] == [10, 11]
    assert painel.normas_relacionadas == NORMAS
    assert painel.mostrar_normas
    assert painel.mensagem is None


@pytest.mark.asyncio
async def test_tipo_sem_modalidades_nem_normas():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(3)
    assert painel.modalidades_filtradas == []
    assert painel.mensagem == NENHUMA_MODALIDADE
    assert not painel.mostrar_normas


@pytest.mark.asyncio
async def test_desmarcar_tipo_volta_ao_estado_ocioso():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(1)
    await painel.selecionar_tipo("")
    assert painel.estado == EstadoPainel.OCIOSO
    assert painel.modalidades_filtradas == []
    assert painel.mensagem is None
    assert not painel.mostrar_normas


@pytest.mark.asyncio
async def test_detalhes_da_modalidade_apenas_campos_preenchidos():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(1)
    painel.selecionar_modalidade("10")

    assert painel.estado == EstadoPainel.MODALIDADE_SELECIONADA
    assert painel.modalidade_ativa == 10
    assert painel.detalhe.titulo == " Pagamento "
    assert painel.detalhe.secoes == [
        ("Proporção", "0,5%"),
        ("Vantagens", "Simples\nRápida"),
        ("Documentos Necessários", "Guia"),
        ("Observações", "Obs"),
    ]


@pytest.mark.asyncio
async def test_siscal_apenas_para_snuc_e_pagamento():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(1)

    painel.selecionar_modalidade(10)
    assert painel.mostrar_siscal

    painel.selecionar_modalidade(11)
    assert not painel.mostrar_siscal
    assert painel.modalidade_ativa == 11

    await painel.selecionar_tipo(2)
    painel.selecionar_modalidade(20)
    assert not painel.mostrar_siscal  # PAGAMENTO, mas tipo Minerária


@pytest.mark.asyncio
async def test_trocar_tipo_limpa_detalhes_e_botao():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(1)
    painel.selecionar_modalidade(10)
    await painel.selecionar_tipo(2)
    assert painel.detalhe is None
    assert painel.modalidade_ativa is None
    assert not painel.mostrar_siscal


@pytest.mark.asyncio
async def test_modalidade_fora_do_tipo_selecionado_e_ignorada():
    painel = await _painel_carregado()
    await painel.selecionar_tipo(1)
    painel.selecionar_modalidade(20)
    assert painel.detalhe is None
    assert painel.estado == EstadoPainel.TIPO_SELECIONADO


@pytest.mark.asyncio
async def test_resposta_atrasada_de_tipo_anterior_e_descartada():
    fonte = FonteFalsa(
        atrasos={"tipos/1/normas": 0.05},
        normas_por_tipo={"1": NORMAS, "2": [{"id": 200, "nome": "Lei 14.181", "link": "", "preambulo": ""}]},
    )
    painel = await _painel_carregado(fonte)

    lenta = asyncio.create_task(painel.selecionar_tipo(1))
    await asyncio.sleep(0)
    await painel.selecionar_tipo(2)
    await lenta

    assert [n["id"] for n in painel.normas_relacionadas] == [200]
    assert [m["id"] for m in painel.modalidades_filtradas] == [20]


@pytest.mark.asyncio
async def test_falha_ao_buscar_normas_do_tipo():
    painel = await _painel_carregado(FonteFalsa(falhas={"tipos/1/normas"}))
    await painel.selecionar_tipo(1)
    assert painel.mensagem == ERRO_CARREGAMENTO
    assert not painel.mostrar_normas
    assert [m["id"] for m in painel.modalidades_filtradas] == [10, 11]
