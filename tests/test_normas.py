from unittest.mock import patch

from compensacao.exceptions import StoreError


def _criar_norma(client, **campos):
    response = client.post("/api/v2/normas", json=campos)
    assert response.status_code == 201
    return response.json()["id"]


def test_create_norma(client):
    """Criação retorna 201, mensagem e id gerado."""
    response = client.post(
        "/api/v2/normas",
        json={"nome": "Lei 9.985/2000", "link": "https://planalto.gov.br/l9985", "preambulo": "Institui o SNUC."},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Norma criada com sucesso"
    assert isinstance(body["id"], int)


def test_create_norma_campos_ausentes_ficam_nulos(client):
    norma_id = _criar_norma(client, nome="Decreto 45.175")
    data = client.get("/api/v2/normas").json()["data"]
    assert data == [{"id": norma_id, "nome": "Decreto 45.175", "link": None, "preambulo": None}]


def test_list_normas_ordenadas_por_nome(client):
    for nome in ("Resolução CONAMA 371", "Decreto 45.175", "Lei 9.985"):
        _criar_norma(client, nome=nome)
    response = client.get("/api/v2/normas")
    assert response.status_code == 200
    nomes = [n["nome"] for n in response.json()["data"]]
    assert nomes == ["Decreto 45.175", "Lei 9.985", "Resolução CONAMA 371"]


def test_search_normas_case_insensitive_nos_tres_campos(client):
    _criar_norma(client, nome="Lei do SNUC", link="https://a.gov.br", preambulo="Unidades")
    _criar_norma(client, nome="Decreto", link="https://snuc.gov.br/decreto", preambulo="Regulamenta")
    _criar_norma(client, nome="Portaria", link="https://b.gov.br", preambulo="Trata do Snuc estadual")
    _criar_norma(client, nome="Resolução", link="https://c.gov.br", preambulo="Mineração")

    response = client.get("/api/v2/normas", params={"q": "snuc"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert [n["nome"] for n in data] == ["Decreto", "Lei do SNUC", "Portaria"]
    for norma in data:
        texto = " ".join(norma[c] for c in ("nome", "link", "preambulo")).lower()
        assert "snuc" in texto


def test_search_normas_termo_vazio_retorna_todas(client):
    _criar_norma(client, nome="A")
    _criar_norma(client, nome="B")
    assert len(client.get("/api/v2/normas", params={"q": ""}).json()["data"]) == 2


def test_update_norma_substitui_todos_os_campos(client):
    """PUT seguido de GET retorna exatamente os campos gravados por último."""
    norma_id = _criar_norma(client, nome="Antigo", link="https://antigo", preambulo="Texto antigo")

    response = client.put(f"/api/v2/normas/{norma_id}", json={"nome": "Novo", "link": "https://novo"})
    assert response.status_code == 200
    assert response.json() == {"message": "Norma atualizada com sucesso"}

    data = client.get("/api/v2/normas").json()["data"]
    assert data == [{"id": norma_id, "nome": "Novo", "link": "https://novo", "preambulo": None}]


def test_update_norma_inexistente(client):
    response = client.put("/api/v2/normas/999", json={"nome": "X"})
    assert response.status_code == 404
    assert response.json() == {"error": "Norma não encontrada"}


def test_delete_norma(client):
    norma_id = _criar_norma(client, nome="Temporária")
    response = client.delete(f"/api/v2/normas/{norma_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Norma deletada com sucesso"}
    assert client.get("/api/v2/normas").json()["data"] == []

    response = client.delete(f"/api/v2/normas/{norma_id}")
    assert response.status_code == 404


def test_id_malformado_retorna_400(client):
    response = client.delete("/api/v2/normas/abc")
    assert response.status_code == 400
    assert "error" in response.json()


def test_falha_do_banco_vira_400_com_mensagem_original(client):
    with patch("compensacao.routers.normas.NormasRepository.search", side_effect=StoreError("database is locked")):
        response = client.get("/api/v2/normas")
    assert response.status_code == 400
    assert response.json() == {"error": "database is locked"}


def test_search_normas_trata_curingas_como_texto(client):
    _criar_norma(client, nome="Lei 9.985", link="https://a", preambulo="SNUC")
    _criar_norma(client, nome="Deliberação_COPAM", link="https://b", preambulo="Compensação de 100%")

    for termo, esperado in (("_", ["Deliberação_COPAM"]), ("%", ["Deliberação_COPAM"])):
        data = client.get("/api/v2/normas", params={"q": termo}).json()["data"]
        assert [n["nome"] for n in data] == esperado
        for norma in data:
            texto = " ".join(norma[c] for c in ("nome", "link", "preambulo")).lower()
            assert termo in texto
