# tests/integration/test_api_agentes.py
from collections.abc import Callable

import duckdb
import pytest
from fastapi.testclient import TestClient

from vitrine.infrastructure.repositories.duckdb_agente_repo import DuckDBAgenteRepo

HeadersFactory = Callable[..., dict[str, str]]

_NOVO_AGENTE = {
    "nome": "  Tradutor Pro  ",
    "descricao": "Traduz documentos",
    "website_url": "https://tradutor.example.com",
    "tipo_preco": "free",
    "preco_inicial": 10,
    "categoria": "productivity",
}


def test_marketplace_lista_somente_aprovados(client: TestClient) -> None:
    response = client.get("/api/agentes")
    assert response.status_code == 200
    ids = {a["id"] for a in response.json()}
    assert ids == {"ag-1", "ag-2", "ag-3", "ag-4", "ag-5"}


def test_marketplace_traz_estatisticas(client: TestClient) -> None:
    data = {a["id"]: a for a in client.get("/api/agentes").json()}
    assert data["ag-1"]["estatistica"] == {"media": 4.5, "total": 2, "media_exibicao": "4.5"}
    assert data["ag-3"]["estatistica"]["media"] == 1.7
    assert data["ag-4"]["estatistica"] == {"media": None, "total": 0, "media_exibicao": "Sem avaliações"}


def test_marketplace_preco_formatado(client: TestClient) -> None:
    data = {a["id"]: a for a in client.get("/api/agentes").json()}
    assert data["ag-5"]["preco_formatado"] == "R$ 1.234,50"
    assert data["ag-2"]["preco_formatado"] == "Gratuito"


def test_marketplace_busca(client: TestClient) -> None:
    data = client.get("/api/agentes", params={"q": "CLIENTES"}).json()
    assert [a["id"] for a in data] == ["ag-2"]


def test_marketplace_filtro_categoria_e_preco(client: TestClient) -> None:
    data = client.get("/api/agentes", params=[("categoria", "chatbots"), ("categoria", "research")]).json()
    assert {a["id"] for a in data} == {"ag-2", "ag-4"}
    data = client.get("/api/agentes", params={"tipo_preco": "paid"}).json()
    assert {a["id"] for a in data} == {"ag-1", "ag-5"}


def test_marketplace_nota_minima(client: TestClient) -> None:
    data = client.get("/api/agentes", params={"nota_minima": 4}).json()
    assert {a["id"] for a in data} == {"ag-1", "ag-2", "ag-5"}


def test_marketplace_categoria_invalida(client: TestClient) -> None:
    response = client.get("/api/agentes", params={"categoria": "inexistente"})
    assert response.status_code == 422


def test_detalhe_aprovado_publico(client: TestClient) -> None:
    response = client.get("/api/agentes/ag-1")
    assert response.status_code == 200
    data = response.json()
    assert data["nome"] == "Escritor GPT"
    assert data["autor"] == "dono"
    assert data["categoria_nome"] == "Criação de Conteúdo"


def test_detalhe_pendente_so_para_dono(client: TestClient, auth_headers: HeadersFactory) -> None:
    assert client.get("/api/agentes/ag-pend").status_code == 404
    assert client.get("/api/agentes/ag-pend", headers=auth_headers("u-leitor")).status_code == 404
    response = client.get("/api/agentes/ag-pend", headers=auth_headers("u-dono"))
    assert response.status_code == 200
    assert response.json()["status"] == "pending"


def test_detalhe_rejeitado_mostra_motivo_ao_dono(client: TestClient, auth_headers: HeadersFactory) -> None:
    data = client.get("/api/agentes/ag-rej", headers=auth_headers("u-dono")).json()
    assert data["motivo_rejeicao"] == "Descricao insuficiente"
    assert data["rejeitado_em"].startswith("2024-12-02")


def test_detalhe_inexistente_404(client: TestClient) -> None:
    response = client.get("/api/agentes/nao-existe")
    assert response.status_code == 404
    assert response.json()["detail"] == "Agente não encontrado"


def test_token_invalido_401(client: TestClient) -> None:
    response = client.get("/api/agentes/ag-1", headers={"Authorization": "Bearer lixo"})
    assert response.status_code == 401


def test_avaliacoes_mais_recentes_primeiro(client: TestClient) -> None:
    data = client.get("/api/agentes/ag-2/avaliacoes").json()
    assert [a["id"] for a in data] == ["r5", "r4", "r3"]
    assert data[1]["autor"] == "revisora"
    assert data[0]["autor"] is None


def test_avaliar_exige_login(client: TestClient) -> None:
    response = client.post("/api/agentes/ag-4/avaliacoes", json={"rating": 5})
    assert response.status_code == 401


def test_avaliar_atualiza_estatistica(client: TestClient, auth_headers: HeadersFactory) -> None:
    response = client.post(
        "/api/agentes/ag-4/avaliacoes",
        json={"rating": 4, "comentario": "  Util  "},
        headers=auth_headers("u-leitor"),
    )
    assert response.status_code == 201
    assert response.json()["comentario"] == "Util"
    assert response.json()["autor"] == "leitor"

    data = client.get("/api/agentes/ag-4").json()
    assert data["estatistica"]["media"] == 4.0
    assert data["estatistica"]["total"] == 1


def test_avaliar_nota_fora_da_faixa(client: TestClient, auth_headers: HeadersFactory) -> None:
    for nota in (0, 6):
        response = client.post("/api/agentes/ag-4/avaliacoes", json={"rating": nota}, headers=auth_headers())
        assert response.status_code == 422


def test_avaliar_agente_pendente_de_outro_404(client: TestClient, auth_headers: HeadersFactory) -> None:
    response = client.post("/api/agentes/ag-pend/avaliacoes", json={"rating": 5}, headers=auth_headers("u-leitor"))
    assert response.status_code == 404


def test_submeter_entra_pendente(client: TestClient, auth_headers: HeadersFactory) -> None:
    response = client.post("/api/agentes", json=_NOVO_AGENTE, headers=auth_headers("u-novo", "novo@example.com"))
    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["nome"] == "Tradutor Pro"
    # gratuito nunca guarda preco
    assert data["preco_inicial"] is None
    assert data["autor"] == "novo"

    ids = {a["id"] for a in client.get("/api/agentes").json()}
    assert data["id"] not in ids


def test_submeter_exige_login(client: TestClient) -> None:
    assert client.post("/api/agentes", json=_NOVO_AGENTE).status_code == 401


def test_submeter_nome_vazio_422(client: TestClient, auth_headers: HeadersFactory) -> None:
    response = client.post("/api/agentes", json={**_NOVO_AGENTE, "nome": "   "}, headers=auth_headers())
    assert response.status_code == 422


def test_editar_somente_dono(client: TestClient, auth_headers: HeadersFactory) -> None:
    corpo = {**_NOVO_AGENTE, "tipo_preco": "paid", "preco_inicial": 99.9}
    assert client.put("/api/agentes/ag-1", json=corpo, headers=auth_headers("u-leitor")).status_code == 403

    response = client.put("/api/agentes/ag-1", json=corpo, headers=auth_headers("u-dono"))
    assert response.status_code == 200
    data = response.json()
    assert data["nome"] == "Tradutor Pro"
    assert data["preco_inicial"] == "99.90"
    # edicao mantem status e avaliacoes
    assert data["status"] == "approved"
    assert data["estatistica"]["total"] == 2


def test_remover_somente_dono(client: TestClient, auth_headers: HeadersFactory) -> None:
    assert client.delete("/api/agentes/ag-1", headers=auth_headers("u-leitor")).status_code == 403
    assert client.delete("/api/agentes/ag-1", headers=auth_headers("u-dono")).status_code == 204
    assert client.get("/api/agentes/ag-1").status_code == 404


def test_remover_agente_apaga_avaliacoes(
    client: TestClient, auth_headers: HeadersFactory, test_db: duckdb.DuckDBPyConnection,
) -> None:
    assert client.delete("/api/agentes/ag-2", headers=auth_headers("u-dono")).status_code == 204
    restantes = test_db.execute("SELECT COUNT(*) FROM reviews WHERE agent_id = 'ag-2'").fetchone()[0]
    assert restantes == 0


class _FalhaAoApagarAgente:
    """Repassa tudo para a conexao real, mas falha no DELETE do agente."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def execute(self, sql: str, params: object = None) -> duckdb.DuckDBPyConnection:
        if sql.startswith("DELETE FROM agents"):
            raise duckdb.Error("falha simulada")
        return self._conn.execute(sql, params)

    def __getattr__(self, nome: str) -> object:
        return getattr(self._conn, nome)


def test_remover_agente_desfaz_tudo_se_falhar(test_db: duckdb.DuckDBPyConnection) -> None:
    repo = DuckDBAgenteRepo(_FalhaAoApagarAgente(test_db))  # type: ignore[arg-type]
    with pytest.raises(duckdb.Error):
        repo.remover("ag-2")
    avaliacoes = test_db.execute("SELECT COUNT(*) FROM reviews WHERE agent_id = 'ag-2'").fetchone()[0]
    assert avaliacoes == 3
    assert DuckDBAgenteRepo(test_db).buscar_por_id("ag-2") is not None
