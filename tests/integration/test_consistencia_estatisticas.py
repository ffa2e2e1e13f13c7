# tests/integration/test_consistencia_estatisticas.py
from collections.abc import Callable

from fastapi.testclient import TestClient

HeadersFactory = Callable[..., dict[str, str]]


def _estatisticas_agente(client: TestClient, agente_id: str, headers: dict[str, str]) -> list[dict]:
    """Mesma estatistica vista por todas as telas que exibem o agente."""
    def _de(lista: list[dict]) -> dict:
        return next(a["estatistica"] for a in lista if a["id"] == agente_id)

    return [
        _de(client.get("/api/agentes").json()),
        _de(client.get("/api/agentes/ranking").json()),
        _de(client.get("/api/agentes/destaques").json()),
        client.get(f"/api/agentes/{agente_id}").json()["estatistica"],
        _de(client.get("/api/agentes/comparar", params={"ids": agente_id}).json()),
        _de(client.get("/api/perfil", headers=headers).json()["agentes"]),
    ]


def test_todas_as_telas_concordam(client: TestClient, auth_headers: HeadersFactory) -> None:
    vistas = _estatisticas_agente(client, "ag-1", auth_headers("u-dono"))
    assert all(v == {"media": 4.5, "total": 2, "media_exibicao": "4.5"} for v in vistas)


def test_telas_concordam_apos_nova_avaliacao(client: TestClient, auth_headers: HeadersFactory) -> None:
    client.post("/api/agentes/ag-2/avaliacoes", json={"rating": 2}, headers=auth_headers("u-leitor"))
    # 5,4,3,2 -> 3.5
    vistas = _estatisticas_agente(client, "ag-2", auth_headers("u-dono"))
    assert all(v == {"media": 3.5, "total": 4, "media_exibicao": "3.5"} for v in vistas)


def test_agente_sem_avaliacoes_igual_em_todas(client: TestClient, auth_headers: HeadersFactory) -> None:
    vistas = _estatisticas_agente(client, "ag-4", auth_headers("u-leitor"))
    assert all(v == {"media": None, "total": 0, "media_exibicao": "Sem avaliações"} for v in vistas)


def test_agencia_diretorio_detalhe_e_perfil_concordam(client: TestClient, auth_headers: HeadersFactory) -> None:
    diretorio = next(a for a in client.get("/api/agencias").json() if a["id"] == "ge-1")
    detalhe = client.get("/api/agencias/ge-1").json()
    perfil = next(a for a in client.get("/api/perfil", headers=auth_headers("u-dono")).json()["agencias"]
                  if a["id"] == "ge-1")
    assert diretorio["estatistica"] == detalhe["estatistica"] == perfil["estatistica"]
    assert detalhe["estatistica"]["media"] == 4.5
