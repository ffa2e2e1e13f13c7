# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator

import duckdb
import jwt
import pytest
from fastapi.testclient import TestClient

# Desabilitar rate limit e storage em testes; segredo fixo para assinar tokens
os.environ["API_RATE_LIMIT_PER_MINUTE"] = "0"
os.environ["STORAGE_URL"] = ""
os.environ["JWT_SECRET"] = "segredo-de-teste-com-32-bytes-ou-mais"
os.environ["JWT_AUDIENCE"] = "authenticated"

DONO = "u-dono"
REVISOR = "u-revisor"
LEITOR = "u-leitor"


@pytest.fixture()
def test_db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """DuckDB in-memory com schema e dados deterministicos (novo a cada teste: ha escritas)."""
    from vitrine.infrastructure.duckdb_connection import criar_schema

    conn = duckdb.connect(":memory:")
    criar_schema(conn)

    # --- Perfis ---
    conn.execute(f"""
        INSERT INTO profiles (id, username, full_name, is_premium_user) VALUES
        ('{DONO}', 'dono', 'Dona dos Agentes', FALSE),
        ('{REVISOR}', 'revisora', NULL, TRUE),
        ('{LEITOR}', 'leitor', NULL, FALSE)
    """)

    # --- Agentes (5 aprovados, 1 pendente, 1 rejeitado) ---
    conn.execute(f"""
        INSERT INTO agents
        (id, name, description, category, price_type, starting_price, user_id,
         verification_status, created_at, rejected_at, rejected_reason) VALUES
        ('ag-1', 'Escritor GPT', 'Gera textos para blogs', 'content_creation', 'paid', 49.90,
         '{DONO}', 'approved', '2025-01-05 10:00:00', NULL, NULL),
        ('ag-2', 'Bot de Suporte', 'Atende clientes 24h', 'chatbots', 'free', NULL,
         '{DONO}', 'approved', '2025-01-04 10:00:00', NULL, NULL),
        ('ag-3', 'Planilhas IA', 'Relatorios automaticos', 'data_analysis', 'freemium', 19.00,
         '{LEITOR}', 'approved', '2025-01-03 10:00:00', NULL, NULL),
        ('ag-4', 'Pesquisador', 'Resume artigos', 'research', 'free', NULL,
         '{LEITOR}', 'approved', '2025-01-02 10:00:00', NULL, NULL),
        ('ag-5', 'Dev Helper', 'Revisa codigo', 'dev_tools', 'paid', 1234.50,
         '{LEITOR}', 'approved', '2025-01-01 10:00:00', NULL, NULL),
        ('ag-pend', 'Agente Pendente', 'Aguardando revisao', 'automation', 'free', NULL,
         '{DONO}', 'pending', '2025-01-06 10:00:00', NULL, NULL),
        ('ag-rej', 'Agente Rejeitado', 'Nao aprovado', 'productivity', 'free', NULL,
         '{DONO}', 'rejected', '2024-12-01 10:00:00', '2024-12-02 10:00:00', 'Descricao insuficiente')
    """)

    # --- Avaliacoes de agentes ---
    # ag-1: 5,4 -> 4.5 (2) | ag-2: 5,4,3 -> 4.0 (3) | ag-3: 1,2,2 -> 1.7 (3) | ag-5: 4 -> 4.0 (1)
    conn.execute(f"""
        INSERT INTO reviews (id, agent_id, user_id, rating, comment, created_at) VALUES
        ('r1', 'ag-1', '{LEITOR}', 5, 'Excelente', '2025-02-01 10:00:00'),
        ('r2', 'ag-1', '{REVISOR}', 4, 'Bom', '2025-02-02 10:00:00'),
        ('r3', 'ag-2', '{LEITOR}', 5, '', '2025-02-01 10:00:00'),
        ('r4', 'ag-2', '{REVISOR}', 4, '', '2025-02-02 10:00:00'),
        ('r5', 'ag-2', 'u-anonimo', 3, '', '2025-02-03 10:00:00'),
        ('r6', 'ag-3', '{DONO}', 1, 'Fraco', '2025-02-01 10:00:00'),
        ('r7', 'ag-3', '{REVISOR}', 2, '', '2025-02-02 10:00:00'),
        ('r8', 'ag-3', 'u-anonimo', 2, '', '2025-02-03 10:00:00'),
        ('r9', 'ag-5', '{DONO}', 4, '', '2025-02-01 10:00:00')
    """)

    # --- Agencias (2 aprovadas, 1 pendente) ---
    conn.execute(f"""
        INSERT INTO agencies
        (id, name, cnpj, description, location, specialties, total_clients, user_id,
         verification_status, created_at) VALUES
        ('ge-1', 'Alfa IA', '11222333000181', 'Automacao para varejo', 'São Paulo',
         ['Marketing Digital'], 120, '{DONO}', 'approved', '2025-01-01 10:00:00'),
        ('ge-2', 'Beta Bots', '33000167000101', 'Chatbots sob medida', 'Recife',
         ['Atendimento ao Cliente', 'Outros'], 15, '{LEITOR}', 'approved', '2025-01-02 10:00:00'),
        ('ge-pend', 'Gama Consultoria', '11444777000161', 'Em analise', 'Curitiba',
         ['Análise de Dados'], 40, '{DONO}', 'pending', '2025-01-03 10:00:00')
    """)

    # --- Avaliacoes de agencias: ge-1 -> 5,4 = 4.5 (2) ---
    conn.execute(f"""
        INSERT INTO agency_reviews (id, agency_id, user_id, rating, comment, created_at) VALUES
        ('ar1', 'ge-1', '{LEITOR}', 5, 'Recomendo', '2025-02-01 10:00:00'),
        ('ar2', 'ge-1', '{REVISOR}', 4, '', '2025-02-02 10:00:00')
    """)

    yield conn
    conn.close()


@pytest.fixture()
def client(test_db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com DuckDB in-memory injetado."""
    from vitrine.infrastructure import duckdb_connection
    duckdb_connection.set_connection(test_db)

    # Limpar cache de settings para pegar as variaveis acima
    from vitrine.infrastructure.config import get_settings
    get_settings.cache_clear()

    from vitrine.interfaces.api.main import app
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def auth_headers() -> Callable[..., dict[str, str]]:
    """Fabrica de cabecalhos Authorization com JWT HS256 assinado com o segredo de teste."""

    def _headers(sub: str = DONO, email: str | None = None) -> dict[str, str]:
        claims: dict[str, str] = {"sub": sub, "aud": "authenticated"}
        if email:
            claims["email"] = email
        token = jwt.encode(claims, os.environ["JWT_SECRET"], algorithm="HS256")
        return {"Authorization": f"Bearer {token}"}

    return _headers
