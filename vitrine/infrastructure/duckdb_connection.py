# vitrine/infrastructure/duckdb_connection.py
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from loguru import logger

from .config import get_settings

SCHEMA_PATH = Path(__file__).parent / "schema.sql"

_connection: duckdb.DuckDBPyConnection | None = None


def criar_schema(conn: duckdb.DuckDBPyConnection) -> None:
    """Idempotente (CREATE TABLE IF NOT EXISTS)."""
    conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))


def get_connection() -> duckdb.DuckDBPyConnection:
    global _connection  # noqa: PLW0603
    if _connection is None:
        path = get_settings().duckdb_path
        _connection = duckdb.connect(path)
        criar_schema(_connection)
        logger.info("DuckDB conectado em {}", path)
    return _connection


def set_connection(conn: duckdb.DuckDBPyConnection) -> None:
    """Usado em testes para injetar DuckDB in-memory."""
    global _connection  # noqa: PLW0603
    _connection = conn


@contextmanager
def transacao(conn: duckdb.DuckDBPyConnection) -> Iterator[duckdb.DuckDBPyConnection]:
    """BEGIN/COMMIT em volta do bloco; ROLLBACK e re-raise em qualquer erro."""
    conn.begin()
    try:
        yield conn
    except Exception:
        conn.rollback()
        logger.exception("Transacao desfeita")
        raise
    conn.commit()
