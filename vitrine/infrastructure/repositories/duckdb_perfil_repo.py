# vitrine/infrastructure/repositories/duckdb_perfil_repo.py
from __future__ import annotations

import duckdb

from vitrine.domain.perfil.entities import Perfil


class DuckDBPerfilRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, perfil_id: str) -> Perfil | None:
        row = self._conn.execute(
            "SELECT id, username, full_name, avatar_url, is_premium_user FROM profiles WHERE id = ?",
            [perfil_id],
        ).fetchone()
        if row is None:
            return None
        return Perfil(
            id=str(row[0]),
            username=str(row[1]),
            full_name=str(row[2]) if row[2] else None,
            avatar_url=str(row[3]) if row[3] else None,
            is_premium_user=bool(row[4]),
        )

    def inserir(self, perfil: Perfil) -> Perfil:
        """ON CONFLICT DO NOTHING: dois primeiros acessos simultaneos nao falham."""
        self._conn.execute(
            """INSERT INTO profiles (id, username, full_name, avatar_url, is_premium_user)
               VALUES (?, ?, ?, ?, ?)
               ON CONFLICT DO NOTHING""",
            [perfil.id, perfil.username, perfil.full_name, perfil.avatar_url, perfil.is_premium_user],
        )
        return self.buscar_por_id(perfil.id) or perfil
