# vitrine/infrastructure/repositories/duckdb_avaliacao_repo.py
from __future__ import annotations

import uuid
from datetime import datetime

import duckdb

from vitrine.domain.avaliacao.entities import Avaliacao, NotaAvaliacao
from vitrine.domain.enums import TipoAlvo

# (tabela, coluna do alvo) por tipo. Valores internos, nunca input do usuario.
_TABELAS: dict[TipoAlvo, tuple[str, str]] = {
    TipoAlvo.AGENTE: ("reviews", "agent_id"),
    TipoAlvo.AGENCIA: ("agency_reviews", "agency_id"),
}


def _select(alvo_tipo: TipoAlvo) -> str:
    tabela, coluna = _TABELAS[alvo_tipo]
    return f"""
        SELECT r.id, r.{coluna} AS alvo_id, r.user_id, r.rating,
               r.comment AS comentario, r.created_at AS criado_em,
               p.username AS autor
        FROM {tabela} r
        LEFT JOIN profiles p ON p.id = r.user_id
    """  # noqa: S608


class DuckDBAvaliacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def listar_por_alvo(self, alvo_tipo: TipoAlvo, alvo_id: str) -> list[Avaliacao]:
        """Mais recentes primeiro."""
        _, coluna = _TABELAS[alvo_tipo]
        return self._consultar(
            alvo_tipo,
            _select(alvo_tipo) + f" WHERE r.{coluna} = ? ORDER BY r.created_at DESC, r.id",
            [alvo_id],
        )

    def listar_por_alvos(self, alvo_tipo: TipoAlvo, alvo_ids: list[str]) -> dict[str, list[Avaliacao]]:
        """Uma consulta para a listagem inteira. Alvos sem avaliacao ficam com []."""
        resultado: dict[str, list[Avaliacao]] = {i: [] for i in alvo_ids}
        if not alvo_ids:
            return resultado
        _, coluna = _TABELAS[alvo_tipo]
        placeholders = ", ".join("?" for _ in alvo_ids)
        avaliacoes = self._consultar(
            alvo_tipo,
            _select(alvo_tipo) + f" WHERE r.{coluna} IN ({placeholders}) ORDER BY r.created_at DESC, r.id",
            list(alvo_ids),
        )
        for a in avaliacoes:
            resultado.setdefault(a.alvo_id, []).append(a)
        return resultado

    def listar_por_usuario(self, user_id: str) -> list[Avaliacao]:
        """Avaliacoes de agentes e agencias do usuario, mais recentes primeiro."""
        avaliacoes = [
            a
            for tipo in TipoAlvo
            for a in self._consultar(tipo, _select(tipo) + " WHERE r.user_id = ?", [user_id])
        ]
        return sorted(avaliacoes, key=lambda a: a.criado_em or datetime.min, reverse=True)

    def inserir(
        self,
        alvo_tipo: TipoAlvo,
        alvo_id: str,
        user_id: str,
        nota: NotaAvaliacao,
        comentario: str,
    ) -> Avaliacao:
        tabela, coluna = _TABELAS[alvo_tipo]
        avaliacao_id = str(uuid.uuid4())
        self._conn.execute(
            f"INSERT INTO {tabela} (id, {coluna}, user_id, rating, comment) VALUES (?, ?, ?, ?, ?)",  # noqa: S608
            [avaliacao_id, alvo_id, user_id, nota.valor, comentario],
        )
        return self._consultar(alvo_tipo, _select(alvo_tipo) + " WHERE r.id = ?", [avaliacao_id])[0]

    def _consultar(self, alvo_tipo: TipoAlvo, sql: str, params: list[object]) -> list[Avaliacao]:
        cur = self._conn.execute(sql, params)
        colunas = [d[0] for d in cur.description]
        return [Avaliacao.de_registro(dict(zip(colunas, row)), alvo_tipo) for row in cur.fetchall()]
