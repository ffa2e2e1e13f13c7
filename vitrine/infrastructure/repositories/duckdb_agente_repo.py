# vitrine/infrastructure/repositories/duckdb_agente_repo.py
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import duckdb

from vitrine.domain.agente.entities import Agente
from vitrine.domain.agente.value_objects import NomeAgente, PrecoInicial
from vitrine.domain.enums import Categoria, StatusVerificacao, TipoPreco
from vitrine.infrastructure.duckdb_connection import transacao

_SELECT = """
    SELECT a.id, a.name, a.description, a.category, a.price_type, a.user_id,
           a.verification_status, a.starting_price, a.website_url, a.image_url,
           a.cover_url, a.is_premium, p.username, a.created_at,
           a.rejected_at, a.rejected_reason
    FROM agents a
    LEFT JOIN profiles p ON p.id = a.user_id
"""


class DuckDBAgenteRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, agente_id: str) -> Agente | None:
        row = self._conn.execute(_SELECT + " WHERE a.id = ?", [agente_id]).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar_por_status(self, status: StatusVerificacao) -> list[Agente]:
        rows = self._conn.execute(
            _SELECT + " WHERE a.verification_status = ? ORDER BY a.created_at DESC, a.id",
            [status.value],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_recentes(self, status: StatusVerificacao, limit: int) -> list[Agente]:
        rows = self._conn.execute(
            _SELECT + " WHERE a.verification_status = ? ORDER BY a.created_at DESC, a.id LIMIT ?",
            [status.value, limit],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_por_ids(self, ids: list[str]) -> list[Agente]:
        if not ids:
            return []
        placeholders = ", ".join("?" for _ in ids)
        rows = self._conn.execute(
            _SELECT + f" WHERE a.id IN ({placeholders})",  # noqa: S608
            list(ids),
        ).fetchall()
        por_id = {str(r[0]): self._hidratar(r) for r in rows}
        # preserva a ordem pedida pelo usuario
        return [por_id[i] for i in ids if i in por_id]

    def listar_por_usuario(self, user_id: str) -> list[Agente]:
        rows = self._conn.execute(
            _SELECT + " WHERE a.user_id = ? ORDER BY a.created_at DESC, a.id",
            [user_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def inserir(self, agente: Agente) -> Agente:
        self._conn.execute(
            """INSERT INTO agents
               (id, name, description, image_url, cover_url, website_url, price_type,
                starting_price, category, is_premium, user_id, verification_status)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            [
                agente.id,
                agente.nome.valor,
                agente.descricao,
                agente.image_url,
                agente.cover_url,
                agente.website_url,
                agente.tipo_preco.value,
                agente.preco_inicial.valor if agente.preco_inicial else None,
                agente.categoria.value,
                agente.is_premium,
                agente.user_id,
                agente.status.value,
            ],
        )
        return self._recarregar(agente.id)

    def atualizar(self, agente: Agente) -> Agente:
        self._conn.execute(
            """UPDATE agents SET
                 name = ?, description = ?, image_url = ?, cover_url = ?, website_url = ?,
                 price_type = ?, starting_price = ?, category = ?,
                 verification_status = ?, rejected_at = ?, rejected_reason = ?
               WHERE id = ?""",
            [
                agente.nome.valor,
                agente.descricao,
                agente.image_url,
                agente.cover_url,
                agente.website_url,
                agente.tipo_preco.value,
                agente.preco_inicial.valor if agente.preco_inicial else None,
                agente.categoria.value,
                agente.status.value,
                agente.rejeitado_em,
                agente.motivo_rejeicao,
                agente.id,
            ],
        )
        return self._recarregar(agente.id)

    def remover(self, agente_id: str) -> None:
        with transacao(self._conn) as conn:
            conn.execute("DELETE FROM reviews WHERE agent_id = ?", [agente_id])
            conn.execute("DELETE FROM agents WHERE id = ?", [agente_id])

    def _recarregar(self, agente_id: str) -> Agente:
        agente = self.buscar_por_id(agente_id)
        if agente is None:
            raise RuntimeError(f"Agente {agente_id} sumiu apos escrita")
        return agente

    def _hidratar(self, row: tuple) -> Agente:  # type: ignore[type-arg]
        """Colunas: id(0), name(1), description(2), category(3), price_type(4),
        user_id(5), verification_status(6), starting_price(7), website_url(8),
        image_url(9), cover_url(10), is_premium(11), username(12),
        created_at(13), rejected_at(14), rejected_reason(15)"""
        return Agente(
            id=str(row[0]),
            nome=NomeAgente(str(row[1])),
            descricao=str(row[2] or ""),
            categoria=Categoria(str(row[3])),
            tipo_preco=TipoPreco(str(row[4])),
            user_id=str(row[5]),
            status=StatusVerificacao(str(row[6])),
            preco_inicial=PrecoInicial(Decimal(str(row[7]))) if row[7] is not None else None,
            website_url=str(row[8] or ""),
            image_url=str(row[9]) if row[9] else None,
            cover_url=str(row[10]) if row[10] else None,
            is_premium=bool(row[11]),
            autor=str(row[12]) if row[12] else None,
            criado_em=row[13] if isinstance(row[13], datetime) else None,
            rejeitado_em=row[14] if isinstance(row[14], datetime) else None,
            motivo_rejeicao=str(row[15]) if row[15] else None,
        )
