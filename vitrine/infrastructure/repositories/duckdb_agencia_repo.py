# vitrine/infrastructure/repositories/duckdb_agencia_repo.py
from __future__ import annotations

from datetime import datetime

import duckdb
from loguru import logger

from vitrine.domain.agencia.entities import Agencia
from vitrine.domain.agencia.value_objects import CNPJ, NomeAgencia
from vitrine.domain.enums import StatusVerificacao
from vitrine.infrastructure.duckdb_connection import transacao

_SELECT = """
    SELECT id, name, cnpj, description, user_id, location, website_url,
           specialties, total_clients, verification_status, logo_url,
           cover_url, created_at, rejected_at, rejected_reason
    FROM agencies
"""


class DuckDBAgenciaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, agencia_id: str) -> Agencia | None:
        row = self._conn.execute(_SELECT + " WHERE id = ?", [agencia_id]).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def buscar_por_cnpj(self, cnpj: CNPJ) -> Agencia | None:
        row = self._conn.execute(_SELECT + " WHERE cnpj = ?", [cnpj.valor]).fetchone()
        if row is None:
            return None
        return self._hidratar(row)

    def listar_por_status(self, status: StatusVerificacao) -> list[Agencia]:
        """Ordem do diretorio: mais clientes primeiro."""
        rows = self._conn.execute(
            _SELECT + " WHERE verification_status = ? ORDER BY total_clients DESC, created_at DESC, id",
            [status.value],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def listar_por_usuario(self, user_id: str) -> list[Agencia]:
        rows = self._conn.execute(
            _SELECT + " WHERE user_id = ? ORDER BY created_at DESC, id",
            [user_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def inserir(self, agencia: Agencia) -> Agencia:
        self._conn.execute(
            """INSERT INTO agencies
               (id, name, cnpj, description, logo_url, cover_url, website_url,
                location, specialties, total_clients, user_id, verification_status)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            [
                agencia.id,
                agencia.nome.valor,
                agencia.cnpj.valor,
                agencia.descricao,
                agencia.logo_url,
                agencia.cover_url,
                agencia.website_url,
                agencia.localizacao,
                list(agencia.especialidades),
                agencia.total_clientes,
                agencia.user_id,
                agencia.status.value,
            ],
        )
        return self._recarregar(agencia.id)

    def atualizar(self, agencia: Agencia) -> Agencia:
        self._conn.execute(
            """UPDATE agencies SET
                 name = ?, cnpj = ?, description = ?, logo_url = ?, cover_url = ?,
                 website_url = ?, location = ?, specialties = ?,
                 verification_status = ?, rejected_at = ?, rejected_reason = ?
               WHERE id = ?""",
            [
                agencia.nome.valor,
                agencia.cnpj.valor,
                agencia.descricao,
                agencia.logo_url,
                agencia.cover_url,
                agencia.website_url,
                agencia.localizacao,
                list(agencia.especialidades),
                agencia.status.value,
                agencia.rejeitado_em,
                agencia.motivo_rejeicao,
                agencia.id,
            ],
        )
        return self._recarregar(agencia.id)

    def remover(self, agencia_id: str) -> None:
        with transacao(self._conn) as conn:
            conn.execute("DELETE FROM agency_reviews WHERE agency_id = ?", [agencia_id])
            conn.execute("DELETE FROM agencies WHERE id = ?", [agencia_id])

    def _recarregar(self, agencia_id: str) -> Agencia:
        agencia = self.buscar_por_id(agencia_id)
        if agencia is None:
            raise RuntimeError(f"Agencia {agencia_id} sumiu apos escrita")
        return agencia

    def _hidratar(self, row: tuple) -> Agencia:  # type: ignore[type-arg]
        """Colunas: id(0), name(1), cnpj(2), description(3), user_id(4),
        location(5), website_url(6), specialties(7), total_clients(8),
        verification_status(9), logo_url(10), cover_url(11), created_at(12),
        rejected_at(13), rejected_reason(14)"""
        cnpj = CNPJ.armazenado(str(row[2]))
        if not cnpj.valido:
            logger.warning("Agencia {} com CNPJ invalido armazenado: {!r}", row[0], row[2])
        return Agencia(
            id=str(row[0]),
            nome=NomeAgencia(str(row[1])),
            cnpj=cnpj,
            descricao=str(row[3] or ""),
            user_id=str(row[4]),
            localizacao=str(row[5] or ""),
            website_url=str(row[6] or ""),
            especialidades=tuple(str(e) for e in (row[7] or ())),
            total_clientes=int(row[8]) if row[8] else 0,
            status=StatusVerificacao(str(row[9])),
            logo_url=str(row[10]) if row[10] else None,
            cover_url=str(row[11]) if row[11] else None,
            criado_em=row[12] if isinstance(row[12], datetime) else None,
            rejeitado_em=row[13] if isinstance(row[13], datetime) else None,
            motivo_rejeicao=str(row[14]) if row[14] else None,
        )
