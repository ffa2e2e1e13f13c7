# vitrine/application/services/estatisticas.py
#
# Single place where listings and detail pages attach rating statistics.
# Marketplace, ranking, comparison, agent detail and agency detail all go
# through these helpers, so the same ratings always yield the same numbers.
from __future__ import annotations

from dataclasses import replace

from vitrine.domain.agencia.entities import Agencia
from vitrine.domain.agente.entities import Agente
from vitrine.domain.avaliacao.estatisticas import agregar_avaliacoes
from vitrine.domain.avaliacao.repository import AvaliacaoRepository
from vitrine.domain.enums import TipoAlvo


def com_estatisticas_agentes(agentes: list[Agente], repo: AvaliacaoRepository) -> list[Agente]:
    por_id = repo.listar_por_alvos(TipoAlvo.AGENTE, [a.id for a in agentes])
    return [replace(a, estatistica=agregar_avaliacoes(por_id.get(a.id))) for a in agentes]


def com_estatisticas_agencias(agencias: list[Agencia], repo: AvaliacaoRepository) -> list[Agencia]:
    por_id = repo.listar_por_alvos(TipoAlvo.AGENCIA, [a.id for a in agencias])
    return [replace(a, estatistica=agregar_avaliacoes(por_id.get(a.id))) for a in agencias]
