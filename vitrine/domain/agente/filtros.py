# vitrine/domain/agente/filtros.py
#
# Pure filtering/sorting over agents that already carry their
# EstatisticaAvaliacao. No IO; the services fetch and then call these.
#
# Invariants:
#   - An empty selection (categorias, tipos_preco) matches every agent.
#   - nota_minima None or 0 disables the rating filter; agents without
#     reviews never satisfy a positive nota_minima.
#   - ordenar_ranking is stable: agents with the same (media, total) keep
#     their input order.
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .entities import Agente


@dataclass(frozen=True)
class FiltroMarketplace:
    busca: str = ""
    categorias: frozenset[str] = frozenset()
    tipos_preco: frozenset[str] = frozenset()
    nota_minima: float | None = None

    @property
    def qtd_ativos(self) -> int:
        """Quantidade exibida no badge de filtros (busca nao conta)."""
        return len(self.categorias) + len(self.tipos_preco) + (1 if self.nota_minima else 0)


def corresponde_busca(agente: Agente, busca: str) -> bool:
    termo = busca.strip().lower()
    if not termo:
        return True
    return (
        termo in agente.nome.valor.lower()
        or termo in agente.descricao.lower()
        or termo in agente.categoria.value
        or termo in agente.categoria.nome_exibicao.lower()
    )


def _corresponde(agente: Agente, filtro: FiltroMarketplace) -> bool:
    if not corresponde_busca(agente, filtro.busca):
        return False
    if filtro.categorias and agente.categoria.value not in filtro.categorias:
        return False
    if filtro.tipos_preco and agente.tipo_preco.value not in filtro.tipos_preco:
        return False
    if filtro.nota_minima:
        media = agente.estatistica.media
        if media is None or media < filtro.nota_minima:
            return False
    return True


def filtrar_agentes(agentes: Iterable[Agente], filtro: FiltroMarketplace) -> list[Agente]:
    return [a for a in agentes if _corresponde(a, filtro)]


def ordenar_ranking(agentes: Iterable[Agente]) -> list[Agente]:
    """Maior media primeiro (sem avaliacoes conta como 0); empate -> mais avaliacoes."""
    return sorted(
        agentes,
        key=lambda a: (-(a.estatistica.media or 0.0), -a.estatistica.total),
    )


def filtrar_categorias(agentes: Iterable[Agente], categorias: Iterable[str]) -> list[Agente]:
    """Filtro do ranking: comparacao case-insensitive pelo id da categoria."""
    selecionadas = {c.lower() for c in categorias}
    if not selecionadas:
        return list(agentes)
    return [a for a in agentes if a.categoria.value.lower() in selecionadas]
