# vitrine/domain/agencia/filtros.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .entities import Agencia


@dataclass(frozen=True)
class FiltroAgencias:
    busca: str = ""
    especialidades: frozenset[str] = frozenset()
    min_clientes: int | None = None
    # Filtro "Apenas verificadas" da pagina de agencias. O diretorio publico ja
    # carrega so aprovadas, entao ali ele nunca remove nada.
    somente_verificadas: bool = False


def _corresponde_busca(agencia: Agencia, busca: str) -> bool:
    termo = busca.strip().lower()
    if not termo:
        return True
    return (
        termo in agencia.nome.valor.lower()
        or termo in agencia.descricao.lower()
        or termo in agencia.localizacao.lower()
        or any(termo in e.lower() for e in agencia.especialidades)
    )


def filtrar_agencias(agencias: Iterable[Agencia], filtro: FiltroAgencias) -> list[Agencia]:
    """Especialidades: basta uma em comum. min_clientes None/0 desliga o filtro."""
    resultado = []
    for agencia in agencias:
        if not _corresponde_busca(agencia, filtro.busca):
            continue
        if filtro.especialidades and not filtro.especialidades.intersection(agencia.especialidades):
            continue
        if filtro.min_clientes and agencia.total_clientes < filtro.min_clientes:
            continue
        if filtro.somente_verificadas and not agencia.aprovada:
            continue
        resultado.append(agencia)
    return resultado
