# vitrine/domain/comparacao/lista.py
from __future__ import annotations

from dataclasses import dataclass

MAX_AGENTES = 3


@dataclass(frozen=True)
class ListaComparacao:
    """Selecao de agentes para comparar. Imutavel: cada operacao devolve
    uma nova lista. Nunca passa de MAX_AGENTES nem repete ids; adicionar
    alem do limite ou repetido devolve a propria lista."""

    agentes: tuple[str, ...] = ()

    @property
    def cheia(self) -> bool:
        return len(self.agentes) >= MAX_AGENTES

    def adicionar(self, agente_id: str) -> ListaComparacao:
        if self.cheia or agente_id in self.agentes:
            return self
        return ListaComparacao(self.agentes + (agente_id,))

    def remover(self, agente_id: str) -> ListaComparacao:
        return ListaComparacao(tuple(a for a in self.agentes if a != agente_id))

    def limpar(self) -> ListaComparacao:
        return ListaComparacao()
