# vitrine/application/dtos/comparacao_dto.py
from __future__ import annotations

from pydantic import BaseModel

from vitrine.domain.comparacao.lista import MAX_AGENTES, ListaComparacao


class ListaComparacaoDTO(BaseModel):
    agentes: list[str]
    cheia: bool
    maximo: int = MAX_AGENTES

    @classmethod
    def from_domain(cls, lista: ListaComparacao) -> ListaComparacaoDTO:
        return cls(agentes=list(lista.agentes), cheia=lista.cheia)
