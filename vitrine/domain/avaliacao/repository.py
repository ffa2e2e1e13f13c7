# vitrine/domain/avaliacao/repository.py
from __future__ import annotations

from typing import Protocol

from vitrine.domain.enums import TipoAlvo

from .entities import Avaliacao, NotaAvaliacao


class AvaliacaoRepository(Protocol):
    def listar_por_alvo(self, alvo_tipo: TipoAlvo, alvo_id: str) -> list[Avaliacao]: ...
    def listar_por_alvos(self, alvo_tipo: TipoAlvo, alvo_ids: list[str]) -> dict[str, list[Avaliacao]]: ...
    def inserir(
        self, alvo_tipo: TipoAlvo, alvo_id: str, user_id: str, nota: NotaAvaliacao, comentario: str,
    ) -> Avaliacao: ...
    def listar_por_usuario(self, user_id: str) -> list[Avaliacao]: ...
