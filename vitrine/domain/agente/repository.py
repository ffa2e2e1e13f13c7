# vitrine/domain/agente/repository.py
from __future__ import annotations

from typing import Protocol

from vitrine.domain.enums import StatusVerificacao

from .entities import Agente


class AgenteRepository(Protocol):
    def buscar_por_id(self, agente_id: str) -> Agente | None: ...
    def listar_por_status(self, status: StatusVerificacao) -> list[Agente]: ...
    def listar_recentes(self, status: StatusVerificacao, limit: int) -> list[Agente]: ...
    def listar_por_ids(self, ids: list[str]) -> list[Agente]: ...
    def listar_por_usuario(self, user_id: str) -> list[Agente]: ...
    def inserir(self, agente: Agente) -> Agente: ...
    def atualizar(self, agente: Agente) -> Agente: ...
    def remover(self, agente_id: str) -> None: ...
