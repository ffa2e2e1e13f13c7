# vitrine/domain/agencia/repository.py
from __future__ import annotations

from typing import Protocol

from vitrine.domain.enums import StatusVerificacao

from .entities import Agencia
from .value_objects import CNPJ


class AgenciaRepository(Protocol):
    def buscar_por_id(self, agencia_id: str) -> Agencia | None: ...
    def buscar_por_cnpj(self, cnpj: CNPJ) -> Agencia | None: ...
    def listar_por_status(self, status: StatusVerificacao) -> list[Agencia]: ...
    def listar_por_usuario(self, user_id: str) -> list[Agencia]: ...
    def inserir(self, agencia: Agencia) -> Agencia: ...
    def atualizar(self, agencia: Agencia) -> Agencia: ...
    def remover(self, agencia_id: str) -> None: ...
