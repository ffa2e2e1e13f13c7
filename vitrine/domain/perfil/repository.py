# vitrine/domain/perfil/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Perfil


class PerfilRepository(Protocol):
    def buscar_por_id(self, perfil_id: str) -> Perfil | None: ...
    def inserir(self, perfil: Perfil) -> Perfil: ...
