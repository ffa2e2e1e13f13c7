# vitrine/application/dtos/verificacao_dto.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .agencia_dto import AgenciaDetalheDTO
from .agente_dto import AgenteDetalheDTO


class PendentesDTO(BaseModel):
    agentes: list[AgenteDetalheDTO]
    agencias: list[AgenciaDetalheDTO]


class DecisaoDTO(BaseModel):
    acao: Literal["aprovar", "rejeitar"]
    motivo: str | None = Field(default=None, max_length=1000)
