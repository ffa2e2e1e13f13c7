# vitrine/application/dtos/perfil_dto.py
from __future__ import annotations

from pydantic import BaseModel

from vitrine.domain.perfil.entities import Perfil

from .agencia_dto import AgenciaDetalheDTO
from .agente_dto import AgenteDetalheDTO
from .avaliacao_dto import AvaliacaoDTO


class PerfilDTO(BaseModel):
    id: str
    username: str
    full_name: str | None
    avatar_url: str | None
    is_premium_user: bool

    @classmethod
    def from_domain(cls, p: Perfil) -> PerfilDTO:
        return cls(
            id=p.id,
            username=p.username,
            full_name=p.full_name,
            avatar_url=p.avatar_url,
            is_premium_user=p.is_premium_user,
        )


class PainelPerfilDTO(BaseModel):
    perfil: PerfilDTO
    agentes: list[AgenteDetalheDTO]
    agencias: list[AgenciaDetalheDTO]
    avaliacoes: list[AvaliacaoDTO]
