# vitrine/application/dtos/avaliacao_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from vitrine.domain.avaliacao.entities import Avaliacao
from vitrine.domain.avaliacao.estatisticas import EstatisticaAvaliacao


class EstatisticaDTO(BaseModel):
    media: float | None
    total: int
    media_exibicao: str

    @classmethod
    def from_domain(cls, estatistica: EstatisticaAvaliacao) -> EstatisticaDTO:
        return cls(
            media=estatistica.media,
            total=estatistica.total,
            media_exibicao=estatistica.media_exibicao,
        )


class AvaliacaoDTO(BaseModel):
    id: str | None
    alvo_tipo: str
    alvo_id: str
    rating: float
    comentario: str
    autor: str | None
    criado_em: str | None

    @classmethod
    def from_domain(cls, a: Avaliacao) -> AvaliacaoDTO:
        return cls(
            id=a.id,
            alvo_tipo=a.alvo_tipo.value,
            alvo_id=a.alvo_id,
            rating=a.rating,
            comentario=a.comentario,
            autor=a.autor,
            criado_em=a.criado_em.isoformat() if a.criado_em else None,
        )


class NovaAvaliacaoDTO(BaseModel):
    rating: int = Field(ge=1, le=5)
    comentario: str = Field(default="", max_length=2000)
