# vitrine/application/dtos/agente_dto.py
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from vitrine.domain.agente.entities import Agente
from vitrine.domain.agente.value_objects import formatar_preco
from vitrine.domain.enums import Categoria, TipoPreco

from .avaliacao_dto import EstatisticaDTO


class AgenteResumoDTO(BaseModel):
    id: str
    nome: str
    descricao: str
    categoria: str
    categoria_nome: str
    tipo_preco: str
    preco_inicial: str | None
    preco_formatado: str
    website_url: str
    image_url: str | None
    cover_url: str | None
    is_premium: bool
    autor: str | None
    status: str
    criado_em: str | None
    estatistica: EstatisticaDTO

    @classmethod
    def from_domain(cls, a: Agente) -> AgenteResumoDTO:
        return cls(
            id=a.id,
            nome=a.nome.valor,
            descricao=a.descricao,
            categoria=a.categoria.value,
            categoria_nome=a.categoria.nome_exibicao,
            tipo_preco=a.tipo_preco.value,
            preco_inicial=str(a.preco_inicial.valor) if a.preco_inicial else None,
            preco_formatado=formatar_preco(a.preco_inicial),
            website_url=a.website_url,
            image_url=a.image_url,
            cover_url=a.cover_url,
            is_premium=a.is_premium,
            autor=a.autor,
            status=a.status.value,
            criado_em=a.criado_em.isoformat() if a.criado_em else None,
            estatistica=EstatisticaDTO.from_domain(a.estatistica),
        )


class AgenteDetalheDTO(AgenteResumoDTO):
    rejeitado_em: str | None = None
    motivo_rejeicao: str | None = None

    @classmethod
    def from_domain(cls, a: Agente) -> AgenteDetalheDTO:
        resumo = AgenteResumoDTO.from_domain(a)
        return cls(
            **resumo.model_dump(),
            rejeitado_em=a.rejeitado_em.isoformat() if a.rejeitado_em else None,
            motivo_rejeicao=a.motivo_rejeicao,
        )


class AgenteFormDTO(BaseModel):
    """Corpo de submissao e de edicao (o formulario sempre envia tudo)."""
    nome: str = Field(min_length=1, max_length=200)
    descricao: str = Field(min_length=1, max_length=5000)
    website_url: str = Field(default="", max_length=500)
    tipo_preco: TipoPreco
    preco_inicial: Decimal | None = Field(default=None, ge=0)
    categoria: Categoria
    image_url: str | None = None
    cover_url: str | None = None
