# vitrine/application/dtos/agencia_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from vitrine.domain.agencia.entities import Agencia

from .avaliacao_dto import EstatisticaDTO


class AgenciaResumoDTO(BaseModel):
    id: str
    nome: str
    cnpj: str
    descricao: str
    localizacao: str
    website_url: str
    especialidades: list[str]
    total_clientes: int
    verificada: bool
    status: str
    logo_url: str | None
    cover_url: str | None
    criado_em: str | None
    estatistica: EstatisticaDTO

    @classmethod
    def from_domain(cls, a: Agencia) -> AgenciaResumoDTO:
        return cls(
            id=a.id,
            nome=a.nome.valor,
            cnpj=a.cnpj.formatado,
            descricao=a.descricao,
            localizacao=a.localizacao,
            website_url=a.website_url,
            especialidades=list(a.especialidades),
            total_clientes=a.total_clientes,
            verificada=a.aprovada,
            status=a.status.value,
            logo_url=a.logo_url,
            cover_url=a.cover_url,
            criado_em=a.criado_em.isoformat() if a.criado_em else None,
            estatistica=EstatisticaDTO.from_domain(a.estatistica),
        )


class AgenciaDetalheDTO(AgenciaResumoDTO):
    rejeitado_em: str | None = None
    motivo_rejeicao: str | None = None

    @classmethod
    def from_domain(cls, a: Agencia) -> AgenciaDetalheDTO:
        resumo = AgenciaResumoDTO.from_domain(a)
        return cls(
            **resumo.model_dump(),
            rejeitado_em=a.rejeitado_em.isoformat() if a.rejeitado_em else None,
            motivo_rejeicao=a.motivo_rejeicao,
        )


class AgenciaFormDTO(BaseModel):
    nome: str = Field(min_length=1, max_length=200)
    cnpj: str = Field(min_length=1, max_length=32)
    descricao: str = Field(min_length=1, max_length=5000)
    website_url: str = Field(default="", max_length=500)
    localizacao: str = Field(default="", max_length=200)
    especialidades: list[str] = Field(default_factory=list)
    logo_url: str | None = None
    cover_url: str | None = None


class ValidacaoCNPJDTO(BaseModel):
    valido: bool
    digitos: str
    formatado: str
