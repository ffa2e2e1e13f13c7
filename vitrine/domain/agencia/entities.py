# vitrine/domain/agencia/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from vitrine.domain.avaliacao.estatisticas import SEM_AVALIACOES, EstatisticaAvaliacao
from vitrine.domain.enums import StatusVerificacao

from .value_objects import CNPJ, NomeAgencia


@dataclass(frozen=True)
class Agencia:
    """Aggregate Root. Mesma convencao de Agente: estatistica vem de fora."""
    id: str
    nome: NomeAgencia
    cnpj: CNPJ
    descricao: str
    user_id: str
    localizacao: str = ""
    website_url: str = ""
    especialidades: tuple[str, ...] = ()
    total_clientes: int = 0
    status: StatusVerificacao = StatusVerificacao.PENDENTE
    logo_url: str | None = None
    cover_url: str | None = None
    criado_em: datetime | None = None
    rejeitado_em: datetime | None = None
    motivo_rejeicao: str | None = None
    estatistica: EstatisticaAvaliacao = SEM_AVALIACOES

    def __post_init__(self) -> None:
        if self.total_clientes < 0:
            raise ValueError("Total de clientes nao pode ser negativo")

    @property
    def aprovada(self) -> bool:
        return self.status is StatusVerificacao.APROVADO

    def visivel_para(self, user_id: str | None) -> bool:
        """Aprovada e publica; pendente/rejeitada so para o dono."""
        return self.aprovada or (user_id is not None and user_id == self.user_id)
