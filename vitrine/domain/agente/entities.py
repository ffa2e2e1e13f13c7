# vitrine/domain/agente/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from vitrine.domain.avaliacao.estatisticas import SEM_AVALIACOES, EstatisticaAvaliacao
from vitrine.domain.enums import Categoria, StatusVerificacao, TipoPreco

from .value_objects import NomeAgente, PrecoInicial


@dataclass(frozen=True)
class Agente:
    """Aggregate Root. Imutavel: a estatistica de avaliacoes e calculada
    externamente por agregar_avaliacoes e passada na construcao."""
    id: str
    nome: NomeAgente
    descricao: str
    categoria: Categoria
    tipo_preco: TipoPreco
    user_id: str
    status: StatusVerificacao = StatusVerificacao.PENDENTE
    preco_inicial: PrecoInicial | None = None
    website_url: str = ""
    image_url: str | None = None
    cover_url: str | None = None
    is_premium: bool = False
    autor: str | None = None
    criado_em: datetime | None = None
    rejeitado_em: datetime | None = None
    motivo_rejeicao: str | None = None
    estatistica: EstatisticaAvaliacao = SEM_AVALIACOES

    @property
    def aprovado(self) -> bool:
        return self.status is StatusVerificacao.APROVADO

    def visivel_para(self, user_id: str | None) -> bool:
        """Aprovado e publico; pendente/rejeitado so para o dono."""
        return self.aprovado or (user_id is not None and user_id == self.user_id)
