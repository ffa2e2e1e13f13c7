# vitrine/application/services/verificacao_service.py
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Literal

from loguru import logger

from vitrine.domain.agencia.repository import AgenciaRepository
from vitrine.domain.agente.repository import AgenteRepository
from vitrine.domain.enums import StatusVerificacao
from vitrine.domain.erros import AcessoNegado, Conflito, DadosInvalidos, NaoEncontrado
from vitrine.domain.perfil.repository import PerfilRepository

from ..dtos.agencia_dto import AgenciaDetalheDTO
from ..dtos.agente_dto import AgenteDetalheDTO
from ..dtos.verificacao_dto import DecisaoDTO, PendentesDTO

TipoItem = Literal["agente", "agencia"]


class VerificacaoService:
    """Moderacao de submissoes. So perfis premium enxergam a fila."""

    def __init__(
        self,
        perfil_repo: PerfilRepository,
        agente_repo: AgenteRepository,
        agencia_repo: AgenciaRepository,
    ) -> None:
        self._perfil_repo = perfil_repo
        self._agente_repo = agente_repo
        self._agencia_repo = agencia_repo

    def pendentes(self, ator_id: str) -> PendentesDTO:
        self._exigir_revisor(ator_id)
        return PendentesDTO(
            agentes=[
                AgenteDetalheDTO.from_domain(a)
                for a in self._agente_repo.listar_por_status(StatusVerificacao.PENDENTE)
            ],
            agencias=[
                AgenciaDetalheDTO.from_domain(a)
                for a in self._agencia_repo.listar_por_status(StatusVerificacao.PENDENTE)
            ],
        )

    def decidir(
        self,
        ator_id: str,
        tipo: TipoItem,
        item_id: str,
        decisao: DecisaoDTO,
        agora: datetime | None = None,
    ) -> AgenteDetalheDTO | AgenciaDetalheDTO:
        self._exigir_revisor(ator_id)
        motivo = (decisao.motivo or "").strip()
        if decisao.acao == "rejeitar" and not motivo:
            raise DadosInvalidos("Informe o motivo da rejeição")

        if decisao.acao == "aprovar":
            campos = {
                "status": StatusVerificacao.APROVADO,
                "rejeitado_em": None,
                "motivo_rejeicao": None,
            }
        else:
            campos = {
                "status": StatusVerificacao.REJEITADO,
                "rejeitado_em": agora or datetime.now(),
                "motivo_rejeicao": motivo,
            }

        if tipo == "agente":
            agente = self._agente_repo.buscar_por_id(item_id)
            if agente is None:
                raise NaoEncontrado("Agente não encontrado")
            self._exigir_pendente(agente.status)
            resultado: AgenteDetalheDTO | AgenciaDetalheDTO = AgenteDetalheDTO.from_domain(
                self._agente_repo.atualizar(replace(agente, **campos)),  # type: ignore[arg-type]
            )
        else:
            agencia = self._agencia_repo.buscar_por_id(item_id)
            if agencia is None:
                raise NaoEncontrado("Agência não encontrada")
            self._exigir_pendente(agencia.status)
            resultado = AgenciaDetalheDTO.from_domain(
                self._agencia_repo.atualizar(replace(agencia, **campos)),  # type: ignore[arg-type]
            )

        logger.info("Verificacao: {} {} -> {} por {}", tipo, item_id, campos["status"], ator_id)
        return resultado

    def _exigir_revisor(self, ator_id: str) -> None:
        perfil = self._perfil_repo.buscar_por_id(ator_id)
        if perfil is None or not perfil.pode_verificar:
            raise AcessoNegado("Acesso restrito a revisores")

    @staticmethod
    def _exigir_pendente(status: StatusVerificacao) -> None:
        if status is not StatusVerificacao.PENDENTE:
            raise Conflito("Este item já foi verificado")
